"""Tick scheduler — fixed-interval ticks that never overlap per cycle name."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

from funding_radar.logging import get_logger

log = get_logger(__name__)

Job = Callable[[], Awaitable[object]]


class TickScheduler:
    """Fire a job every ``interval_s`` seconds, skipping ticks while one is in flight.

    The in-flight flag is tracked per cycle name, so a slow cycle delays only
    its own next publish and two ticks of the same cycle never race to
    publish out of order.
    """

    def __init__(self, interval_s: float) -> None:
        self.interval_s = interval_s
        self._in_flight: set[str] = set()
        self._tasks: set[asyncio.Task] = set()
        self.skipped: dict[str, int] = {}

    def is_in_flight(self, name: str) -> bool:
        return name in self._in_flight

    async def run_once(self, name: str, job: Job) -> bool:
        """Run *job* unless a previous tick of *name* is outstanding.

        Returns False when the tick was skipped.
        """
        if name in self._in_flight:
            self.skipped[name] = self.skipped.get(name, 0) + 1
            log.warning("tick_skipped", cycle=name, skipped=self.skipped[name])
            return False
        self._in_flight.add(name)
        try:
            await job()
        finally:
            self._in_flight.discard(name)
        return True

    def tick(self, name: str, job: Job) -> asyncio.Task:
        """Start one tick in the background and return its task."""
        task = asyncio.create_task(self.run_once(name, job))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def run_forever(self, name: str, job: Job) -> None:
        """Tick immediately, then every ``interval_s`` until cancelled.

        Cancellation propagates to outstanding ticks and waits for them to
        unwind before returning.
        """
        try:
            while True:
                self.tick(name, job)
                await asyncio.sleep(self.interval_s)
        finally:
            pending = list(self._tasks)
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
