"""Tests for structured logging setup."""

from __future__ import annotations

import json
import logging

import structlog

from funding_radar.logging import get_logger, setup_logging


class TestSetupLogging:
    def test_json_format(self, capsys):
        setup_logging(level="INFO", log_format="json")
        logger = get_logger("test_json")
        logger.info("cycle_published", symbols=2)

        captured = capsys.readouterr()
        line = json.loads(captured.err.strip())
        assert line["event"] == "cycle_published"
        assert line["symbols"] == 2
        assert line["level"] == "info"
        assert "timestamp" in line

    def test_console_format(self, capsys):
        setup_logging(level="INFO", log_format="console")
        logger = get_logger("test_console")
        logger.info("hello console", narrative="neutral")

        captured = capsys.readouterr()
        assert "hello console" in captured.err
        assert "neutral" in captured.err

    def test_log_level_filtering(self, capsys):
        setup_logging(level="WARNING", log_format="json")
        logger = get_logger("test_level")
        logger.info("should be hidden")
        logger.warning("should appear")

        captured = capsys.readouterr()
        assert "should be hidden" not in captured.err
        assert "should appear" in captured.err

    def test_get_logger_with_context(self, capsys):
        setup_logging(level="INFO", log_format="json")
        logger = get_logger("test_ctx", cycle="market")
        logger.info("context test")

        line = json.loads(capsys.readouterr().err.strip())
        assert line["cycle"] == "market"

    def test_stdlib_records_rendered_as_json(self, capsys):
        setup_logging(level="INFO", log_format="json")
        logging.getLogger("uvicorn.error").warning("plain stdlib")

        line = json.loads(capsys.readouterr().err.strip())
        assert line["event"] == "plain stdlib"
        assert line["level"] == "warning"

    def test_httpx_quieted(self, capsys):
        setup_logging(level="INFO", log_format="json")
        logging.getLogger("httpx").info("HTTP Request: GET ...")

        assert "HTTP Request" not in capsys.readouterr().err
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_contextvars_binding(self, capsys):
        setup_logging(level="INFO", log_format="json")
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id="abc123")

        logger = get_logger("test_ctxvars")
        logger.info("with context var")

        line = json.loads(capsys.readouterr().err.strip())
        assert line["request_id"] == "abc123"

        structlog.contextvars.clear_contextvars()
