"""Error taxonomy shared by the aggregation cycle and the news proxy.

Partial data (a symbol missing from one collection, a non-numeric field) is
never raised; it is absorbed by parsing and filtering in the join.
"""

from __future__ import annotations


class FundingRadarError(Exception):
    """Base class. ``http_status`` is what the API layer answers with."""

    http_status: int = 500

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class UpstreamError(FundingRadarError):
    """An upstream (Binance, NewsAPI) request failed or returned an error body."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        code: str | None = None,
        details: object = None,
    ) -> None:
        super().__init__(message, code=code)
        self.http_status = status_code if status_code is not None else 500
        self.details = details


class ConfigurationMissingError(FundingRadarError):
    """A required upstream credential is not configured. Never retried."""

    http_status = 500


class InvalidRequestError(FundingRadarError):
    """A required request parameter is absent or malformed. Never retried."""

    http_status = 400
