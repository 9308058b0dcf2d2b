"""Failure classification for display."""
from __future__ import annotations

from typing import Optional

from ezgg.domain.entities import ErrorReport
from ezgg.domain.enums import ErrorKind
from ezgg.domain.errors import DecodeError, HttpError, NetworkError, NotFound, RateLimitExceeded


def classify(exc: BaseException) -> ErrorReport:
    """Map any failure to a kind plus a user-facing message."""
    if isinstance(exc, NetworkError):
        return ErrorReport(ErrorKind.NETWORK, f"Network error: {exc}")
    if isinstance(exc, DecodeError):
        return ErrorReport(ErrorKind.DECODE, f"Data error: {exc}")
    if isinstance(exc, RateLimitExceeded):
        return ErrorReport(ErrorKind.RATE_LIMIT, "Error: Rate limit exceeded")
    if isinstance(exc, NotFound):
        return ErrorReport(ErrorKind.NOT_FOUND, f"Error: {exc}")
    if isinstance(exc, HttpError):
        kind = ErrorKind.NOT_FOUND if exc.status_code == 404 else ErrorKind.UNKNOWN
        return ErrorReport(kind, f"Error: {exc}")
    return ErrorReport(ErrorKind.UNKNOWN, f"Error: {str(exc) or type(exc).__name__}")


class ErrorReporter:
    """One "current error" slot for one aggregation session.

    Each new report overwrites the slot; ``clear()`` empties it before a
    new load starts. Sessions never share a reporter.
    """

    def __init__(self) -> None:
        self.current: Optional[ErrorReport] = None

    def report(self, exc: BaseException) -> ErrorReport:
        self.current = classify(exc)
        return self.current

    def clear(self) -> None:
        self.current = None

    @property
    def message(self) -> Optional[str]:
        return self.current.message if self.current else None
