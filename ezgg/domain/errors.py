"""Failures raised by the fetch layer and the profile pipeline."""
from typing import Optional


class GameAPIError(Exception):
    """Base class for every failure the lookup pipeline knows how to classify."""


class NetworkError(GameAPIError):
    """Connectivity failure: timeout, DNS, connection reset. Never retried."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class HttpError(GameAPIError):
    """Non-200, non-429 response. Never retried."""

    def __init__(self, status_code: int, url: str = ""):
        super().__init__(f"HTTP request failed with status code {status_code}")
        self.status_code = status_code
        self.url = url


class RateLimitExceeded(GameAPIError):
    """429 responses persisted past the retry budget."""

    def __init__(self, attempts: int, url: str = ""):
        super().__init__(f"Rate limit exceeded after {attempts} attempts")
        self.attempts = attempts
        self.url = url


class DecodeError(GameAPIError):
    """Response body is not JSON or not the shape the endpoint promises."""


class NotFound(GameAPIError):
    """Identity or summoner lookup returned no data."""
