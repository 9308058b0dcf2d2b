"""Single GET with 429 backoff."""
import asyncio
import logging
from typing import Any, Awaitable, Callable, Mapping, Optional

import httpx

from ezgg.config import settings
from ezgg.domain.errors import HttpError, NetworkError, RateLimitExceeded
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class RateLimitedFetcher:
    """Issues GETs on a shared ``httpx.AsyncClient``.

    - 200 returns the body bytes.
    - 429 sleeps for ``Retry-After`` seconds (default when missing or bad)
      and retries, up to ``max_attempts`` attempts in total.
    - Any other status raises HttpError at once.
    - Transport failures raise NetworkError at once; they are not retried.
    """

    def __init__(
        self,
        session: httpx.AsyncClient,
        *,
        max_attempts: Optional[int] = None,
        default_retry_after: Optional[float] = None,
        rate_limiter: Optional[RateLimiter] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.session = session
        self.max_attempts = max(1, max_attempts if max_attempts is not None else settings.MAX_ATTEMPTS)
        self.default_retry_after = (
            default_retry_after if default_retry_after is not None else settings.DEFAULT_RETRY_AFTER
        )
        self.rate_limiter = rate_limiter
        self._sleep = sleep
        self.last_status_code: Optional[int] = None

    def _retry_after(self, response: httpx.Response) -> float:
        raw = response.headers.get("Retry-After")
        if raw is None:
            return self.default_retry_after
        try:
            # integer seconds; rejects "inf", "nan" and exponent forms
            value = int(raw.strip())
        except ValueError:
            return self.default_retry_after
        return float(value) if value >= 0 else self.default_retry_after

    async def fetch(self, url: str, params: Optional[Mapping[str, Any]] = None) -> bytes:
        for attempt in range(1, self.max_attempts + 1):
            if self.rate_limiter is not None:
                await self.rate_limiter.acquire()

            try:
                response = await self.session.get(url, params=params)
            except httpx.HTTPError as exc:
                logger.warning("network error on %s: %r", url, exc)
                raise NetworkError(str(exc) or type(exc).__name__, cause=exc) from exc

            self.last_status_code = response.status_code

            if response.status_code == 200:
                return response.content

            if response.status_code == 429:
                if attempt == self.max_attempts:
                    break
                retry_after = self._retry_after(response)
                logger.warning(
                    "429 rate-limited on %s, waiting %ss (attempt %d/%d)",
                    url, retry_after, attempt, self.max_attempts,
                )
                await self._sleep(retry_after)
                continue

            logger.warning("HTTP %d for %s", response.status_code, url)
            raise HttpError(response.status_code, url)

        logger.error("rate limit budget exhausted for %s", url)
        raise RateLimitExceeded(self.max_attempts, url)
