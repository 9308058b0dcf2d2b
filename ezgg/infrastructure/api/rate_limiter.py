"""Proactive sliding-window rate limiter for the Riot API."""
import asyncio
import logging
import time
from collections import deque
from typing import Awaitable, Callable, Deque, List, Sequence, Tuple

logger = logging.getLogger(__name__)

Window = Tuple[int, float]  # (max requests, window seconds)


class RateLimiter:
    """
    Sliding-window limiter over any number of windows, e.g. Riot's
    personal-key limits ``[(20, 1.0), (100, 120.0)]``.

    ``acquire()`` books a slot in every window or sleeps until one frees
    up. Booking is synchronous (no await between check and append), so it
    is atomic on the event loop without holding a lock while sleeping.
    """

    def __init__(
        self,
        windows: Sequence[Window],
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._windows: List[Window] = [(int(n), float(w)) for n, w in windows if n > 0]
        self._stamps: List[Deque[float]] = [deque() for _ in self._windows]
        self._clock = clock
        self._sleep = sleep

    @classmethod
    def riot_personal(cls, per_1_sec: int, per_2_min: int) -> "RateLimiter":
        return cls([(per_1_sec, 1.0), (per_2_min, 120.0)])

    def _try_reserve(self, now: float) -> float:
        """Book a slot and return 0, or return how long to wait."""
        wait = 0.0
        for (limit, span), stamps in zip(self._windows, self._stamps):
            while stamps and now - stamps[0] >= span:
                stamps.popleft()
            if len(stamps) >= limit:
                wait = max(wait, span - (now - stamps[0]) + 0.01)
        if wait > 0:
            return wait
        for stamps in self._stamps:
            stamps.append(now)
        return 0.0

    async def acquire(self) -> None:
        while True:
            wait = self._try_reserve(self._clock())
            if wait <= 0:
                return
            logger.debug("rate limit window full, waiting %.2fs", wait)
            await self._sleep(wait)

    def get_status(self) -> List[Tuple[int, int, float]]:
        """(used, limit, window seconds) per window."""
        now = self._clock()
        return [
            (sum(1 for t in stamps if now - t < span), limit, span)
            for (limit, span), stamps in zip(self._windows, self._stamps)
        ]

    def reset(self) -> None:
        for stamps in self._stamps:
            stamps.clear()
