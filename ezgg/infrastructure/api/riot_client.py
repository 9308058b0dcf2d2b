"""Riot Games API client."""
import asyncio
import logging
from typing import Dict, List, Optional
from urllib.parse import quote

import httpx

from ezgg.config import settings
from ezgg.core.logging import traceable
from ezgg.domain.entities import Account, MasteryEntry, MatchDetail, RankedStanding, SummonerSummary
from ezgg.domain.enums import Region
from ezgg.domain.errors import HttpError
from ezgg.domain.interfaces import IGameAPI
from . import decoders
from .fetcher import RateLimitedFetcher, Sleep
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

MAX_MATCH_IDS_PER_CALL = 100


def _seg(value: str) -> str:
    """Percent-encode one path segment (Riot IDs may hold spaces or non-ASCII)."""
    return quote(value, safe="")


class GameAPIClient(IGameAPI):
    """Asynchronous Riot API client: one method per endpoint the profile needs.

    Use as an async context manager; the underlying ``httpx.AsyncClient``
    lives for the duration of the ``async with`` block.
    """

    def __init__(
        self,
        api_key: str,
        *,
        region: Optional[Region] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        rate_limiter: Optional[RateLimiter] = None,
        max_attempts: Optional[int] = None,
        default_retry_after: Optional[float] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.api_key = api_key
        self.region = region or Region.from_code(settings.RIOT_PLATFORM)
        self.timeout = settings.REQUEST_TIMEOUT
        self.session: Optional[httpx.AsyncClient] = None
        self.fetcher: Optional[RateLimitedFetcher] = None
        self._transport = transport
        self._rate_limiter = rate_limiter
        self._max_attempts = max_attempts
        self._default_retry_after = default_retry_after
        self._sleep = sleep

    @classmethod
    def from_settings(cls) -> "GameAPIClient":
        limiter = None
        if settings.RATE_LIMIT_PER_1_SEC > 0 and settings.RATE_LIMIT_PER_2_MIN > 0:
            limiter = RateLimiter.riot_personal(settings.RATE_LIMIT_PER_1_SEC, settings.RATE_LIMIT_PER_2_MIN)
        return cls(settings.RIOT_API_KEY, rate_limiter=limiter)

    async def __aenter__(self) -> "GameAPIClient":
        limits = httpx.Limits(
            max_connections=settings.MAX_CONNECTIONS_PER_HOST,
            max_keepalive_connections=settings.MAX_CONNECTIONS_PER_HOST,
        )
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            headers={"X-Riot-Token": self.api_key},
            limits=limits,
            http2=True,
            transport=self._transport,
        )
        self.fetcher = RateLimitedFetcher(
            self.session,
            max_attempts=self._max_attempts,
            default_retry_after=self._default_retry_after,
            rate_limiter=self._rate_limiter,
            sleep=self._sleep,
        )
        return self

    async def __aexit__(self, *_) -> None:
        if self.session:
            await self.session.aclose()
            self.session = None
            self.fetcher = None

    def _require_fetcher(self) -> RateLimitedFetcher:
        if self.fetcher is None:
            raise RuntimeError("GameAPIClient must be used inside 'async with'")
        return self.fetcher

    async def _get(self, url: str, params: Optional[dict] = None) -> bytes:
        return await self._require_fetcher().fetch(url, params=params)

    async def _get_or_none(self, url: str) -> Optional[bytes]:
        """GET where a 404 means 'no such record' rather than a failure."""
        try:
            return await self._get(url)
        except HttpError as exc:
            if exc.status_code == 404:
                logger.info("404 for %s", url)
                return None
            raise

    # ── Account API ────────────────────────────────────────────────────

    @traceable
    async def resolve_identity(self, game_name: str, tag_line: str) -> Optional[Account]:
        url = (
            f"{self.region.regional_url}/riot/account/v1/accounts/by-riot-id/"
            f"{_seg(game_name)}/{_seg(tag_line)}"
        )
        body = await self._get_or_none(url)
        return decoders.decode_account(body) if body is not None else None

    # ── Summoner API ───────────────────────────────────────────────────

    @traceable
    async def get_summoner(self, puuid: str) -> Optional[SummonerSummary]:
        url = f"{self.region.platform_url}/lol/summoner/v4/summoners/by-puuid/{_seg(puuid)}"
        body = await self._get_or_none(url)
        return decoders.decode_summoner(body) if body is not None else None

    # ── League API ─────────────────────────────────────────────────────

    @traceable
    async def get_ranked_standings(self, summoner: SummonerSummary) -> List[RankedStanding]:
        base = f"{self.region.platform_url}/lol/league/v4/entries"
        if summoner.summoner_id:
            url = f"{base}/by-summoner/{_seg(summoner.summoner_id)}"
        elif summoner.puuid:
            # Newer summoner payloads no longer carry the encrypted summoner id
            url = f"{base}/by-puuid/{_seg(summoner.puuid)}"
        else:
            logger.warning("summoner has neither id nor puuid; no ranked lookup possible")
            return []
        return decoders.decode_ranked_entries(await self._get(url))

    # ── Champion mastery API ───────────────────────────────────────────

    @traceable
    async def get_mastery(self, puuid: str) -> Dict[int, MasteryEntry]:
        url = f"{self.region.platform_url}/lol/champion-mastery/v4/champion-masteries/by-puuid/{_seg(puuid)}"
        return decoders.decode_mastery(await self._get(url))

    # ── Match API ──────────────────────────────────────────────────────

    @traceable
    async def get_match_ids(self, puuid: str, count: int) -> List[str]:
        count = max(1, min(count, MAX_MATCH_IDS_PER_CALL))
        url = f"{self.region.regional_url}/lol/match/v5/matches/by-puuid/{_seg(puuid)}/ids"
        ids = decoders.decode_match_ids(await self._get(url, params={"start": 0, "count": count}))
        return ids[:count]

    @traceable
    async def get_match(self, match_id: str) -> MatchDetail:
        url = f"{self.region.regional_url}/lol/match/v5/matches/{_seg(match_id)}"
        return decoders.decode_match(await self._get(url), match_id=match_id)
