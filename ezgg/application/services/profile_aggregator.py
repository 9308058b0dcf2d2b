"""Profile aggregator - the dependent fetch chain behind one player profile."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Union

from ezgg.config import settings
from ezgg.core.logging import context as log_context, get_logger
from ezgg.domain.entities import (
    ErrorReport, MasteryEntry, MatchDetail, MatchEntry, MatchLoadFailure,
    PlayerProfile, RankedStanding,
)
from ezgg.domain.enums import LoadState
from ezgg.domain.errors import GameAPIError, NotFound
from ezgg.domain.interfaces import IGameAPI
from .error_reporter import ErrorReporter


class ProfileEventKind(Enum):
    STATE = "state"
    IDENTITY = "identity"
    SUMMARY = "summary"
    RANKED = "ranked"
    MASTERY = "mastery"
    MATCH_IDS = "match_ids"
    MATCH = "match"
    ERROR = "error"


@dataclass(frozen=True)
class ProfileEvent:
    kind: ProfileEventKind
    profile: PlayerProfile
    match_id: Optional[str] = None


ProfileListener = Callable[[ProfileEvent], None]


@dataclass(frozen=True)
class LoadResult:
    """Outcome of one load session, returned to the caller.

    ``error`` is set only for pipeline-terminating failures; best-effort
    steps that failed are listed in ``partial_errors``.
    """

    state: LoadState
    player_id: Optional[str] = None
    error: Optional[ErrorReport] = None
    partial_errors: Mapping[str, ErrorReport] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.state is LoadState.COMPLETE


class ProfileAggregator:
    """
    Drives one PlayerProfile through the fetch chain:

        identity -> summary -> (ranked || mastery) -> match ids -> match details

    Identity, summary and match-id failures end the load in ERROR. Ranked,
    mastery and individual match failures are recorded and the pipeline
    carries on. Match details are fetched one at a time, in server order,
    and each is published the moment it lands.

    The profile is only ever mutated from here. Subscribers are notified
    synchronously after every change.
    """

    def __init__(
        self,
        api: IGameAPI,
        *,
        match_count: Optional[int] = None,
        profile: Optional[PlayerProfile] = None,
    ):
        self.api = api
        self.match_count = match_count if match_count is not None else settings.MATCH_HISTORY_COUNT
        self.profile = profile or PlayerProfile()
        self.errors = ErrorReporter()
        self._listeners: List[ProfileListener] = []
        self._settled: Optional[asyncio.Event] = None
        self._last_result: Optional[LoadResult] = None
        self._log = get_logger(__name__, service="aggregator")

    # ------------------------------------------------------------------ #
    # Observation
    # ------------------------------------------------------------------ #

    @property
    def state(self) -> LoadState:
        return self.profile.state

    @property
    def last_result(self) -> Optional[LoadResult]:
        return self._last_result

    def subscribe(self, listener: ProfileListener) -> Callable[[], None]:
        """Register a listener; the returned callable unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _emit(self, kind: ProfileEventKind, match_id: Optional[str] = None) -> None:
        event = ProfileEvent(kind=kind, profile=self.profile, match_id=match_id)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                self._log.error(lambda: f"listener failed on {kind.value} event", exc_info=True)

    def _transition(self, state: LoadState) -> None:
        self._log.debug(lambda: f"{self.profile.state.value} -> {state.value}")
        self.profile.state = state
        self._emit(ProfileEventKind.STATE)

    async def wait(self) -> Optional[LoadResult]:
        """Wait for the in-flight load, if any, and return the latest result."""
        if self._settled is not None:
            await self._settled.wait()
        return self._last_result

    # ------------------------------------------------------------------ #
    # Session bookkeeping
    # ------------------------------------------------------------------ #

    def _begin(self) -> None:
        self.errors.clear()
        self.profile.error = None
        self.profile.partial_errors.clear()
        self._settled = asyncio.Event()

    def _settle(self) -> None:
        if self._settled is not None:
            self._settled.set()

    def _finish(self) -> LoadResult:
        self._last_result = LoadResult(
            state=self.profile.state,
            player_id=self.profile.player_id,
            error=self.profile.error,
            partial_errors=dict(self.profile.partial_errors),
        )
        return self._last_result

    def _report(self, exc: BaseException, step: str) -> ErrorReport:
        report = self.errors.report(exc)
        if isinstance(exc, GameAPIError):
            self._log.warning(lambda: f"{step} failed: {report.message}")
        else:
            self._log.error(lambda: f"{step} failed unexpectedly: {exc!r}", exc_info=exc)
        return report

    def _fail(self, exc: BaseException, step: str) -> LoadResult:
        self.profile.error = self._report(exc, step)
        self._transition(LoadState.ERROR)
        self._emit(ProfileEventKind.ERROR)
        return self._finish()

    def _record_partial(self, exc: BaseException, step: str) -> None:
        self.profile.partial_errors[step] = self._report(exc, step)
        self._emit(ProfileEventKind.ERROR)

    # ------------------------------------------------------------------ #
    # Public entry points
    # ------------------------------------------------------------------ #

    async def load(self, game_name: str, tag_line: str) -> LoadResult:
        """Run the whole pipeline starting from a Riot ID."""
        self._begin()
        try:
            with log_context(riot_id=f"{game_name}#{tag_line}"):
                self._transition(LoadState.RESOLVING_IDENTITY)
                try:
                    account = await self.api.resolve_identity(game_name, tag_line)
                except Exception as exc:
                    return self._fail(exc, "identity")
                if account is None or not account.puuid:
                    return self._fail(NotFound(f"No player found for {game_name}#{tag_line}"), "identity")

                self.profile.player_id = account.puuid
                self.profile.game_name = account.game_name or game_name
                self.profile.tag_line = account.tag_line or tag_line
                self._emit(ProfileEventKind.IDENTITY)
                return await self._load_from_summary()
        finally:
            self._settle()

    async def load_by_id(
        self,
        player_id: str,
        game_name: Optional[str] = None,
        tag_line: Optional[str] = None,
    ) -> LoadResult:
        """Run the pipeline for an already-known PlayerId, skipping identity."""
        self._begin()
        try:
            self.profile.player_id = player_id
            if game_name:
                self.profile.game_name = game_name
            if tag_line:
                self.profile.tag_line = tag_line
            self._emit(ProfileEventKind.IDENTITY)
            return await self._load_from_summary()
        finally:
            self._settle()

    async def reload(self, match_id: str) -> MatchEntry:
        """Re-fetch one match and overwrite its entry. Pipeline state is untouched."""
        self._log.info(lambda: f"reloading match {match_id}")
        return await self._fetch_match(match_id)

    # ------------------------------------------------------------------ #
    # Pipeline steps
    # ------------------------------------------------------------------ #

    async def _load_from_summary(self) -> LoadResult:
        puuid = self.profile.player_id
        assert puuid is not None
        with log_context(puuid=puuid):
            self._transition(LoadState.LOADING_SUMMARY)
            try:
                summary = await self.api.get_summoner(puuid)
            except Exception as exc:
                return self._fail(exc, "summary")
            if summary is None:
                return self._fail(NotFound("Summoner not found"), "summary")
            self.profile.summoner = summary
            self._emit(ProfileEventKind.SUMMARY)

            self._transition(LoadState.LOADING_RANKED_AND_MASTERY)
            ranked, mastery = await asyncio.gather(
                self.api.get_ranked_standings(summary),
                self.api.get_mastery(puuid),
                return_exceptions=True,
            )
            self._apply_ranked(ranked)
            self._apply_mastery(mastery)

            self._transition(LoadState.LOADING_MATCH_IDS)
            try:
                match_ids = await self.api.get_match_ids(puuid, self.match_count)
            except Exception as exc:
                return self._fail(exc, "match_ids")
            self.profile.match_ids = list(match_ids)
            self._emit(ProfileEventKind.MATCH_IDS)

            self._transition(LoadState.LOADING_MATCH_DETAILS)
            for match_id in self.profile.match_ids:
                await self._fetch_match(match_id)

            self._transition(LoadState.COMPLETE)
            loaded = len(self.profile.matches.loaded())
            self._log.success(lambda: f"profile complete: {loaded}/{len(self.profile.match_ids)} matches loaded")
            return self._finish()

    def _apply_ranked(self, result: Union[List[RankedStanding], BaseException]) -> None:
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                raise result
            self._record_partial(result, "ranked")
            return
        self.profile.ranked = {standing.queue_type: standing for standing in result}
        self._emit(ProfileEventKind.RANKED)

    def _apply_mastery(self, result: Union[Dict[int, MasteryEntry], BaseException]) -> None:
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                raise result
            self._record_partial(result, "mastery")
            return
        self.profile.mastery = dict(result)
        self._emit(ProfileEventKind.MASTERY)

    async def _fetch_match(self, match_id: str) -> MatchEntry:
        with log_context(match_id=match_id):
            try:
                detail: MatchDetail = await self.api.get_match(match_id)
            except Exception as exc:
                report = self._report(exc, f"match {match_id}")
                entry = self.profile.matches.put_failure(MatchLoadFailure(match_id=match_id, error=report))
            else:
                self.profile.matches.put(match_id, detail)
                entry = detail
            self._emit(ProfileEventKind.MATCH, match_id=match_id)
            return entry
