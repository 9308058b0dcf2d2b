"""Use case for looking up a player - search by Riot ID, open by PlayerId."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ezgg.config import settings
from ezgg.core.logging import get_logger
from ezgg.domain.entities import PlayerIdentity
from ezgg.domain.enums import LoadState
from ezgg.domain.interfaces import IGameAPI
from ezgg.application.services import (
    LoadResult, ProfileAggregator, ProfileListener, ProfileRegistry,
)


@dataclass(frozen=True)
class LookupOutcome:
    """What a search produced.

    ``aggregator`` is the registered profile when the search completed,
    otherwise the session's own (unregistered) aggregator so the caller can
    still show whatever was fetched before the failure. ``reused`` is True
    when the player was already registered and that profile is returned.
    """

    aggregator: ProfileAggregator
    result: LoadResult
    registered: bool = False
    reused: bool = False

    @property
    def error_message(self) -> Optional[str]:
        return self.result.error.message if self.result.error else None


class LookupPlayerUseCase:
    """
    Entry point the front end calls.

    search(name, tag)
        Always runs a fresh pipeline. A completed profile is registered under its PlayerId.
        If that PlayerId was already registered the existing profile wins
        and is returned instead.

    open(player_id)
        Navigation to a known PlayerId (e.g. a match participant). Reuses
        the registered profile and joins its in-flight load rather than
        starting a second pipeline.
    """

    def __init__(
        self,
        api: IGameAPI,
        registry: Optional[ProfileRegistry] = None,
        *,
        match_count: Optional[int] = None,
        listener: Optional[ProfileListener] = None,
    ):
        self.api = api
        self.match_count = match_count if match_count is not None else settings.MATCH_HISTORY_COUNT
        self.registry = registry or ProfileRegistry()
        self._listener = listener
        self._log = get_logger(__name__, service="lookup")

    def _new_aggregator(self, _player_id: Optional[str] = None) -> ProfileAggregator:
        aggregator = ProfileAggregator(self.api, match_count=self.match_count)
        if self._listener is not None:
            aggregator.subscribe(self._listener)
        return aggregator

    async def search(self, game_name: str, tag_line: str) -> LookupOutcome:
        aggregator = self._new_aggregator()
        result = await aggregator.load(game_name, tag_line)
        if not result.ok or result.player_id is None:
            self._log.info(lambda: f"search {game_name}#{tag_line} ended in {result.state.value}")
            return LookupOutcome(aggregator=aggregator, result=result)

        registered = self.registry.get_or_create(result.player_id, lambda _id: aggregator)
        reused = registered is not aggregator
        if reused:
            self._log.info(lambda: f"{result.player_id} already registered, reusing existing profile")
        return LookupOutcome(aggregator=registered, result=result, registered=True, reused=reused)

    async def search_riot_id(self, riot_id: str) -> LookupOutcome:
        """``search`` for ``Name#TAG`` input; raises ValueError on malformed text."""
        identity = PlayerIdentity.parse(riot_id)
        return await self.search(identity.game_name, identity.tag_line)

    async def open(
        self,
        player_id: str,
        game_name: Optional[str] = None,
        tag_line: Optional[str] = None,
    ) -> ProfileAggregator:
        aggregator = self.registry.get_or_create(player_id, self._new_aggregator)
        if aggregator.state is LoadState.IDLE:
            await aggregator.load_by_id(player_id, game_name, tag_line)
        else:
            await aggregator.wait()
        return aggregator
