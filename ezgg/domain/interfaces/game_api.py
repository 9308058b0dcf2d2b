"""Port the profile pipeline talks to."""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from ..entities import Account, MasteryEntry, MatchDetail, RankedStanding, SummonerSummary


class IGameAPI(ABC):
    """Typed endpoints of the remote game-data API, in dependency order.

    Implementations raise ``ezgg.domain.errors.GameAPIError`` subclasses;
    lookups that legitimately find nothing return None instead.
    """

    @abstractmethod
    async def resolve_identity(self, game_name: str, tag_line: str) -> Optional[Account]:
        """Riot ID -> account (puuid), or None when no such player."""

    @abstractmethod
    async def get_summoner(self, puuid: str) -> Optional[SummonerSummary]:
        """puuid -> summoner summary, or None when the player never played."""

    @abstractmethod
    async def get_ranked_standings(self, summoner: SummonerSummary) -> List[RankedStanding]:
        """Solo/duo and flex standings; other queues are dropped."""

    @abstractmethod
    async def get_mastery(self, puuid: str) -> Dict[int, MasteryEntry]:
        """Champion mastery keyed by champion id."""

    @abstractmethod
    async def get_match_ids(self, puuid: str, count: int) -> List[str]:
        """Most recent match ids, in the server's order, at most ``count``."""

    @abstractmethod
    async def get_match(self, match_id: str) -> MatchDetail:
        """Full detail of one match."""
