"""Summoner summary and ranked standing."""
from dataclasses import dataclass
from typing import Optional
from ..enums import QueueType, Tier


@dataclass(frozen=True)
class SummonerSummary:
    """A player's progression record for League of Legends.

    Frozen: a re-fetch produces a new object which replaces the old one.
    """

    puuid: Optional[str] = None
    summoner_id: Optional[str] = None
    account_id: Optional[str] = None
    profile_icon_id: Optional[int] = None
    summoner_level: Optional[int] = None


@dataclass(frozen=True)
class RankedStanding:
    """Placement in one ranked queue."""

    queue_type: QueueType
    tier: Optional[Tier] = None
    division: Optional[str] = None
    league_points: Optional[int] = None
    wins: Optional[int] = None
    losses: Optional[int] = None

    @property
    def total_matches(self) -> int:
        return (self.wins or 0) + (self.losses or 0)

    @property
    def win_rate(self) -> float:
        """Win rate in percent; 0.0 with no games played."""
        total = self.total_matches
        if total == 0:
            return 0.0
        return (self.wins or 0) / total * 100
