"""Match detail and the per-match failure marker."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from .participant import ParticipantStats
from .team import TeamResult
from .error_report import ErrorReport

# endOfGameResult values that mean the game did not count
_REMAKE_RESULTS = frozenset({"Abort_TooFewPlayers", "Abort_AntiCheatExit", "Abort_Unexpected"})


@dataclass(frozen=True)
class MatchDetail:
    """Full stat record of one finished game. Immutable once fetched."""

    match_id: Optional[str] = None
    game_creation: Optional[int] = None  # Unix timestamp milliseconds
    game_duration: Optional[int] = None  # Seconds
    queue_id: Optional[int] = None
    end_of_game_result: Optional[str] = None
    participants: tuple[ParticipantStats, ...] = field(default=())
    teams: tuple[TeamResult, ...] = field(default=())

    @property
    def played_at(self) -> Optional[datetime]:
        if self.game_creation is None:
            return None
        return datetime.fromtimestamp(self.game_creation / 1000, tz=timezone.utc)

    @property
    def is_remake(self) -> bool:
        return self.end_of_game_result in _REMAKE_RESULTS

    def participant_for(self, puuid: Optional[str]) -> Optional[ParticipantStats]:
        if puuid is None:
            return None
        return next((p for p in self.participants if p.puuid == puuid), None)

    def team(self, team_id: Optional[int]) -> Optional[TeamResult]:
        return next((t for t in self.teams if t.team_id == team_id), None)

    def participants_on(self, team_id: Optional[int]) -> list[ParticipantStats]:
        return [p for p in self.participants if p.team_id == team_id]

    @property
    def max_damage_to_champions(self) -> int:
        return max((p.total_damage_dealt_to_champions or 0 for p in self.participants), default=0)


@dataclass(frozen=True)
class MatchLoadFailure:
    """Stored in place of a MatchDetail whose fetch failed."""

    match_id: str
    error: ErrorReport
