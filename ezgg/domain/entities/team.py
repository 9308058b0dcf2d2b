"""Team entity: one side of a match."""
from dataclasses import dataclass, field
from typing import Optional

BLUE_TEAM_ID = 100
RED_TEAM_ID = 200


@dataclass(frozen=True)
class Objective:
    first: Optional[bool] = None
    kills: Optional[int] = None


@dataclass(frozen=True)
class Ban:
    champion_id: Optional[int] = None
    pick_turn: Optional[int] = None


@dataclass(frozen=True)
class TeamResult:
    """Outcome and objective counts for team 100 (blue) or 200 (red)."""

    team_id: Optional[int] = None
    win: Optional[bool] = None
    bans: tuple[Ban, ...] = field(default=())

    baron: Objective = field(default_factory=Objective)
    champion: Objective = field(default_factory=Objective)
    dragon: Objective = field(default_factory=Objective)
    inhibitor: Objective = field(default_factory=Objective)
    rift_herald: Objective = field(default_factory=Objective)
    tower: Objective = field(default_factory=Objective)

    @property
    def side(self) -> str:
        if self.team_id == BLUE_TEAM_ID:
            return "Blue Team"
        if self.team_id == RED_TEAM_ID:
            return "Red Team"
        return "Unknown Team"
