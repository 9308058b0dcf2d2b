"""Champion mastery entry."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MasteryEntry:
    champion_id: int
    champion_level: Optional[int] = None
    champion_points: Optional[int] = None
