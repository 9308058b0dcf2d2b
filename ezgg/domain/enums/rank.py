"""Rank tier enumeration."""
from enum import Enum
from typing import Optional


class Tier(Enum):
    """League of Legends rank tiers, lowest first."""

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def has_divisions(self) -> bool:
        """Apex tiers have a single division that is never displayed."""
        return self not in (Tier.MASTER, Tier.GRANDMASTER, Tier.CHALLENGER)

    @classmethod
    def from_string(cls, tier: Optional[str]) -> Optional['Tier']:
        if not tier:
            return None
        try:
            return cls[tier.upper()]
        except KeyError:
            return None
