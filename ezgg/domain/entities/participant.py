"""Participant entity: one player's line in a match."""
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class PerkSelection:
    perk: Optional[int] = None
    var1: Optional[int] = None
    var2: Optional[int] = None
    var3: Optional[int] = None


@dataclass(frozen=True)
class PerkStyle:
    description: Optional[str] = None  # "primaryStyle" / "subStyle"
    style: Optional[int] = None
    selections: tuple[PerkSelection, ...] = ()


@dataclass(frozen=True)
class ParticipantStats:
    """Per-match stats for one player.

    Every API field is optional; derived values (CS, CS/min, gold text)
    are properties so they never drift from the raw numbers.
    """

    # Identity
    puuid: Optional[str] = None
    riot_id_game_name: Optional[str] = None
    riot_id_tagline: Optional[str] = None
    profile_icon: Optional[int] = None

    # Match context
    team_id: Optional[int] = None
    team_position: Optional[str] = None
    champion_id: Optional[int] = None
    champion_name: Optional[str] = None
    champ_level: Optional[int] = None
    win: Optional[bool] = None

    # Combat
    kills: Optional[int] = None
    deaths: Optional[int] = None
    assists: Optional[int] = None
    killing_sprees: Optional[int] = None
    largest_killing_spree: Optional[int] = None
    largest_multi_kill: Optional[int] = None
    total_damage_dealt_to_champions: Optional[int] = None
    total_damage_taken: Optional[int] = None

    # Farm & economy
    total_minions_killed: Optional[int] = None
    neutral_minions_killed: Optional[int] = None
    gold_earned: Optional[int] = None
    gold_spent: Optional[int] = None
    vision_score: Optional[int] = None

    # Items (slot 6 is the trinket)
    item0: Optional[int] = None
    item1: Optional[int] = None
    item2: Optional[int] = None
    item3: Optional[int] = None
    item4: Optional[int] = None
    item5: Optional[int] = None
    item6: Optional[int] = None

    summoner1_id: Optional[int] = None
    summoner2_id: Optional[int] = None

    # Runes
    perk_styles: tuple[PerkStyle, ...] = field(default=())

    # Challenges
    challenge_kda: Optional[float] = None
    kill_participation: Optional[float] = None

    @property
    def total_cs(self) -> int:
        return (self.total_minions_killed or 0) + (self.neutral_minions_killed or 0)

    def cs_per_minute(self, game_duration: Optional[int]) -> float:
        """CS per minute rounded to two decimals; 0.0 for unknown or non-positive durations."""
        if not game_duration or game_duration <= 0:
            return 0.0
        return round(self.total_cs / (game_duration / 60.0), 2)

    @property
    def formatted_gold_earned(self) -> str:
        """``12.3k`` at or above 1000 gold, the plain number below."""
        gold = self.gold_earned
        if gold is None:
            return "0"
        if gold >= 1000:
            return f"{gold / 1000.0:.1f}k"
        return str(gold)

    @property
    def primary_rune(self) -> Optional[int]:
        """Keystone: first selection of the first (primary) style."""
        if not self.perk_styles:
            return None
        selections = self.perk_styles[0].selections
        if not selections:
            return None
        return selections[0].perk

    @property
    def kda(self) -> float:
        deaths = self.deaths or 0
        takedowns = (self.kills or 0) + (self.assists or 0)
        if deaths == 0:
            return float(takedowns)
        return takedowns / deaths

    @property
    def items(self) -> list[int]:
        """Item ids in slot order, trinket excluded; 0 is an empty slot."""
        return [
            self.item0 or 0, self.item1 or 0, self.item2 or 0,
            self.item3 or 0, self.item4 or 0, self.item5 or 0,
        ]

    @property
    def riot_id(self) -> str:
        return f"{self.riot_id_game_name or 'N/A'}#{self.riot_id_tagline or 'N/A'}"
