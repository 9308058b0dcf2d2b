from __future__ import annotations

from typing import Callable, List, Optional

from ezgg.config import settings
from ezgg.core.logging import get_logger
from ezgg.domain.entities import (
    BLUE_TEAM_ID, RED_TEAM_ID, MatchDetail, MatchLoadFailure, ParticipantStats, PlayerProfile,
)
from ezgg.domain.interfaces import IGameAPI
from ezgg.infrastructure.ddragon import DataDragon, IconKind
from ezgg.application.services import ProfileAggregator, ProfileEvent, ProfileEventKind, ProfileRegistry
from ezgg.application.use_cases import LookupPlayerUseCase
from ezgg.presentation.formatting import (
    duration_text, failure_line, match_line, rank_text, record_text, win_rate_text,
)

_GREEN = "\033[92m"
_RED = "\033[91m"
_YELLOW = "\033[93m"
_CYAN = "\033[96m"
_BOLD = "\033[1m"
_RESET = "\033[0m"

Printer = Callable[[str], None]


class LookupCommand:
    """Player lookup with match lines streamed as they arrive."""

    def __init__(
        self,
        api: IGameAPI,
        *,
        ddragon: Optional[DataDragon] = None,
        registry: Optional[ProfileRegistry] = None,
        match_count: Optional[int] = None,
        color: bool = True,
        out: Printer = print,
    ) -> None:
        self.ddragon = ddragon or DataDragon()
        self.use_case = LookupPlayerUseCase(
            api, registry, match_count=match_count, listener=self._on_event,
        )
        self._color = color
        self._out = out
        self._streamed = 0
        self._log = get_logger(__name__, service="cli")

    @property
    def registry(self) -> ProfileRegistry:
        return self.use_case.registry

    def _paint(self, code: str, text: str) -> str:
        return f"{code}{text}{_RESET}" if self._color else text

    # ── Streaming ──────────────────────────────────────────────────────

    def _on_event(self, event: ProfileEvent) -> None:
        profile = event.profile
        if event.kind is ProfileEventKind.STATE and profile.is_loading:
            self._out(self._paint(_CYAN, f"  ... {profile.state.value.replace('_', ' ')}"))
        elif event.kind is ProfileEventKind.MATCH_IDS:
            self._out(f"  {len(profile.match_ids)} matches to load")
            self._streamed = 0
        elif event.kind is ProfileEventKind.MATCH and event.match_id:
            self._streamed += 1
            entry = profile.matches.get(event.match_id)
            prefix = f"  [{self._streamed:>2}/{len(profile.match_ids)}] "
            self._out(prefix + self._entry_line(entry, profile.player_id))

    def _entry_line(self, entry, puuid: Optional[str]) -> str:
        if isinstance(entry, MatchDetail):
            line = match_line(entry, puuid)
            participant = entry.participant_for(puuid)
            if entry.is_remake or participant is None:
                return line
            return self._paint(_GREEN if participant.win else _RED, line)
        if isinstance(entry, MatchLoadFailure):
            return self._paint(_YELLOW, failure_line(entry))
        return "(not loaded)"

    # ── Actions ────────────────────────────────────────────────────────

    async def search(self, riot_id: str) -> Optional[ProfileAggregator]:
        """Look up ``Name#TAG`` and render the result. Returns the aggregator shown."""
        try:
            outcome = await self.use_case.search_riot_id(riot_id)
        except ValueError as exc:
            self._out(self._paint(_YELLOW, f"  {exc}"))
            return None
        self._log.info(lambda: f"lookup {riot_id} -> {outcome.result.state.value}")
        if outcome.reused:
            self._out("  Already loaded this session, showing the existing profile.")
        self.render(outcome.aggregator.profile)
        return outcome.aggregator

    async def open(self, player_id: str) -> ProfileAggregator:
        aggregator = await self.use_case.open(player_id)
        self.render(aggregator.profile)
        return aggregator

    async def reload_failed(self, aggregator: ProfileAggregator) -> int:
        """Retry every failed match of a profile; returns how many now load."""
        failed = list(aggregator.profile.matches.failed())
        if not failed:
            self._out("  No failed matches.")
            return 0
        recovered = 0
        for match_id in failed:
            entry = await aggregator.reload(match_id)
            if isinstance(entry, MatchDetail):
                recovered += 1
        self._out(f"  Reloaded {len(failed)} match(es), {recovered} recovered.")
        return recovered

    def recent(self, n: int = 10) -> List[ProfileAggregator]:
        profiles = self.registry.recent(n)
        if not profiles:
            self._out("  No profiles loaded yet.")
        for i, aggregator in enumerate(profiles, start=1):
            profile = aggregator.profile
            self._out(f"  {i:2d}) {profile.riot_id:<24} {rank_text(profile.solo):<20} [{profile.state.value}]")
        return profiles

    # ── Rendering ──────────────────────────────────────────────────────

    def render(self, profile: PlayerProfile) -> None:
        out = self._out
        out("")
        out(self._paint(_BOLD, f"  {profile.riot_id}"))
        summary = profile.summoner
        if summary is not None:
            out(f"  Level {summary.summoner_level if summary.summoner_level is not None else '?'}")
            icon = self.ddragon.icon_url(IconKind.PROFILE, summary.profile_icon_id)
            if icon:
                out(f"  Icon  {icon}")

        if profile.error is not None:
            out(self._paint(_RED, f"  {profile.error.message}"))

        if profile.summoner is not None:
            out("")
            for label, standing in (("Solo/Duo", profile.solo), ("Flex", profile.flex)):
                out(f"  {label:<9} {rank_text(standing):<20} {record_text(standing):<12} {win_rate_text(standing)}")
            if "ranked" in profile.partial_errors:
                out(self._paint(_YELLOW, f"  Ranked unavailable: {profile.partial_errors['ranked'].message}"))

            top = profile.top_mastery(settings.TOP_MASTERY_COUNT)
            if top:
                out("")
                out("  Top mastery")
                for entry in top:
                    name = self.ddragon.champion_name(entry.champion_id) or f"#{entry.champion_id}"
                    out(f"    {name:<14} M{entry.champion_level or 0:<3} {entry.champion_points or 0:>10,} pts")
            if "mastery" in profile.partial_errors:
                out(self._paint(_YELLOW, f"  Mastery unavailable: {profile.partial_errors['mastery'].message}"))

        ids = profile.recent_match_ids()
        if ids:
            out("")
            out(f"  Match history ({len(profile.matches.loaded())}/{len(profile.match_ids)} loaded)")
            for match_id in ids:
                out("    " + self._entry_line(profile.matches.get(match_id), profile.player_id))

    def render_match(self, match: MatchDetail) -> List[ParticipantStats]:
        """Scoreboard for one match, blue side first. Returns participants in the printed order."""
        out = self._out
        out(f"  {match.match_id}  {duration_text(match.game_duration)}")
        top_damage = match.max_damage_to_champions
        listed: List[ParticipantStats] = []
        for team_id in (BLUE_TEAM_ID, RED_TEAM_ID):
            team = match.team(team_id)
            side = team.side if team is not None else str(team_id)
            result = "" if team is None or team.win is None else ("Victory" if team.win else "Defeat")
            out(self._paint(_BOLD, f"  {side} {result}"))
            for p in match.participants_on(team_id):
                listed.append(p)
                dmg = p.total_damage_dealt_to_champions or 0
                share = f"{dmg / top_damage * 100:3.0f}%" if top_damage else "  0%"
                kda = f"{p.kills or 0}/{p.deaths or 0}/{p.assists or 0}"
                out(
                    f"   {len(listed):2d}) {p.riot_id:<24} {p.champion_name or '?':<12} "
                    f"{kda:<9} {p.total_cs:>4} CS {dmg:>7,} dmg ({share})"
                )
        return listed
