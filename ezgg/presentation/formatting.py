"""Text formatting for profile and match display."""
from __future__ import annotations

from typing import Optional

from ezgg.domain.entities import MatchDetail, MatchLoadFailure, RankedStanding


def record_text(standing: Optional[RankedStanding]) -> str:
    if standing is None:
        return "0W - 0L"
    return f"{standing.wins or 0}W - {standing.losses or 0}L"


def win_rate_text(standing: Optional[RankedStanding]) -> str:
    rate = standing.win_rate if standing is not None else 0.0
    return f"WR {rate:.1f}%"


def rank_text(standing: Optional[RankedStanding]) -> str:
    """``Gold II 54 LP``; apex tiers drop the division. ``Unranked`` without a tier."""
    if standing is None or standing.tier is None:
        return "Unranked"
    parts = [standing.tier.display_name]
    if standing.tier.has_divisions and standing.division:
        parts.append(standing.division)
    parts.append(f"{standing.league_points or 0} LP")
    return " ".join(parts)


def duration_text(seconds: Optional[int]) -> str:
    """``mm:ss``; minutes are not wrapped into hours."""
    total = max(0, seconds or 0)
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"


def outcome_text(match: MatchDetail, puuid: Optional[str]) -> str:
    if match.is_remake:
        return "Remake"
    participant = match.participant_for(puuid)
    if participant is None or participant.win is None:
        return "?"
    return "Victory" if participant.win else "Defeat"


def match_line(match: MatchDetail, puuid: Optional[str]) -> str:
    """One-line summary of a match from the given player's point of view."""
    participant = match.participant_for(puuid)
    when = match.played_at.strftime("%Y-%m-%d %H:%M") if match.played_at else "----------"
    head = f"{outcome_text(match, puuid):<8} {when}"
    if participant is None:
        return f"{head}  {match.match_id or ''} (player not in match)"
    kda = f"{participant.kills or 0}/{participant.deaths or 0}/{participant.assists or 0}"
    cs = f"{participant.total_cs} CS ({participant.cs_per_minute(match.game_duration):.2f}/m)"
    return (
        f"{head}  {participant.champion_name or 'Unknown':<12} {kda:<9} "
        f"{cs:<18} {participant.formatted_gold_earned:>6} gold  {duration_text(match.game_duration)}"
    )


def failure_line(failure: MatchLoadFailure) -> str:
    return f"{'Failed':<8} {failure.match_id}: {failure.error.message}"
