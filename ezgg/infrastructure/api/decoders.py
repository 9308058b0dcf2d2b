"""JSON body -> domain entity decoding.

Bodies are validated against the pydantic models in ``dto``; any
ValidationError (not JSON, wrong container, a field of the wrong type)
surfaces as DecodeError naming the offending location.
"""
import logging
from typing import Dict, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ezgg.domain.entities import (
    Account, Ban, MasteryEntry, MatchDetail, Objective, ParticipantStats,
    PerkSelection, PerkStyle, RankedStanding, SummonerSummary, TeamResult,
)
from ezgg.domain.enums import QueueType, Tier
from ezgg.domain.errors import DecodeError
from .dto import (
    AccountDTO, LeagueEntryDTO, MasteryDTO, MatchDTO, MatchInfoDTO, ObjectiveDTO,
    ObjectivesDTO, ParticipantDTO, PerkStyleDTO, SummonerDTO, TeamDTO,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_LEAGUE_ENTRIES = TypeAdapter(List[LeagueEntryDTO])
_MASTERY = TypeAdapter(List[MasteryDTO])
_MATCH_IDS = TypeAdapter(List[str])


def _location(loc: Tuple) -> str:
    """('info', 'participants', 0, 'kills') -> 'info.participants[0].kills'"""
    text = ""
    for part in loc:
        if isinstance(part, int):
            text += f"[{part}]"
        else:
            text += f".{part}" if text else str(part)
    return text


def _decode_error(what: str, exc: ValidationError) -> DecodeError:
    problems = "; ".join(
        f"{_location(err['loc']) or 'body'}: {err['msg']}" for err in exc.errors()[:3]
    )
    if exc.error_count() > 3:
        problems += f" (+{exc.error_count() - 3} more)"
    return DecodeError(f"{what}: {problems}")


def _validate(model: Type[M], body: bytes, what: str) -> M:
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise _decode_error(what, exc) from exc


def _validate_list(adapter: TypeAdapter, body: bytes, what: str) -> list:
    try:
        return adapter.validate_json(body)
    except ValidationError as exc:
        raise _decode_error(what, exc) from exc


# ── Account / summoner / league / mastery ─────────────────────────────────

def decode_account(body: bytes) -> Account:
    dto = _validate(AccountDTO, body, "account")
    return Account(puuid=dto.puuid, game_name=dto.game_name, tag_line=dto.tag_line)


def decode_summoner(body: bytes) -> SummonerSummary:
    dto = _validate(SummonerDTO, body, "summoner")
    return SummonerSummary(
        puuid=dto.puuid,
        summoner_id=dto.summoner_id,
        account_id=dto.account_id,
        profile_icon_id=dto.profile_icon_id,
        summoner_level=dto.summoner_level,
    )


def decode_ranked_entries(body: bytes) -> List[RankedStanding]:
    """Solo/duo and flex entries only, first entry per queue wins."""
    by_queue: Dict[QueueType, RankedStanding] = {}
    for entry in _validate_list(_LEAGUE_ENTRIES, body, "league entries"):
        queue = QueueType.from_api_name(entry.queue_type)
        if queue is None or queue in by_queue:
            continue
        by_queue[queue] = RankedStanding(
            queue_type=queue,
            tier=Tier.from_string(entry.tier),
            division=entry.rank,
            league_points=entry.league_points,
            wins=entry.wins,
            losses=entry.losses,
        )
    return [by_queue[q] for q in QueueType.ranked_queues() if q in by_queue]


def decode_mastery(body: bytes) -> Dict[int, MasteryEntry]:
    result: Dict[int, MasteryEntry] = {}
    for i, entry in enumerate(_validate_list(_MASTERY, body, "mastery")):
        if entry.champion_id is None:
            logger.debug("dropping mastery[%d] without championId", i)
            continue
        result[entry.champion_id] = MasteryEntry(
            champion_id=entry.champion_id,
            champion_level=entry.champion_level,
            champion_points=entry.champion_points,
        )
    return result


def decode_match_ids(body: bytes) -> List[str]:
    return list(_validate_list(_MATCH_IDS, body, "match ids"))


# ── Match ─────────────────────────────────────────────────────────────────

def _perk_style(dto: PerkStyleDTO) -> PerkStyle:
    return PerkStyle(
        description=dto.description,
        style=dto.style,
        selections=tuple(
            PerkSelection(perk=s.perk, var1=s.var1, var2=s.var2, var3=s.var3)
            for s in dto.selections or ()
        ),
    )


def _participant(dto: ParticipantDTO) -> ParticipantStats:
    styles = dto.perks.styles if dto.perks else None
    challenges = dto.challenges
    return ParticipantStats(
        perk_styles=tuple(_perk_style(s) for s in styles or ()),
        challenge_kda=challenges.kda if challenges else None,
        kill_participation=challenges.kill_participation if challenges else None,
        **dto.model_dump(exclude={"perks", "challenges"}),
    )


def _objective(dto: Optional[ObjectiveDTO]) -> Objective:
    return Objective(first=dto.first, kills=dto.kills) if dto else Objective()


def _team(dto: TeamDTO) -> TeamResult:
    objectives = dto.objectives or ObjectivesDTO()
    return TeamResult(
        team_id=dto.team_id,
        win=dto.win,
        bans=tuple(Ban(champion_id=b.champion_id, pick_turn=b.pick_turn) for b in dto.bans or ()),
        baron=_objective(objectives.baron),
        champion=_objective(objectives.champion),
        dragon=_objective(objectives.dragon),
        inhibitor=_objective(objectives.inhibitor),
        rift_herald=_objective(objectives.rift_herald),
        tower=_objective(objectives.tower),
    )


def decode_match(body: bytes, match_id: Optional[str] = None) -> MatchDetail:
    """Decode a match-v5 body; ``match_id`` fills in a missing metadata.matchId."""
    dto = _validate(MatchDTO, body, "match")
    info = dto.info or MatchInfoDTO()
    return MatchDetail(
        match_id=(dto.metadata.match_id if dto.metadata else None) or match_id,
        game_creation=info.game_creation,
        game_duration=info.game_duration,
        queue_id=info.queue_id,
        end_of_game_result=info.end_of_game_result,
        participants=tuple(_participant(p) for p in info.participants or ()),
        teams=tuple(_team(t) for t in info.teams or ()),
    )
