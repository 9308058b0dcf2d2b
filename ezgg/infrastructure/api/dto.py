"""Pydantic models for the Riot API response bodies.

Every field is optional: the upstream schema is not contractually stable,
so a missing field validates to None. A field that is present with the
wrong type fails validation.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RiotDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# Account-V1 / Summoner-V4
class AccountDTO(RiotDTO):
    puuid: Optional[str] = None
    game_name: Optional[str] = Field(None, alias="gameName")
    tag_line: Optional[str] = Field(None, alias="tagLine")


class SummonerDTO(RiotDTO):
    puuid: Optional[str] = None
    summoner_id: Optional[str] = Field(None, alias="id")
    account_id: Optional[str] = Field(None, alias="accountId")
    profile_icon_id: Optional[int] = Field(None, alias="profileIconId")
    summoner_level: Optional[int] = Field(None, alias="summonerLevel")


# League-V4 / Champion-Mastery-V4
class LeagueEntryDTO(RiotDTO):
    queue_type: Optional[str] = Field(None, alias="queueType")
    tier: Optional[str] = None
    rank: Optional[str] = None
    league_points: Optional[int] = Field(None, alias="leaguePoints")
    wins: Optional[int] = None
    losses: Optional[int] = None


class MasteryDTO(RiotDTO):
    champion_id: Optional[int] = Field(None, alias="championId")
    champion_level: Optional[int] = Field(None, alias="championLevel")
    champion_points: Optional[int] = Field(None, alias="championPoints")


# Match-V5
class PerkSelectionDTO(RiotDTO):
    perk: Optional[int] = None
    var1: Optional[int] = None
    var2: Optional[int] = None
    var3: Optional[int] = None


class PerkStyleDTO(RiotDTO):
    description: Optional[str] = None
    style: Optional[int] = None
    selections: Optional[List[PerkSelectionDTO]] = None


class PerksDTO(RiotDTO):
    styles: Optional[List[PerkStyleDTO]] = None


class ChallengesDTO(RiotDTO):
    kda: Optional[float] = None
    kill_participation: Optional[float] = Field(None, alias="killParticipation")


class ParticipantDTO(RiotDTO):
    """Participant fields kept by the profile; names match ParticipantStats."""

    puuid: Optional[str] = None
    riot_id_game_name: Optional[str] = Field(None, alias="riotIdGameName")
    riot_id_tagline: Optional[str] = Field(None, alias="riotIdTagline")
    profile_icon: Optional[int] = Field(None, alias="profileIcon")

    team_id: Optional[int] = Field(None, alias="teamId")
    team_position: Optional[str] = Field(None, alias="teamPosition")
    champion_id: Optional[int] = Field(None, alias="championId")
    champion_name: Optional[str] = Field(None, alias="championName")
    champ_level: Optional[int] = Field(None, alias="champLevel")
    win: Optional[bool] = None

    kills: Optional[int] = None
    deaths: Optional[int] = None
    assists: Optional[int] = None
    killing_sprees: Optional[int] = Field(None, alias="killingSprees")
    largest_killing_spree: Optional[int] = Field(None, alias="largestKillingSpree")
    largest_multi_kill: Optional[int] = Field(None, alias="largestMultiKill")
    total_damage_dealt_to_champions: Optional[int] = Field(None, alias="totalDamageDealtToChampions")
    total_damage_taken: Optional[int] = Field(None, alias="totalDamageTaken")

    total_minions_killed: Optional[int] = Field(None, alias="totalMinionsKilled")
    neutral_minions_killed: Optional[int] = Field(None, alias="neutralMinionsKilled")
    gold_earned: Optional[int] = Field(None, alias="goldEarned")
    gold_spent: Optional[int] = Field(None, alias="goldSpent")
    vision_score: Optional[int] = Field(None, alias="visionScore")

    item0: Optional[int] = None
    item1: Optional[int] = None
    item2: Optional[int] = None
    item3: Optional[int] = None
    item4: Optional[int] = None
    item5: Optional[int] = None
    item6: Optional[int] = None
    summoner1_id: Optional[int] = Field(None, alias="summoner1Id")
    summoner2_id: Optional[int] = Field(None, alias="summoner2Id")

    perks: Optional[PerksDTO] = None
    challenges: Optional[ChallengesDTO] = None


class BanDTO(RiotDTO):
    champion_id: Optional[int] = Field(None, alias="championId")
    pick_turn: Optional[int] = Field(None, alias="pickTurn")


class ObjectiveDTO(RiotDTO):
    first: Optional[bool] = None
    kills: Optional[int] = None


class ObjectivesDTO(RiotDTO):
    baron: Optional[ObjectiveDTO] = None
    champion: Optional[ObjectiveDTO] = None
    dragon: Optional[ObjectiveDTO] = None
    inhibitor: Optional[ObjectiveDTO] = None
    rift_herald: Optional[ObjectiveDTO] = Field(None, alias="riftHerald")
    tower: Optional[ObjectiveDTO] = None


class TeamDTO(RiotDTO):
    team_id: Optional[int] = Field(None, alias="teamId")
    win: Optional[bool] = None
    bans: Optional[List[BanDTO]] = None
    objectives: Optional[ObjectivesDTO] = None


class MatchMetadataDTO(RiotDTO):
    match_id: Optional[str] = Field(None, alias="matchId")


class MatchInfoDTO(RiotDTO):
    game_creation: Optional[int] = Field(None, alias="gameCreation")
    game_duration: Optional[int] = Field(None, alias="gameDuration")
    queue_id: Optional[int] = Field(None, alias="queueId")
    end_of_game_result: Optional[str] = Field(None, alias="endOfGameResult")
    participants: Optional[List[ParticipantDTO]] = None
    teams: Optional[List[TeamDTO]] = None


class MatchDTO(RiotDTO):
    metadata: Optional[MatchMetadataDTO] = None
    info: Optional[MatchInfoDTO] = None
