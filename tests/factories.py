from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional, Union

import httpx

from ezgg.domain.entities import (
    Account, MasteryEntry, MatchDetail, ParticipantStats, RankedStanding, SummonerSummary, TeamResult,
)
from ezgg.domain.enums import QueueType, Tier
from ezgg.domain.interfaces import IGameAPI

PUUID = "puuid-faker"


class SleepRecorder:
    """Stands in for asyncio.sleep; records every requested delay."""

    def __init__(self) -> None:
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def json_response(payload: Any, status: int = 200, headers: Optional[Dict[str, str]] = None) -> httpx.Response:
    return httpx.Response(status, content=json.dumps(payload).encode(), headers=headers)


def scripted_transport(responses: List[Union[httpx.Response, Exception]], seen: Optional[List[httpx.Request]] = None):
    """MockTransport answering with ``responses`` in order."""
    queue = list(responses)

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        item = queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    return httpx.MockTransport(handler)


# ── Raw API payloads ──────────────────────────────────────────────────────

def account_json(puuid: str = PUUID, name: str = "Faker", tag: str = "KR1") -> Dict[str, Any]:
    return {"puuid": puuid, "gameName": name, "tagLine": tag}


def summoner_json(puuid: str = PUUID, summoner_id: Optional[str] = "sid-1") -> Dict[str, Any]:
    data = {
        "puuid": puuid,
        "accountId": "aid-1",
        "profileIconId": 4568,
        "revisionDate": 1700000000000,
        "summonerLevel": 512,
    }
    if summoner_id is not None:
        data["id"] = summoner_id
    return data


def league_json() -> List[Dict[str, Any]]:
    return [
        {"queueType": "RANKED_FLEX_SR", "tier": "GOLD", "rank": "II", "leaguePoints": 54, "wins": 10, "losses": 8},
        {"queueType": "CHERRY", "tier": "", "rank": "", "leaguePoints": 0, "wins": 3, "losses": 1},
        {"queueType": "RANKED_SOLO_5x5", "tier": "CHALLENGER", "rank": "I", "leaguePoints": 1320, "wins": 200, "losses": 150},
    ]


def mastery_json() -> List[Dict[str, Any]]:
    return [
        {"championId": 7, "championLevel": 7, "championPoints": 250000},
        {"championId": 103, "championLevel": 5, "championPoints": 42000},
    ]


def participant_json(puuid: str = PUUID, team_id: int = 100, win: bool = True, **overrides: Any) -> Dict[str, Any]:
    data = {
        "puuid": puuid,
        "riotIdGameName": "Faker",
        "riotIdTagline": "KR1",
        "teamId": team_id,
        "teamPosition": "MIDDLE",
        "championId": 7,
        "championName": "Leblanc",
        "champLevel": 16,
        "win": win,
        "kills": 8,
        "deaths": 2,
        "assists": 6,
        "totalDamageDealtToChampions": 31000,
        "totalMinionsKilled": 210,
        "neutralMinionsKilled": 12,
        "goldEarned": 13450,
        "item0": 6655,
        "item1": 0,
        "perks": {
            "styles": [
                {"description": "primaryStyle", "style": 8100, "selections": [{"perk": 8112}, {"perk": 8139}]},
                {"description": "subStyle", "style": 8200, "selections": [{"perk": 8233}]},
            ]
        },
        "challenges": {"kda": 7.0, "killParticipation": 0.56},
    }
    data.update(overrides)
    return data


def match_json(match_id: str = "NA1_1", creation: int = 1700000000000, duration: int = 1845, **info: Any) -> Dict[str, Any]:
    body = {
        "metadata": {"matchId": match_id, "participants": [PUUID, "puuid-other"]},
        "info": {
            "gameCreation": creation,
            "gameDuration": duration,
            "queueId": 420,
            "endOfGameResult": "GameComplete",
            "participants": [
                participant_json(),
                participant_json("puuid-other", team_id=200, win=False, championName="Ahri", championId=103,
                                 totalDamageDealtToChampions=15500),
            ],
            "teams": [
                {"teamId": 100, "win": True, "bans": [{"championId": 1, "pickTurn": 1}],
                 "objectives": {"baron": {"first": True, "kills": 1}, "tower": {"first": True, "kills": 9}}},
                {"teamId": 200, "win": False, "bans": [], "objectives": {"tower": {"first": False, "kills": 3}}},
            ],
        },
    }
    body["info"].update(info)
    return body


# ── Domain objects ────────────────────────────────────────────────────────

def make_match(
    match_id: str,
    creation: Optional[int] = 1700000000000,
    puuid: str = PUUID,
    win: bool = True,
    duration: int = 1800,
    end_of_game_result: str = "GameComplete",
) -> MatchDetail:
    participant = ParticipantStats(
        puuid=puuid, team_id=100, champion_id=7, champion_name="Leblanc", win=win,
        kills=5, deaths=3, assists=7, total_minions_killed=180, neutral_minions_killed=20,
        gold_earned=12345, total_damage_dealt_to_champions=24000,
    )
    return MatchDetail(
        match_id=match_id,
        game_creation=creation,
        game_duration=duration,
        queue_id=420,
        end_of_game_result=end_of_game_result,
        participants=(participant,),
        teams=(TeamResult(team_id=100, win=win), TeamResult(team_id=200, win=not win)),
    )


class FakeGameAPI(IGameAPI):
    """In-memory IGameAPI; any value in ``failures`` is raised instead of returned.

    ``failures`` is keyed by method name, or by ``"match:<id>"`` for single
    matches. Every call is appended to ``calls`` so tests can check ordering.
    """

    def __init__(
        self,
        *,
        puuid: str = PUUID,
        match_ids: Optional[List[str]] = None,
        failures: Optional[Dict[str, Exception]] = None,
        account: Optional[Account] = None,
        summoner: Optional[SummonerSummary] = None,
        on_call: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.puuid = puuid
        self.match_ids = match_ids if match_ids is not None else ["m1", "m2", "m3"]
        self.failures: Dict[str, Exception] = dict(failures or {})
        self.account = account if account is not None else Account(puuid=puuid, game_name="Faker", tag_line="KR1")
        self.summoner = summoner if summoner is not None else SummonerSummary(
            puuid=puuid, summoner_id="sid-1", profile_icon_id=4568, summoner_level=512,
        )
        self.calls: List[str] = []
        self._on_call = on_call

    def _enter(self, key: str) -> None:
        self.calls.append(key)
        if self._on_call is not None:
            self._on_call(key)
        if key in self.failures:
            raise self.failures[key]

    async def resolve_identity(self, game_name: str, tag_line: str) -> Optional[Account]:
        self._enter("resolve_identity")
        return self.account

    async def get_summoner(self, puuid: str) -> Optional[SummonerSummary]:
        self._enter("get_summoner")
        return self.summoner

    async def get_ranked_standings(self, summoner: SummonerSummary) -> List[RankedStanding]:
        self._enter("get_ranked_standings")
        return [RankedStanding(QueueType.RANKED_SOLO_5x5, Tier.GOLD, "II", 54, 10, 8)]

    async def get_mastery(self, puuid: str) -> Dict[int, MasteryEntry]:
        self._enter("get_mastery")
        return {7: MasteryEntry(7, 7, 250000), 103: MasteryEntry(103, 5, 42000)}

    async def get_match_ids(self, puuid: str, count: int) -> List[str]:
        self._enter("get_match_ids")
        return self.match_ids[:count]

    async def get_match(self, match_id: str) -> MatchDetail:
        self._enter(f"match:{match_id}")
        index = self.match_ids.index(match_id) if match_id in self.match_ids else 0
        return make_match(match_id, creation=1700000000000 - index * 3600_000, puuid=self.puuid)
