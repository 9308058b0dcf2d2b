import asyncio

from ezgg.application.services import ProfileAggregator, ProfileEventKind
from ezgg.domain.entities import MatchDetail, MatchLoadFailure
from ezgg.domain.enums import ErrorKind, LoadState, MatchStatus, QueueType
from ezgg.domain.errors import DecodeError, HttpError, NetworkError, RateLimitExceeded
from tests.factories import PUUID, FakeGameAPI


def _load(api, match_count=40, listener=None):
    aggregator = ProfileAggregator(api, match_count=match_count)
    if listener is not None:
        aggregator.subscribe(listener)
    result = asyncio.run(aggregator.load("Faker", "KR1"))
    return aggregator, result


def test_successful_load_fills_every_part():
    aggregator, result = _load(FakeGameAPI())
    profile = aggregator.profile
    assert result.ok
    assert result.player_id == PUUID
    assert profile.state is LoadState.COMPLETE
    assert profile.riot_id == "Faker#KR1"
    assert profile.summoner.summoner_level == 512
    assert profile.solo.tier.value == "GOLD"
    assert set(profile.mastery) == {7, 103}
    assert profile.match_ids == ["m1", "m2", "m3"]
    assert all(isinstance(profile.matches.get(m), MatchDetail) for m in profile.match_ids)
    assert profile.error is None
    assert aggregator.errors.current is None


def test_two_loads_give_equal_summaries():
    aggregator, _ = _load(FakeGameAPI())
    first = aggregator.profile.summoner
    result = asyncio.run(aggregator.load("Faker", "KR1"))
    assert result.ok
    assert aggregator.profile.summoner == first
    assert aggregator.profile.match_ids == ["m1", "m2", "m3"]


def test_one_failed_match_does_not_stop_the_rest():
    api = FakeGameAPI(failures={"match:m2": NetworkError("timed out")})
    aggregator, result = _load(api)
    matches = aggregator.profile.matches
    assert isinstance(matches.get("m1"), MatchDetail)
    assert isinstance(matches.get("m2"), MatchLoadFailure)
    assert isinstance(matches.get("m3"), MatchDetail)
    assert matches.status("m2") is MatchStatus.FAILED
    assert matches.get("m2").error.message == "Network error: timed out"
    assert result.state is LoadState.COMPLETE
    assert result.error is None


def test_ranked_failure_is_partial():
    api = FakeGameAPI(failures={"get_ranked_standings": HttpError(503)})
    aggregator, result = _load(api)
    profile = aggregator.profile
    assert result.state is LoadState.COMPLETE
    assert profile.ranked == {}
    assert set(profile.mastery) == {7, 103}
    assert result.partial_errors["ranked"].kind is ErrorKind.UNKNOWN
    assert "mastery" not in result.partial_errors


def test_mastery_failure_is_partial():
    api = FakeGameAPI(failures={"get_mastery": DecodeError("mastery: bad shape")})
    aggregator, result = _load(api)
    assert result.ok
    assert QueueType.RANKED_SOLO_5x5 in aggregator.profile.ranked
    assert aggregator.profile.mastery == {}
    assert result.partial_errors["mastery"].message == "Data error: mastery: bad shape"


def test_reload_changes_only_that_match():
    api = FakeGameAPI(failures={"match:m2": NetworkError("reset")})
    aggregator, _ = _load(api)
    before_m1 = aggregator.profile.matches.get("m1")
    before_m3 = aggregator.profile.matches.get("m3")

    del api.failures["match:m2"]
    entry = asyncio.run(aggregator.reload("m2"))

    matches = aggregator.profile.matches
    assert isinstance(entry, MatchDetail)
    assert matches.get("m2") is entry
    assert matches.get("m1") is before_m1
    assert matches.get("m3") is before_m3
    assert aggregator.state is LoadState.COMPLETE


def test_failed_reload_keeps_loaded_detail():
    api = FakeGameAPI()
    aggregator, _ = _load(api)
    loaded = aggregator.profile.matches.get("m1")

    api.failures["match:m1"] = NetworkError("offline")
    entry = asyncio.run(aggregator.reload("m1"))

    assert entry is loaded
    assert aggregator.profile.matches.get("m1") is loaded
    assert aggregator.errors.message == "Network error: offline"


def test_unknown_riot_id_ends_in_error():
    api = FakeGameAPI()
    api.account = None
    aggregator, result = _load(api)
    assert result.state is LoadState.ERROR
    assert result.error.kind is ErrorKind.NOT_FOUND
    assert result.error.message == "Error: No player found for Faker#KR1"
    assert api.calls == ["resolve_identity"]


def test_missing_summoner_ends_in_error():
    api = FakeGameAPI()
    api.summoner = None
    aggregator, result = _load(api)
    assert result.state is LoadState.ERROR
    assert result.error.message == "Error: Summoner not found"
    assert aggregator.profile.player_id == PUUID
    assert "get_match_ids" not in api.calls


def test_rate_limited_identity_reports_rate_limit():
    api = FakeGameAPI(failures={"resolve_identity": RateLimitExceeded(3)})
    aggregator, result = _load(api)
    assert result.error.kind is ErrorKind.RATE_LIMIT
    assert aggregator.errors.message == "Error: Rate limit exceeded"


def test_match_id_failure_ends_in_error_after_ranked_and_mastery():
    api = FakeGameAPI(failures={"get_match_ids": NetworkError("dns")})
    aggregator, result = _load(api)
    assert result.state is LoadState.ERROR
    assert aggregator.profile.ranked
    assert aggregator.profile.mastery
    assert not any(call.startswith("match:") for call in api.calls)


def test_match_details_fetched_in_order_one_at_a_time():
    in_flight = []
    peak = []

    class SlowAPI(FakeGameAPI):
        async def get_match(self, match_id):
            in_flight.append(match_id)
            peak.append(len(in_flight))
            await asyncio.sleep(0)
            in_flight.remove(match_id)
            return await super().get_match(match_id)

    api = SlowAPI(match_ids=["m1", "m2", "m3", "m4"])
    _load(api)
    assert [c for c in api.calls if c.startswith("match:")] == ["match:m1", "match:m2", "match:m3", "match:m4"]
    assert max(peak) == 1


def test_match_count_limits_requested_ids():
    api = FakeGameAPI(match_ids=["m1", "m2", "m3"])
    aggregator, _ = _load(api, match_count=2)
    assert aggregator.profile.match_ids == ["m1", "m2"]


def test_events_follow_the_pipeline_and_stream_matches():
    states = []
    match_events = []

    def listener(event):
        if event.kind is ProfileEventKind.STATE:
            states.append(event.profile.state)
        elif event.kind is ProfileEventKind.MATCH:
            # each match is visible as soon as it lands, before the next one is fetched
            match_events.append((event.match_id, sorted(event.profile.matches)))

    _load(FakeGameAPI(), listener=listener)
    assert states == [
        LoadState.RESOLVING_IDENTITY,
        LoadState.LOADING_SUMMARY,
        LoadState.LOADING_RANKED_AND_MASTERY,
        LoadState.LOADING_MATCH_IDS,
        LoadState.LOADING_MATCH_DETAILS,
        LoadState.COMPLETE,
    ]
    assert match_events == [
        ("m1", ["m1"]),
        ("m2", ["m1", "m2"]),
        ("m3", ["m1", "m2", "m3"]),
    ]


def test_failing_listener_does_not_break_the_load():
    seen = []

    def broken(event):
        raise RuntimeError("boom")

    aggregator = ProfileAggregator(FakeGameAPI(), match_count=40)
    aggregator.subscribe(broken)
    aggregator.subscribe(lambda event: seen.append(event.kind))
    result = asyncio.run(aggregator.load("Faker", "KR1"))
    assert result.ok
    assert ProfileEventKind.MATCH in seen


def test_unsubscribe_stops_notifications():
    seen = []
    aggregator = ProfileAggregator(FakeGameAPI(), match_count=40)
    unsubscribe = aggregator.subscribe(seen.append)
    unsubscribe()
    unsubscribe()
    asyncio.run(aggregator.load("Faker", "KR1"))
    assert seen == []


def test_load_by_id_skips_identity():
    api = FakeGameAPI()
    aggregator = ProfileAggregator(api, match_count=40)
    result = asyncio.run(aggregator.load_by_id(PUUID, "Faker", "KR1"))
    assert result.ok
    assert "resolve_identity" not in api.calls
    assert aggregator.profile.riot_id == "Faker#KR1"


def test_wait_returns_latest_result():
    aggregator = ProfileAggregator(FakeGameAPI(), match_count=40)

    async def run():
        assert await aggregator.wait() is None
        task = asyncio.create_task(aggregator.load("Faker", "KR1"))
        await asyncio.sleep(0)
        waited = await aggregator.wait()
        return waited, await task

    waited, loaded = asyncio.run(run())
    assert waited is loaded
    assert aggregator.last_result is loaded


class _RendezvousAPI(FakeGameAPI):
    """Ranked and mastery each wait until the other call has started."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.in_flight = 0
        self.peak = 0
        self._started = {}

    async def _meet(self, mine, other):
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        self._started[mine].set()
        try:
            await asyncio.wait_for(self._started[other].wait(), timeout=1.0)
        finally:
            self.in_flight -= 1

    async def get_ranked_standings(self, summoner):
        await self._meet("ranked", "mastery")
        return await super().get_ranked_standings(summoner)

    async def get_mastery(self, puuid):
        await self._meet("mastery", "ranked")
        return await super().get_mastery(puuid)


def test_ranked_and_mastery_are_in_flight_together():
    api = _RendezvousAPI()

    async def run():
        api._started = {"ranked": asyncio.Event(), "mastery": asyncio.Event()}
        aggregator = ProfileAggregator(api, match_count=3)
        return aggregator, await aggregator.load("Faker", "KR1")

    aggregator, result = asyncio.run(run())
    assert api.peak == 2
    assert result.ok
    assert aggregator.profile.solo is not None
    assert set(aggregator.profile.mastery) == {7, 103}
