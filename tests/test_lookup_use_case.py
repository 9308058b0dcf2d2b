import asyncio

import pytest

from ezgg.application.services import ProfileRegistry
from ezgg.application.use_cases import LookupPlayerUseCase
from ezgg.domain.enums import LoadState
from ezgg.domain.errors import NetworkError
from tests.factories import PUUID, FakeGameAPI


def test_search_registers_completed_profile():
    use_case = LookupPlayerUseCase(FakeGameAPI(), match_count=3)
    outcome = asyncio.run(use_case.search("Faker", "KR1"))
    assert outcome.result.ok
    assert outcome.registered and not outcome.reused
    assert use_case.registry.lookup(PUUID) is outcome.aggregator


def test_second_search_reuses_registered_profile():
    use_case = LookupPlayerUseCase(FakeGameAPI(), match_count=3)
    first = asyncio.run(use_case.search("Faker", "KR1"))
    second = asyncio.run(use_case.search("faker", "kr1"))
    assert second.reused
    assert second.aggregator is first.aggregator
    assert len(use_case.registry) == 1


def test_failed_search_is_not_registered():
    api = FakeGameAPI(failures={"resolve_identity": NetworkError("offline")})
    use_case = LookupPlayerUseCase(api)
    outcome = asyncio.run(use_case.search("Faker", "KR1"))
    assert outcome.result.state is LoadState.ERROR
    assert outcome.error_message == "Network error: offline"
    assert not outcome.registered
    assert len(use_case.registry) == 0


def test_search_riot_id_rejects_malformed_input():
    use_case = LookupPlayerUseCase(FakeGameAPI())
    with pytest.raises(ValueError):
        asyncio.run(use_case.search_riot_id("no-tag-here"))


def test_open_loads_unknown_player_by_id():
    api = FakeGameAPI()
    use_case = LookupPlayerUseCase(api, match_count=3)
    aggregator = asyncio.run(use_case.open(PUUID, "Faker", "KR1"))
    assert aggregator.state is LoadState.COMPLETE
    assert "resolve_identity" not in api.calls
    assert use_case.registry.lookup(PUUID) is aggregator


def test_concurrent_opens_share_one_pipeline():
    api = FakeGameAPI()
    use_case = LookupPlayerUseCase(api, match_count=3)

    async def run():
        return await asyncio.gather(use_case.open(PUUID), use_case.open(PUUID))

    first, second = asyncio.run(run())
    assert first is second
    assert api.calls.count("get_summoner") == 1


def test_open_after_search_reuses_profile():
    api = FakeGameAPI()
    registry = ProfileRegistry()
    use_case = LookupPlayerUseCase(api, registry, match_count=3)
    searched = asyncio.run(use_case.search("Faker", "KR1"))
    opened = asyncio.run(use_case.open(PUUID))
    assert opened is searched.aggregator
    assert api.calls.count("get_summoner") == 1


def test_listener_is_attached_to_new_aggregators():
    kinds = []
    use_case = LookupPlayerUseCase(FakeGameAPI(), match_count=1, listener=lambda e: kinds.append(e.kind))
    asyncio.run(use_case.search("Faker", "KR1"))
    assert kinds
