from concurrent.futures import ThreadPoolExecutor

import pytest

from ezgg.application.services import ProfileAggregator, ProfileRegistry
from tests.factories import FakeGameAPI


def _factory(api):
    created = []

    def build(player_id):
        aggregator = ProfileAggregator(api, match_count=5)
        created.append(player_id)
        return aggregator

    return build, created


def test_get_or_create_returns_same_object():
    build, created = _factory(FakeGameAPI())
    registry = ProfileRegistry(build)
    first = registry.get_or_create("p1")
    assert registry.get_or_create("p1") is first
    assert created == ["p1"]
    assert "p1" in registry
    assert len(registry) == 1


def test_per_call_factory_overrides_default():
    api = FakeGameAPI()
    build, created = _factory(api)
    registry = ProfileRegistry(build)
    own = ProfileAggregator(api)
    assert registry.get_or_create("p2", lambda _id: own) is own
    assert created == []


def test_without_factory_raises():
    with pytest.raises(ValueError):
        ProfileRegistry().get_or_create("p1")


def test_lookup_and_recent():
    build, _ = _factory(FakeGameAPI())
    registry = ProfileRegistry(build)
    a = registry.get_or_create("a")
    b = registry.get_or_create("b")
    c = registry.get_or_create("c")
    assert registry.lookup("b") is b
    assert registry.lookup("zzz") is None
    assert registry.recent(2) == [c, b]
    assert list(registry) == [a, b, c]


def test_concurrent_get_or_create_builds_once_and_reads_stay_consistent():
    build, created = _factory(FakeGameAPI())
    registry = ProfileRegistry(build)
    ids = [f"p{i % 10}" for i in range(200)]
    seen = []

    def worker(player_id):
        aggregator = registry.get_or_create(player_id)
        assert player_id in registry
        assert registry.lookup(player_id) is aggregator
        seen.append(len(registry))
        return aggregator

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(worker, ids))

    assert sorted(created) == sorted(set(ids))
    assert len(registry) == 10
    assert all(1 <= n <= 10 for n in seen)
    for player_id, aggregator in zip(ids, results):
        assert registry.lookup(player_id) is aggregator
