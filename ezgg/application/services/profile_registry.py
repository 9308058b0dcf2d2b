"""Session-wide collection of loaded profiles."""
from __future__ import annotations

import threading
from typing import Callable, Dict, Iterator, List, Optional

from ezgg.core.logging import get_logger
from .profile_aggregator import ProfileAggregator

AggregatorFactory = Callable[[str], ProfileAggregator]


class ProfileRegistry:
    """At most one ProfileAggregator per PlayerId for the life of the process.

    Entries are only ever added; there is no eviction.
    Safe to share across threads: every read and write holds the lock.
    """

    def __init__(self, factory: Optional[AggregatorFactory] = None):
        self._factory = factory
        self._profiles: Dict[str, ProfileAggregator] = {}
        self._lock = threading.Lock()
        self._log = get_logger(__name__, service="registry")

    def get_or_create(self, player_id: str, factory: Optional[AggregatorFactory] = None) -> ProfileAggregator:
        """Return the aggregator registered for ``player_id``, creating it on first use."""
        with self._lock:
            existing = self._profiles.get(player_id)
            if existing is not None:
                return existing
            build = factory or self._factory
            if build is None:
                raise ValueError("ProfileRegistry has no factory to create a profile with")
            aggregator = build(player_id)
            self._profiles[player_id] = aggregator
        self._log.debug(lambda: f"registered profile {player_id} (total {len(self._profiles)})")
        return aggregator

    def lookup(self, player_id: str) -> Optional[ProfileAggregator]:
        with self._lock:
            return self._profiles.get(player_id)

    def recent(self, n: int) -> List[ProfileAggregator]:
        """Most recently registered first."""
        with self._lock:
            ordered = list(self._profiles.values())
        return ordered[::-1][:n]

    def __contains__(self, player_id: object) -> bool:
        with self._lock:
            return player_id in self._profiles

    def __len__(self) -> int:
        with self._lock:
            return len(self._profiles)

    def __iter__(self) -> Iterator[ProfileAggregator]:
        with self._lock:
            return iter(list(self._profiles.values()))
