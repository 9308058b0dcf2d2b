"""Player profile aggregate and its match-history cache."""
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Union

from ..enums import LoadState, MatchStatus, QueueType
from .error_report import ErrorReport
from .mastery import MasteryEntry
from .match import MatchDetail, MatchLoadFailure
from .summoner import RankedStanding, SummonerSummary

MatchEntry = Union[MatchDetail, MatchLoadFailure]


class MatchHistory:
    """Sparse ``match_id -> MatchDetail | MatchLoadFailure`` mapping.

    A key is absent until its fetch resolves. Writes take a lock that is
    never held across an await, so reloads can race the main pipeline.
    Iteration order is first-insertion order; overwriting keeps the slot.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, MatchEntry] = {}
        self._lock = threading.Lock()

    def put(self, match_id: str, entry: MatchEntry) -> None:
        with self._lock:
            self._entries[match_id] = entry

    def put_failure(self, failure: MatchLoadFailure) -> MatchEntry:
        """Record a failure unless a loaded detail is already there.

        Returns whatever the slot holds afterwards.
        """
        with self._lock:
            current = self._entries.get(failure.match_id)
            if isinstance(current, MatchDetail):
                return current
            self._entries[failure.match_id] = failure
            return failure

    def get(self, match_id: str) -> Optional[MatchEntry]:
        return self._entries.get(match_id)

    def status(self, match_id: str) -> MatchStatus:
        entry = self._entries.get(match_id)
        if entry is None:
            return MatchStatus.NOT_REQUESTED
        if isinstance(entry, MatchLoadFailure):
            return MatchStatus.FAILED
        return MatchStatus.LOADED

    def loaded(self) -> Dict[str, MatchDetail]:
        with self._lock:
            return {k: v for k, v in self._entries.items() if isinstance(v, MatchDetail)}

    def failed(self) -> Dict[str, MatchLoadFailure]:
        with self._lock:
            return {k: v for k, v in self._entries.items() if isinstance(v, MatchLoadFailure)}

    def snapshot(self) -> Dict[str, MatchEntry]:
        with self._lock:
            return dict(self._entries)

    def __contains__(self, match_id: object) -> bool:
        return match_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))


@dataclass
class PlayerProfile:
    """Everything known about one player, filled in as each fetch lands.

    Fields are never rolled back: a failed step leaves earlier results in
    place and sets ``error`` (terminating) or ``partial_errors`` (best-effort
    steps).
    """

    game_name: Optional[str] = None
    tag_line: Optional[str] = None
    player_id: Optional[str] = None

    summoner: Optional[SummonerSummary] = None
    ranked: Dict[QueueType, RankedStanding] = field(default_factory=dict)
    mastery: Dict[int, MasteryEntry] = field(default_factory=dict)
    match_ids: List[str] = field(default_factory=list)
    matches: MatchHistory = field(default_factory=MatchHistory)

    state: LoadState = LoadState.IDLE
    error: Optional[ErrorReport] = None
    partial_errors: Dict[str, ErrorReport] = field(default_factory=dict)

    @property
    def riot_id(self) -> str:
        return f"{self.game_name or 'N/A'}#{self.tag_line or 'N/A'}"

    @property
    def solo(self) -> Optional[RankedStanding]:
        return self.ranked.get(QueueType.RANKED_SOLO_5x5)

    @property
    def flex(self) -> Optional[RankedStanding]:
        return self.ranked.get(QueueType.RANKED_FLEX_SR)

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    def top_mastery(self, n: int) -> List[MasteryEntry]:
        entries = sorted(self.mastery.values(), key=lambda m: m.champion_points or 0, reverse=True)
        return entries[:n]

    def recent_match_ids(self) -> List[str]:
        """Requested match ids, newest first.

        Sorted by ``game_creation`` only when every requested id has a
        loaded detail carrying one; otherwise the server's order is kept.
        Ids only known through a reload go last.
        """
        listed = set(self.match_ids)
        ids = [m for m in self.match_ids if m in self.matches]
        ids += [m for m in self.matches if m not in listed]
        created: Dict[str, int] = {}
        for match_id in ids:
            entry = self.matches.get(match_id)
            if isinstance(entry, MatchDetail) and entry.game_creation is not None:
                created[match_id] = entry.game_creation
        if len(created) != len(ids):
            return ids
        return sorted(ids, key=lambda m: created[m], reverse=True)
