"""Pipeline states of a profile load."""
from enum import Enum


class LoadState(Enum):
    IDLE = "idle"
    RESOLVING_IDENTITY = "resolving_identity"
    LOADING_SUMMARY = "loading_summary"
    LOADING_RANKED_AND_MASTERY = "loading_ranked_and_mastery"
    LOADING_MATCH_IDS = "loading_match_ids"
    LOADING_MATCH_DETAILS = "loading_match_details"
    COMPLETE = "complete"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (LoadState.COMPLETE, LoadState.ERROR)

    @property
    def is_loading(self) -> bool:
        return self not in (LoadState.IDLE, LoadState.COMPLETE, LoadState.ERROR)


class ErrorKind(Enum):
    NETWORK = "network"
    DECODE = "decode"
    NOT_FOUND = "not_found"
    RATE_LIMIT = "rate_limit"
    UNKNOWN = "unknown"


class MatchStatus(Enum):
    NOT_REQUESTED = "not_requested"
    LOADED = "loaded"
    FAILED = "failed"
