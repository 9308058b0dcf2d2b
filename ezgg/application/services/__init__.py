"""Application services root exports."""
from .error_reporter import ErrorReporter, classify
from .profile_aggregator import (
    LoadResult, ProfileAggregator, ProfileEvent, ProfileEventKind, ProfileListener,
)
from .profile_registry import ProfileRegistry

__all__ = [
    "ErrorReporter",
    "classify",
    "LoadResult",
    "ProfileAggregator",
    "ProfileEvent",
    "ProfileEventKind",
    "ProfileListener",
    "ProfileRegistry",
]
