"""Domain enumerations."""
from .region import Region
from .queue_type import QueueType
from .rank import Tier
from .load_state import LoadState, ErrorKind, MatchStatus

__all__ = [
    'Region',
    'QueueType',
    'Tier',
    'LoadState',
    'ErrorKind',
    'MatchStatus',
]
