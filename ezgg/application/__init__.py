"""Application layer - Services and use cases."""
from .services import ErrorReporter, LoadResult, ProfileAggregator, ProfileRegistry
from .use_cases import LookupPlayerUseCase, LookupOutcome

__all__ = [
    'ErrorReporter',
    'LoadResult',
    'ProfileAggregator',
    'ProfileRegistry',
    'LookupPlayerUseCase',
    'LookupOutcome',
]
