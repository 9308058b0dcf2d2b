"""Application use cases."""
from .lookup_player import LookupPlayerUseCase, LookupOutcome

__all__ = [
    'LookupPlayerUseCase',
    'LookupOutcome',
]
