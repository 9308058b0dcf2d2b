"""Domain interfaces."""
from .game_api import IGameAPI

__all__ = [
    'IGameAPI',
]
