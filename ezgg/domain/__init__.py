"""Domain layer - entities, enums, errors and the game API port."""
from .entities import (
    PlayerIdentity, Account, SummonerSummary, RankedStanding, MasteryEntry,
    ParticipantStats, TeamResult, MatchDetail, MatchLoadFailure,
    ErrorReport, PlayerProfile, MatchHistory,
)
from .enums import Region, QueueType, Tier, LoadState, ErrorKind, MatchStatus
from .errors import GameAPIError, NetworkError, HttpError, RateLimitExceeded, DecodeError, NotFound
from .interfaces import IGameAPI

__all__ = [
    # Entities
    'PlayerIdentity',
    'Account',
    'SummonerSummary',
    'RankedStanding',
    'MasteryEntry',
    'ParticipantStats',
    'TeamResult',
    'MatchDetail',
    'MatchLoadFailure',
    'ErrorReport',
    'PlayerProfile',
    'MatchHistory',
    # Enums
    'Region',
    'QueueType',
    'Tier',
    'LoadState',
    'ErrorKind',
    'MatchStatus',
    # Errors
    'GameAPIError',
    'NetworkError',
    'HttpError',
    'RateLimitExceeded',
    'DecodeError',
    'NotFound',
    # Interfaces
    'IGameAPI',
]
