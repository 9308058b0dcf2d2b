"""
EZ.GG - League of Legends Player Lookup
=======================================

Resolves a Riot ID to a player profile: summoner summary, ranked
standings, champion mastery and recent match history.

Features:
- Clean Architecture (Domain → Infrastructure → Application → Presentation)
- Async Riot API client with 429 retry and proactive rate limiting
- Observable profile that fills in as each request lands
- One profile per player per session

Version: 1.0.0
"""

__version__ = "1.0.0"

from .domain import (
    PlayerProfile, SummonerSummary, RankedStanding, MasteryEntry, MatchDetail,
    QueueType, Region, Tier, LoadState,
)

from .infrastructure import (
    GameAPIClient,
    RateLimitedFetcher,
    DataDragon,
)

from .application import (
    ProfileAggregator,
    ProfileRegistry,
    ErrorReporter,
    LookupPlayerUseCase,
)

from .config import settings

__all__ = [
    # Version info
    '__version__',

    # Domain
    'PlayerProfile',
    'SummonerSummary',
    'RankedStanding',
    'MasteryEntry',
    'MatchDetail',
    'QueueType',
    'Region',
    'Tier',
    'LoadState',

    # Infrastructure
    'GameAPIClient',
    'RateLimitedFetcher',
    'DataDragon',

    # Application
    'ProfileAggregator',
    'ProfileRegistry',
    'ErrorReporter',
    'LookupPlayerUseCase',

    # Config
    'settings',
]
