"""Infrastructure layer - Riot API client and Data Dragon assets."""
from .api import GameAPIClient, RateLimitedFetcher, RateLimiter
from .ddragon import DataDragon, IconKind

__all__ = [
    'GameAPIClient',
    'RateLimitedFetcher',
    'RateLimiter',
    'DataDragon',
    'IconKind',
]
