"""Infrastructure API module."""
from .riot_client import GameAPIClient
from .fetcher import RateLimitedFetcher
from .rate_limiter import RateLimiter

__all__ = [
    'GameAPIClient',
    'RateLimitedFetcher',
    'RateLimiter',
]
