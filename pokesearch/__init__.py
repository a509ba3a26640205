"""
pokesearch: command-line lookups against the PokéAPI with a local file cache.
"""

__version__ = "1.0.0"

from .config import Config
from .api_client import PokeAPIClient
from .cache_manager import CacheManager
from .matchup import MatchupResult, PokemonType, compute
from .models import CacheKey, EntityKind
from .resolver import LookupResolver

__all__ = [
    "Config",
    "PokeAPIClient",
    "CacheManager",
    "CacheKey",
    "EntityKind",
    "LookupResolver",
    "MatchupResult",
    "PokemonType",
    "compute",
]
