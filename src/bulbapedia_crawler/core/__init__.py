# ABOUTME: Business logic and orchestration layer
# ABOUTME: Domain models, the memoized catalog store and the service facade

"""
Core Layer: Domain models and service APIs

This layer handles:
- Catalog reference and detail record models
- Single-flight memoization of the reference list
- Service API combining listing, details and caching

Data Flow: extraction/ records -> Memoized store -> Callers
"""

from .lazy import AsyncLazy, CacheState
from .models import MISSING_VALUE, PokemonDetails, PokemonReference

# Import service on-demand to avoid circular imports
# Use: from bulbapedia_crawler.core.service import PokemonService

__all__ = [
    "MISSING_VALUE",
    "AsyncLazy",
    "CacheState",
    "PokemonDetails",
    "PokemonReference",
]
