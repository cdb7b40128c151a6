"""Cache tiers: in-process LRU (L1) and Redis (L2), plus key helpers.

The translation coordinator depends on CacheProtocol only; CacheService is
the Redis implementation wired in lifespan when REDIS_ENABLED is set.
"""

from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.keys import metadata_key
from app.infrastructure.cache.local_cache import CacheStats, LocalCache
from app.infrastructure.cache.redis_cache import CacheService

__all__ = [
    "CacheProtocol",
    "CacheService",
    "CacheStats",
    "LocalCache",
    "metadata_key",
]
