"""
Redis Caching Layer.

Provides the time-expiring lookup cache that sits in front of the record
store, and the key naming used for every cached entity.

Usage:
    from core.cache import cache, CacheKeys

    cache.set_with_expiry(CacheKeys.result("S101"), payload, ttl=600)
    payload = cache.get(CacheKeys.result("S101"))
"""

from core.cache.cache_keys import CacheKeys
from core.cache.redis_client import RedisCache, cache

__all__ = [
    "RedisCache",
    "cache",
    "CacheKeys",
]
