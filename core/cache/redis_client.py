"""
Redis client with connection pooling.

Provides the lookup cache used in front of the record store:
- Connection pooling with bounded socket timeouts
- Raw bytes get / set-with-expiry (SETEX)
- Redis failures raised as CacheUnavailableError so callers can degrade
"""

import threading
from typing import Optional

import redis
from redis.exceptions import RedisError

from core.config import get_settings
from core.errors import CacheUnavailableError
from core.logging import get_logger

logger = get_logger("cache")


class RedisCache:
    """
    Redis cache client with connection pooling.

    The pool is created lazily on first use, so constructing the client never
    touches the network. Commands issued while Redis is down raise
    CacheUnavailableError; once Redis is back the pool reconnects on its own.

    Usage:
        from core.cache import cache

        cache.set_with_expiry("result:S101", b'{"id": "S101"}', 600)
        payload = cache.get("result:S101")
    """

    def __init__(self, url: Optional[str] = None, socket_timeout: Optional[float] = None):
        self._url = url
        self._socket_timeout = socket_timeout
        self._pool: Optional[redis.ConnectionPool] = None
        self._available: bool = False
        self._initialized: bool = False
        self._lock = threading.Lock()

    def initialize(self, force: bool = False) -> bool:
        """
        Create the connection pool and probe Redis.

        Args:
            force: Force re-initialization even if already initialized

        Returns:
            True if Redis answered a PING, False otherwise
        """
        with self._lock:
            if self._initialized and not force:
                return self._available

            settings = get_settings()
            url = self._url or settings.redis_url
            timeout = self._socket_timeout or settings.redis_socket_timeout

            if self._pool is not None:
                self._pool.disconnect()

            self._pool = redis.ConnectionPool.from_url(
                url,
                max_connections=50,
                socket_timeout=timeout,
                socket_connect_timeout=timeout,
                decode_responses=False,  # Payloads are bytes
            )
            self._initialized = True

            try:
                redis.Redis(connection_pool=self._pool).ping()
                self._available = True
                logger.info("redis_connected", url=_redact(url))
            except RedisError as e:
                self._available = False
                logger.warning("redis_connection_failed", url=_redact(url), error=str(e))

            return self._available

    @property
    def client(self) -> redis.Redis:
        """Get Redis client from pool."""
        if not self._initialized:
            self.initialize()
        return redis.Redis(connection_pool=self._pool)

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def is_available(self) -> bool:
        """Whether Redis answered the last probe."""
        if not self._initialized:
            self.initialize()
        return self._available

    def get(self, key: str) -> bytes | None:
        """
        Get a raw payload.

        Returns:
            Stored bytes, or None if the key is absent or expired

        Raises:
            CacheUnavailableError: If Redis cannot be reached
        """
        try:
            data = self.client.get(key)
        except RedisError as e:
            self._available = False
            raise CacheUnavailableError(f"cache get failed for {key}") from e
        self._available = True
        if isinstance(data, str):
            return data.encode("utf-8")
        return data

    def set_with_expiry(self, key: str, value: bytes, ttl_seconds: int) -> bool:
        """
        Store a raw payload that Redis expires after ttl_seconds.

        Raises:
            CacheUnavailableError: If Redis cannot be reached
        """
        try:
            ok = self.client.setex(key, ttl_seconds, value)
        except RedisError as e:
            self._available = False
            raise CacheUnavailableError(f"cache set failed for {key}") from e
        self._available = True
        return bool(ok)

    def health_check(self) -> dict:
        """
        Ping Redis.

        Returns:
            dict with 'healthy' (bool) and 'error' (str or None)
        """
        try:
            self.client.ping()
            self._available = True
            return {"healthy": True, "error": None}
        except RedisError as e:
            self._available = False
            return {"healthy": False, "error": str(e)}

    def close(self) -> None:
        """Disconnect all pooled connections."""
        with self._lock:
            if self._pool is not None:
                self._pool.disconnect()
            self._pool = None
            self._initialized = False
            self._available = False


def _redact(url: str) -> str:
    """Hide the password part of a redis URL for logging."""
    if "@" not in url:
        return url
    scheme, _, rest = url.partition("://")
    return f"{scheme}://***@{rest.split('@', 1)[1]}"


# Process-wide cache handle; services receive it through dependency injection
cache = RedisCache()
