import logging

import redis.asyncio as redis

from blogcms.config import settings

logger = logging.getLogger(__name__)


class CacheManager:
    """
    Connection holder for the Redis cache service.

    The cache is provisioned alongside the document store and connected
    at startup, but no handler or repository reads from or writes to it.
    Its availability is reported by the health endpoint.  Connection
    problems are logged and never raised: the application runs without
    Redis.
    """

    def __init__(self, url: str | None = None) -> None:
        self._url = url or settings.REDIS_URL
        self._redis: redis.Redis | None = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def connect(self) -> None:
        """Open the connection pool.  Called once at application startup."""
        self._redis = redis.from_url(
            self._url,
            decode_responses=True,
            socket_connect_timeout=2,
            socket_timeout=2,
        )
        if await self.ping():
            logger.info("Redis connected: %s", self._url)
        else:
            logger.warning("Redis ping failed for %s; cache unavailable", self._url)

    async def disconnect(self) -> None:
        """Close the connection pool.  Called once at application shutdown."""
        if self._redis:
            await self._redis.aclose()
            self._redis = None

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------

    async def ping(self) -> bool:
        """Return True when the Redis server answers, False otherwise."""
        if not self._redis:
            return False
        try:
            return bool(await self._redis.ping())
        except (redis.RedisError, OSError) as exc:
            logger.debug("Redis PING error: %s", exc)
            return False


# Module-level singleton shared by the application lifespan and /health.
cache = CacheManager()
