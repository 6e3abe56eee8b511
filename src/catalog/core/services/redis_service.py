"""Shared Redis client backing the product cache."""

import redis.asyncio as redis_async
from loguru import logger
from redis.asyncio import Redis
from redis.backoff import NoBackoff
from redis.exceptions import RedisError
from redis.retry import Retry

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import get_config


class RedisService:
    """Own the application-wide async Redis client.

    With Redis disabled, or enabled without a URL, no client is built and
    ``get_client`` returns ``None``; the product cache then stays out of
    the way and every read goes to the database.
    """

    def __init__(self, config: ConfigData | None = None, client: Redis | None = None):
        """
        Args:
            config: Configuration to read; defaults to the active context.
            client: Ready-made client (tests pass a fake one); skips the URL.
        """
        redis_config = (config or get_config()).redis
        self._client: Redis | None = client

        if client is not None:
            self._enabled = True
            return

        self._enabled = redis_config.enabled and bool(redis_config.url)
        if not redis_config.enabled:
            logger.info("Product cache disabled by configuration")
            return
        if not redis_config.url:
            logger.warning("Redis enabled but no URL configured; product cache disabled")
            return

        # A cache call either answers within the socket timeout or counts as a miss
        self._client = redis_async.from_url(
            redis_config.connection_string,
            encoding="utf-8",
            decode_responses=redis_config.decode_responses,
            max_connections=redis_config.max_connections,
            socket_timeout=redis_config.socket_timeout,
            socket_connect_timeout=redis_config.socket_connect_timeout,
            retry=Retry(NoBackoff(), retries=0),
            client_name="catalog_product_cache",
        )
        logger.info(
            "Redis client ready at {} (pool size {})",
            redis_config.sanitized_connection_string,
            redis_config.max_connections,
        )

    def get_client(self) -> Redis | None:
        return self._client if self._enabled else None

    async def health_check(self) -> bool:
        """PING the server; False when disabled or unreachable."""
        if self.get_client() is None:
            return False

        try:
            return bool(await self._client.ping())
        except (RedisError, OSError) as exc:
            logger.error("Redis health check failed: {}", exc)
            return False

    async def close(self) -> None:
        if self._client is None:
            return

        try:
            await self._client.aclose()
            logger.info("Redis connection closed")
        except (RedisError, OSError) as exc:
            logger.error("Error closing Redis connection: {}", exc)
        finally:
            self._client = None

    @property
    def is_enabled(self) -> bool:
        return self._enabled
