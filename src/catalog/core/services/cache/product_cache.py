"""Redis hash cache holding denormalized product snapshots."""

from loguru import logger
from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.catalog.entities.service.product import Product
from src.catalog.runtime.config.config_data import CacheConfig

# Raised by the client on network trouble or by the codec on a corrupt payload
CACHE_ERRORS = (RedisError, OSError, ValueError)


class ProductCache:
    """Best-effort product cache over Redis hash fields.

    Each product lives in the hash ``<namespace><separator><productId>``
    under the field ``<productId>``, serialized as the product's JSON
    snapshot. Entries carry no expiry.

    Every operation swallows and logs cache failures: a failed read is a
    miss and a failed write or delete leaves the database result standing.
    Without a client (Redis disabled) every call is a no-op.
    """

    def __init__(self, client: Redis | None, config: CacheConfig | None = None):
        config = config or CacheConfig()
        self._client = client
        self._namespace = config.product_namespace
        self._separator = config.key_separator

    @property
    def enabled(self) -> bool:
        return self._client is not None

    def key_for(self, product_id: str) -> str:
        return f"{self._namespace}{self._separator}{product_id}"

    async def get(self, product_id: str) -> Product | None:
        if self._client is None:
            return None

        try:
            payload = await self._client.hget(self.key_for(product_id), product_id)
            if not payload:
                return None
            return Product.model_validate_json(payload)
        except CACHE_ERRORS as exc:
            logger.warning(
                "Product cache read failed for {}, treating as miss: {}",
                product_id,
                exc,
            )
            return None

    async def put(self, product: Product) -> None:
        if self._client is None:
            return

        try:
            await self._client.hset(
                self.key_for(product.id), product.id, product.model_dump_json()
            )
        except CACHE_ERRORS as exc:
            logger.warning("Product cache write failed for {}: {}", product.id, exc)

    async def evict(self, product_id: str) -> None:
        if self._client is None:
            return

        try:
            await self._client.hdel(self.key_for(product_id), product_id)
        except CACHE_ERRORS as exc:
            logger.warning("Product cache delete failed for {}: {}", product_id, exc)

    async def evict_many(self, product_ids: list[str]) -> None:
        for product_id in product_ids:
            await self.evict(product_id)
