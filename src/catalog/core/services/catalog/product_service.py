"""Product operations with a cache-aside policy on single-product access.

Reads go to the cache first and fill it on a miss. Replacements write the
database and then overwrite the cache entry; deletions remove the row and
then the entry. The database is the source of truth: cache failures are
logged inside ``ProductCache`` and never reach the caller or undo a
database write.
"""

from loguru import logger
from starlette.concurrency import run_in_threadpool

from src.catalog.core.errors import NotFoundError
from src.catalog.core.services.cache.product_cache import ProductCache
from src.catalog.entities.core._base import new_id
from src.catalog.entities.service.category import Category, CategoryRepository
from src.catalog.entities.service.product import Product, ProductRepository


class ProductService:
    def __init__(
        self,
        products: ProductRepository,
        categories: CategoryRepository,
        cache: ProductCache,
    ):
        self._products = products
        self._categories = categories
        self._cache = cache

    async def get_product(self, product_id: str) -> Product:
        cached = await self._cache.get(product_id)
        if cached is not None:
            logger.info("Cache hit for product ID: {}", product_id)
            return cached

        product = await run_in_threadpool(self._products.get, product_id)
        if product is None:
            logger.error("Product with ID {} not found", product_id)
            raise NotFoundError(f"Product with ID: {product_id} not available.")

        await self._cache.put(product)
        return product

    async def replace_product(self, product_id: str, product: Product) -> Product:
        if not await run_in_threadpool(self._products.exists, product_id):
            logger.error("Product with ID {} not found, failed to replace", product_id)
            raise NotFoundError(f"Product with ID: {product_id} not available.")

        category = await run_in_threadpool(self._resolve_category, product.category)
        replacement = product.model_copy(update={"id": product_id, "category": category})
        updated = await run_in_threadpool(self._products.save, replacement)
        logger.info("Product is updated with ID: {}", product_id)

        await self._cache.put(updated)
        return updated

    async def delete_product(self, product_id: str) -> None:
        if not await run_in_threadpool(self._products.exists, product_id):
            logger.error("Product with ID {} not found, cannot delete", product_id)
            raise NotFoundError(f"Product with ID: {product_id} not found.")

        await run_in_threadpool(self._products.delete, product_id)
        logger.info("Product is deleted with ID: {}", product_id)
        await self._cache.evict(product_id)

    def create_product(self, product: Product) -> Product:
        """Persist a new product under a freshly generated identifier."""
        created = self._products.save(
            product.model_copy(
                update={"id": new_id(), "category": self._resolve_category(product.category)}
            )
        )
        logger.info("Product is created with ID: {}", created.id)
        return created

    def list_products(self) -> list[Product]:
        products = self._products.list_all()
        logger.info("Fetched {} products", len(products))
        return products

    def list_products_by_category(self, category_id: str) -> list[Product]:
        return self._products.list_by_category(category_id)

    def get_products(self, product_ids: list[str]) -> list[Product]:
        return self._products.get_many(product_ids)

    def _resolve_category(self, category: Category | None) -> Category | None:
        """Replace a referenced category with its stored version.

        The category must already exist; it is never created on the fly.
        """
        if category is None:
            return None
        stored = self._categories.get(category.id)
        if stored is None:
            raise NotFoundError(f"Category with ID: {category.id} not found")
        return stored
