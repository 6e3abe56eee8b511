"""Category operations."""

from loguru import logger
from starlette.concurrency import run_in_threadpool

from src.catalog.core.errors import NotFoundError
from src.catalog.core.services.cache.product_cache import ProductCache
from src.catalog.entities.core._base import new_id
from src.catalog.entities.service.category import Category, CategoryRepository
from src.catalog.entities.service.product import ProductRepository


class CategoryService:
    """CRUD over categories.

    Cached product snapshots embed their category, so updating or deleting
    a category evicts the cached products filed under it.
    """

    def __init__(
        self,
        categories: CategoryRepository,
        products: ProductRepository,
        cache: ProductCache,
    ):
        self._categories = categories
        self._products = products
        self._cache = cache

    def create_category(self, category: Category) -> Category:
        created = self._categories.save(category.model_copy(update={"id": new_id()}))
        logger.info("Category is created with ID: {}", created.id)
        return created

    def list_categories(self) -> list[Category]:
        return self._categories.list_all()

    def get_category(self, category_id: str) -> Category:
        category = self._categories.get(category_id)
        if category is None:
            raise NotFoundError(f"Category does not exist with ID: {category_id}")
        return category

    async def update_category(self, category_id: str, category: Category) -> Category:
        if not await run_in_threadpool(self._categories.exists, category_id):
            raise NotFoundError(f"Category with ID: {category_id} not exists")

        updated = await run_in_threadpool(
            self._categories.save, category.model_copy(update={"id": category_id})
        )
        logger.info("Category is updated with ID: {}", category_id)

        affected = [
            p.id for p in await run_in_threadpool(self._products.list_by_category, category_id)
        ]
        await self._cache.evict_many(affected)
        return updated

    async def delete_category(self, category_id: str) -> None:
        if not await run_in_threadpool(self._categories.exists, category_id):
            raise NotFoundError(f"Category does not exist with ID: {category_id}")

        detached = await run_in_threadpool(self._products.detach_category, category_id)
        await run_in_threadpool(self._categories.delete, category_id)
        logger.info(
            "Category is deleted with ID: {} ({} products detached)", category_id, len(detached)
        )
        await self._cache.evict_many(detached)
