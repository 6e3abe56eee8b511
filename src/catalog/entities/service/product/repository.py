from collections.abc import Iterable

from loguru import logger
from sqlmodel import Session, select

from src.catalog.core.errors import NotFoundError
from src.catalog.entities.core._base import utcnow
from src.catalog.entities.service.category.repository import (
    CategoryRepository,
    category_from_row,
)
from src.catalog.entities.service.category.table import CategoryTable
from src.catalog.entities.service.product.entity import Product
from src.catalog.entities.service.product.table import ProductTable


class ProductRepository:
    """Data-access layer for products.

    Categories are resolved with explicit lookups on ``category_id``; rows
    carry no ORM relationship.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._categories = CategoryRepository(session)

    def _to_entity(self, row: ProductTable, category_row: CategoryTable | None) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            description=row.description,
            image_url=row.image_url,
            price=row.price,
            category=category_from_row(category_row) if category_row else None,
            record=row.record_info(),
        )

    def _to_entities(self, rows: Iterable[ProductTable]) -> list[Product]:
        rows = list(rows)
        categories = self._categories.get_rows(
            {row.category_id for row in rows if row.category_id}
        )
        return [
            self._to_entity(row, categories.get(row.category_id) if row.category_id else None)
            for row in rows
        ]

    def get(self, product_id: str) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        category_row = (
            self._session.get(CategoryTable, row.category_id) if row.category_id else None
        )
        return self._to_entity(row, category_row)

    def list_all(self) -> list[Product]:
        return self._to_entities(self._session.exec(select(ProductTable)))

    def list_by_category(self, category_id: str) -> list[Product]:
        statement = select(ProductTable).where(ProductTable.category_id == category_id)
        return self._to_entities(self._session.exec(statement))

    def get_many(self, product_ids: list[str]) -> list[Product]:
        """Bulk lookup returning products in request order.

        Raises:
            NotFoundError: naming every requested identifier with no row.
        """
        requested = list(dict.fromkeys(product_ids))
        if not requested:
            return []

        statement = select(ProductTable).where(ProductTable.id.in_(requested))
        by_id = {product.id: product for product in self._to_entities(self._session.exec(statement))}

        if len(by_id) < len(requested):
            missing = [product_id for product_id in requested if product_id not in by_id]
            logger.warning("Bulk lookup missed {} of {} products", len(missing), len(requested))
            raise NotFoundError(
                f"Products not found for IDs: {missing}",
                details={"missing_ids": missing},
            )

        return [by_id[product_id] for product_id in requested]

    def exists(self, product_id: str) -> bool:
        statement = select(ProductTable.id).where(ProductTable.id == product_id)
        return self._session.exec(statement).first() is not None

    def save(self, product: Product) -> Product:
        """Insert or update by primary key and commit.

        The creation timestamp of an existing row is preserved.
        """
        row = self._session.get(ProductTable, product.id)
        if row is None:
            row = ProductTable(id=product.id)
            self._session.add(row)
        else:
            row.updated_at = utcnow()

        row.name = product.name
        row.description = product.description
        row.image_url = product.image_url
        row.price = product.price
        row.category_id = product.category_id
        row.state = product.record.state

        self._session.commit()
        self._session.refresh(row)
        return self.get(row.id)

    def delete(self, product_id: str) -> bool:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.commit()
        return True

    def detach_category(self, category_id: str) -> list[str]:
        """Clear the category reference on every product filed under it.

        Returns:
            Identifiers of the products that were changed.
        """
        rows = self._session.exec(
            select(ProductTable).where(ProductTable.category_id == category_id)
        ).all()
        product_ids = [row.id for row in rows]
        for row in rows:
            row.category_id = None
            row.updated_at = utcnow()
        self._session.commit()
        return product_ids
