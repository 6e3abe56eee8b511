"""Product database table model."""

from decimal import Decimal

from sqlmodel import Field

from src.catalog.entities.core._base import RecordTable


class ProductTable(RecordTable, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    The category is referenced by identifier only.
    """

    __tablename__ = "product"

    name: str
    description: str | None = None
    image_url: str | None = None
    price: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    category_id: str | None = Field(
        default=None, foreign_key="category.id", index=True
    )
