"""Entity: Product."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from src.catalog.entities.core._base import RecordInfo, new_id
from src.catalog.entities.service.category import Category


class Product(BaseModel):
    """Product entity representing a product in the catalog.

    The associated category is a value snapshot resolved through an
    explicit lookup of the stored ``category_id``; it is never a live link
    back into the category's own records.
    """

    id: str = Field(default_factory=new_id, description="Unique identifier")
    name: str = Field(description="Name")
    description: str | None = Field(default=None, description="Description")
    image_url: str | None = Field(default=None, description="Image reference")
    price: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    category: Category | None = Field(default=None, description="Category snapshot")
    record: RecordInfo = Field(default_factory=RecordInfo)

    @property
    def category_id(self) -> str | None:
        return self.category.id if self.category else None

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring bookkeeping."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
            and self.image_url == other.image_url
            and self.price == other.price
            and self.category_id == other.category_id
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring bookkeeping."""
        return hash((
            self.id,
            self.name,
            self.description,
            self.image_url,
            self.price,
            self.category_id,
        ))
