"""Wire-level request and response models."""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field, model_validator


class CategoryDto(BaseModel):
    """Category as exchanged over HTTP."""

    id: UUID | None = Field(default=None, description="Ignored on create")
    name: str = Field(min_length=1, description="Name")
    description: str | None = Field(default=None, description="Description")


class ProductDto(BaseModel):
    """Product as exchanged over HTTP.

    A nested category is a reference to an existing category and must
    carry its identifier.
    """

    id: UUID | None = Field(default=None, description="Ignored on create and replace")
    name: str = Field(min_length=1, description="Name")
    description: str | None = Field(default=None, description="Description")
    image_url: str | None = Field(default=None, description="Image reference")
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    category: CategoryDto | None = Field(default=None, description="Associated category")

    @model_validator(mode="after")
    def _category_needs_id(self) -> "ProductDto":
        if self.category is not None and self.category.id is None:
            raise ValueError("category.id is required when a category is given")
        return self
