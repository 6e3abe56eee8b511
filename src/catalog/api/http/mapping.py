"""Conversion between domain entities and wire DTOs.

Every function is pure, returns ``None`` for ``None`` and builds a fresh
nested category instead of sharing the input's object.
"""

from uuid import UUID

from src.catalog.api.http.dto import CategoryDto, ProductDto
from src.catalog.entities.core._base import EntityState, RecordInfo, new_id
from src.catalog.entities.service.category import Category
from src.catalog.entities.service.product import Product


def category_to_dto(category: Category | None) -> CategoryDto | None:
    if category is None:
        return None
    return CategoryDto(
        id=UUID(category.id),
        name=category.name,
        description=category.description,
    )


def category_from_dto(dto: CategoryDto | None) -> Category | None:
    if dto is None:
        return None
    return Category(
        id=str(dto.id) if dto.id else new_id(),
        name=dto.name,
        description=dto.description,
        record=RecordInfo(state=EntityState.ACTIVE),
    )


def product_to_dto(product: Product | None) -> ProductDto | None:
    if product is None:
        return None
    return ProductDto(
        id=UUID(product.id),
        name=product.name,
        description=product.description,
        image_url=product.image_url,
        price=product.price,
        category=category_to_dto(product.category),
    )


def product_from_dto(dto: ProductDto | None) -> Product | None:
    """Build a new ACTIVE product from its wire form."""
    if dto is None:
        return None
    return Product(
        id=str(dto.id) if dto.id else new_id(),
        name=dto.name,
        description=dto.description,
        image_url=dto.image_url,
        price=dto.price,
        category=category_from_dto(dto.category),
        record=RecordInfo(state=EntityState.ACTIVE),
    )
