"""Product API router."""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from loguru import logger

from src.catalog.api.http.deps import get_product_service, require_role
from src.catalog.api.http.dto import ProductDto
from src.catalog.api.http.mapping import product_from_dto, product_to_dto
from src.catalog.core.services import ProductService

router = APIRouter()


@router.get("", response_model=list[ProductDto])
def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[ProductDto]:
    """List all products."""
    return [product_to_dto(p) for p in service.list_products()]


@router.get("/category/{category_id}", response_model=list[ProductDto])
def list_products_by_category(
    category_id: UUID,
    service: ProductService = Depends(get_product_service),
) -> list[ProductDto]:
    """List the products filed under a category."""
    return [product_to_dto(p) for p in service.list_products_by_category(str(category_id))]


@router.post("/bulk", response_model=list[ProductDto])
def get_products(
    product_ids: list[UUID],
    service: ProductService = Depends(get_product_service),
) -> list[ProductDto]:
    """Fetch several products at once; fails if any of them is missing."""
    ids = [str(product_id) for product_id in product_ids]
    return [product_to_dto(p) for p in service.get_products(ids)]


@router.post(
    "",
    response_model=ProductDto,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_role("ADMIN"))],
)
def create_product(
    product: ProductDto,
    service: ProductService = Depends(get_product_service),
) -> ProductDto:
    """Create a new product."""
    return product_to_dto(service.create_product(product_from_dto(product)))


@router.get("/{product_id}", response_model=ProductDto)
async def get_product(
    product_id: UUID,
    service: ProductService = Depends(get_product_service),
) -> ProductDto:
    """Get a product by ID."""
    return product_to_dto(await service.get_product(str(product_id)))


@router.put(
    "/{product_id}",
    response_model=ProductDto,
    dependencies=[Depends(require_role("ADMIN"))],
)
async def replace_product(
    product_id: UUID,
    product: ProductDto,
    service: ProductService = Depends(get_product_service),
) -> ProductDto:
    """Replace a product. The path identifier wins over any identifier in the body."""
    updated = await service.replace_product(str(product_id), product_from_dto(product))
    return product_to_dto(updated)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_role("ADMIN"))],
)
async def delete_product(
    product_id: UUID,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Delete a product."""
    await service.delete_product(str(product_id))
    logger.info("Product with ID: {} has been deleted.", product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
