"""Category API router."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from src.catalog.api.http.deps import get_category_service, require_authenticated
from src.catalog.api.http.dto import CategoryDto
from src.catalog.api.http.mapping import category_from_dto, category_to_dto
from src.catalog.core.services import CategoryService

router = APIRouter()


@router.post(
    "",
    response_model=CategoryDto,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_authenticated)],
)
def create_category(
    category: CategoryDto,
    service: CategoryService = Depends(get_category_service),
) -> CategoryDto:
    """Create a new category."""
    return category_to_dto(service.create_category(category_from_dto(category)))


@router.get("", response_model=list[CategoryDto])
def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> list[CategoryDto]:
    return [category_to_dto(c) for c in service.list_categories()]


@router.get("/{category_id}", response_model=CategoryDto)
def get_category(
    category_id: UUID,
    service: CategoryService = Depends(get_category_service),
) -> CategoryDto:
    return category_to_dto(service.get_category(str(category_id)))


@router.put(
    "/{category_id}",
    response_model=CategoryDto,
    status_code=status.HTTP_202_ACCEPTED,
    dependencies=[Depends(require_authenticated)],
)
async def update_category(
    category_id: UUID,
    category: CategoryDto,
    service: CategoryService = Depends(get_category_service),
) -> CategoryDto:
    """Update a category in place."""
    updated = await service.update_category(str(category_id), category_from_dto(category))
    return category_to_dto(updated)


@router.delete(
    "/{category_id}",
    response_class=PlainTextResponse,
    status_code=status.HTTP_202_ACCEPTED,
    dependencies=[Depends(require_authenticated)],
)
async def delete_category(
    category_id: UUID,
    service: CategoryService = Depends(get_category_service),
) -> str:
    """Delete a category; its products stay but lose the association."""
    await service.delete_category(str(category_id))
    return f"Category with ID: {category_id} has been deleted."
