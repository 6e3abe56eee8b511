"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.errors import ForbiddenError, UnauthorizedError
from src.catalog.core.models import Principal
from src.catalog.core.services import CategoryService, ProductCache, ProductService
from src.catalog.entities.service.category import CategoryRepository
from src.catalog.entities.service.product import ProductRepository
from src.catalog.runtime.context import get_config


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_session(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> Iterator[Session]:
    """Open a database session for the duration of the request."""
    with app_deps.database_service.session_scope() as session:
        yield session


def get_product_cache(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> ProductCache:
    return ProductCache(app_deps.redis_service.get_client(), get_config().cache)


def get_product_service(
    session: Session = Depends(get_db_session),
    cache: ProductCache = Depends(get_product_cache),
) -> ProductService:
    return ProductService(ProductRepository(session), CategoryRepository(session), cache)


def get_category_service(
    session: Session = Depends(get_db_session),
    cache: ProductCache = Depends(get_product_cache),
) -> CategoryService:
    return CategoryService(CategoryRepository(session), ProductRepository(session), cache)


def get_principal(request: Request) -> Principal | None:
    """Principal resolved by the bearer auth middleware, if any."""
    return getattr(request.state, "principal", None)


async def require_authenticated(request: Request) -> Principal:
    """Dependency rejecting anonymous requests."""
    principal = get_principal(request)
    if principal is None:
        raise UnauthorizedError("Authentication required")
    return principal


def require_role(required_role: str):
    """Create a dependency that requires a specific role for the authenticated user."""

    async def dep(request: Request) -> Principal:
        principal = await require_authenticated(request)
        authority = get_app_dependencies(request).token_verifier.authority_for(required_role)
        if not principal.has_authority(authority):
            raise ForbiddenError(f"Missing required role: {required_role}")
        return principal

    return dep
