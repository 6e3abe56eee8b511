"""Service and application fixtures for testing."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.catalog.api.http.app import create_app
from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.services import (
    CategoryService,
    DbSessionService,
    ProductCache,
    ProductService,
    RedisService,
    TokenVerifier,
)
from src.catalog.entities import CategoryRepository, ProductRepository
from src.catalog.runtime.config.config_data import ConfigData


@pytest.fixture
def product_service(
    product_repository: ProductRepository,
    category_repository: CategoryRepository,
    product_cache: ProductCache,
) -> ProductService:
    return ProductService(product_repository, category_repository, product_cache)


@pytest.fixture
def category_service(
    category_repository: CategoryRepository,
    product_repository: ProductRepository,
    product_cache: ProductCache,
) -> CategoryService:
    return CategoryService(category_repository, product_repository, product_cache)


@pytest.fixture
def app_dependencies(
    test_config: ConfigData,
    db_service: DbSessionService,
    token_verifier: TokenVerifier,
) -> ApplicationDependencies:
    return ApplicationDependencies(
        database_service=db_service,
        redis_service=RedisService(test_config),
        token_verifier=token_verifier,
    )


@pytest.fixture
def client(app_dependencies: ApplicationDependencies) -> Generator[TestClient]:
    """Test client over an app wired to the in-memory database."""
    with TestClient(create_app(app_dependencies)) as test_client:
        yield test_client
