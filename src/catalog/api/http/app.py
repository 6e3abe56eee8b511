"""FastAPI application factory for the catalog service."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.middleware.auth import BearerAuthMiddleware
from src.catalog.api.http.middleware.request_log import (
    RequestLogMiddleware,
    SecurityHeadersMiddleware,
)
from src.catalog.api.http.routers.health import router as health_router
from src.catalog.api.http.routers.service.category import router as category_router
from src.catalog.api.http.routers.service.product import router as product_router
from src.catalog.api.utils.app_startup import configure_logging
from src.catalog.core.errors import CatalogError
from src.catalog.core.services import DbSessionService, RedisService, TokenVerifier
from src.catalog.runtime.context import get_config


def build_dependencies() -> ApplicationDependencies:
    """Assemble the application-wide services from the active configuration."""
    database_service = DbSessionService()
    database_service.create_all()
    return ApplicationDependencies(
        database_service=database_service,
        redis_service=RedisService(),
        token_verifier=TokenVerifier.from_config(),
    )


async def handle_catalog_error(request: Request, exc: CatalogError) -> JSONResponse:
    logger.bind(status_code=exc.status_code, code=exc.code).warning(
        "request.rejected: {}", exc.message
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response(getattr(request.state, "request_id", None)).model_dump(),
        headers={"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None,
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={"detail": errors, "request_id": getattr(request.state, "request_id", None)},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.app_dependencies is None:
        app.state.app_dependencies = build_dependencies()
    logger.info("Catalog service starting in {} environment", get_config().app.environment)
    try:
        yield
    finally:
        logger.info("Catalog service shutting down")
        await app.state.app_dependencies.redis_service.close()


def create_app(dependencies: ApplicationDependencies | None = None) -> FastAPI:
    """Build the catalog application.

    Args:
        dependencies: Pre-built services (tests pass their own); when omitted
            they are created from the active configuration at startup.
    """
    config = get_config()
    in_production = config.app.environment == "production"
    if in_production and "*" in config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app = FastAPI(
        title="Product Catalog",
        lifespan=lifespan,
        docs_url=None if in_production else "/docs",
        redoc_url=None if in_production else "/redoc",
    )
    app.state.app_dependencies = dependencies

    # Outermost last: request logging, CORS, security headers, then auth
    app.add_middleware(BearerAuthMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )
    app.add_middleware(RequestLogMiddleware)

    app.add_exception_handler(CatalogError, handle_catalog_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    app.include_router(health_router)
    app.include_router(product_router, prefix="/products", tags=["products"])
    app.include_router(category_router, prefix="/categories", tags=["categories"])
    return app


configure_logging()

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,  # RequestLogMiddleware logs requests
    )
