"""Bearer token authentication middleware."""

from fastapi import Request
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.errors import UnauthorizedError


class BearerAuthMiddleware(BaseHTTPMiddleware):
    """Resolve the caller from the ``Authorization`` header before routing.

    Requests without a bearer token continue anonymously. A bearer token
    that fails verification ends the request with 401 right here.
    """

    async def dispatch(self, request: Request, call_next):
        request.state.principal = None

        app_deps: ApplicationDependencies | None = getattr(
            request.app.state, "app_dependencies", None
        )
        if app_deps is None:
            return await call_next(request)

        try:
            principal = app_deps.token_verifier.authenticate(
                request.headers.get("Authorization")
            )
        except UnauthorizedError as exc:
            request_id = getattr(request.state, "request_id", None)
            logger.bind(path=request.url.path).info("auth.rejected")
            return JSONResponse(
                status_code=exc.status_code,
                content=exc.to_response(request_id).model_dump(),
                headers={"WWW-Authenticate": "Bearer"},
            )

        if principal is not None:
            request.state.principal = principal
            logger.debug("Authenticated principal {}", principal.subject)

        return await call_next(request)
