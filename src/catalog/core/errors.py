"""Error taxonomy for the catalog service."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str
    code: str
    request_id: str | None = None
    details: dict[str, Any] = {}


class CatalogError(Exception):
    """Base exception for catalog errors that map onto an HTTP status."""

    status_code = 500

    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self, request_id: str | None = None) -> ErrorResponse:
        return ErrorResponse(
            detail=self.message,
            code=self.code,
            request_id=request_id,
            details=self.details,
        )


class NotFoundError(CatalogError):
    """A product or category is absent."""

    status_code = 404

    def __init__(self, message: str = "Not found", details: dict[str, Any] | None = None):
        super().__init__("NOT_FOUND", message, details)


class UnauthorizedError(CatalogError):
    """Missing, malformed or expired bearer token."""

    status_code = 401

    def __init__(
        self, message: str = "Authentication required", details: dict[str, Any] | None = None
    ):
        super().__init__("UNAUTHORIZED", message, details)


class ForbiddenError(CatalogError):
    """Valid token without the required role."""

    status_code = 403

    def __init__(self, message: str = "Forbidden", details: dict[str, Any] | None = None):
        super().__init__("FORBIDDEN", message, details)
