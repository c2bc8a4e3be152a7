"""Application-level exceptions and FastAPI exception handlers."""


import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)

class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

class NotFoundError(AppException):
    def __init__(self, entity: str, entity_id: str | None = None):
        msg = f"{entity} not found" if not entity_id else f"{entity} '{entity_id}' not found"
        super().__init__(msg, status_code=404, code="NOT_FOUND")

class ForbiddenError(AppException):
    def __init__(self, message: str = "Access denied"):
        super().__init__(message, status_code=403, code="FORBIDDEN")

class UnauthorizedError(AppException):
    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, status_code=401, code="UNAUTHORIZED")

class ConflictError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=409, code="CONFLICT")

class ValidationError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=422, code="VALIDATION_ERROR")

class InvalidSortFieldError(AppException):
    """Raised when ``sortBy`` names a column outside the resource allow-list."""

    def __init__(self, field: str, valid_fields: list[str]):
        self.field = field
        self.valid_fields = valid_fields
        super().__init__(
            f"Invalid sort field '{field}'. Valid fields are: {', '.join(valid_fields)}",
            status_code=400,
            code="INVALID_SORT_FIELD",
        )

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.code, exc.message),
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
        return JSONResponse(
            status_code=409,
            content=_error_body("CONFLICT", "Unique constraint violation: record already exists"),
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=_error_body("NOT_FOUND", "Resource not found"),
        )

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content=_error_body("INTERNAL_ERROR", "An unexpected error occurred"),
        )
