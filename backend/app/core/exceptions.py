"""
Custom exceptions and error handlers for consistent error responses.

Every error leaves the API as ``{"error": "<message>"}``.
"""

import logging
from functools import wraps
from fastapi import Request, status
from starlette.exceptions import HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

logger = logging.getLogger(__name__)


class AppException(Exception):
    """Base application exception."""
    
    def __init__(self, message: str, error_code: str, status_code: int = 500):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        super().__init__(message)


class InvalidIdError(AppException):
    """Raised when a path id is not an integer."""
    
    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="ERR_INVALID_ID",
            status_code=status.HTTP_400_BAD_REQUEST
        )


class MissingFieldsError(AppException):
    """Raised when required body fields are absent."""
    
    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="ERR_MISSING_FIELDS",
            status_code=status.HTTP_400_BAD_REQUEST
        )


class InvalidEnumError(AppException):
    """Raised when a body field is outside its closed value set."""
    
    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="ERR_INVALID_ENUM",
            status_code=status.HTTP_400_BAD_REQUEST
        )


class ResourceNotFoundError(AppException):
    """Raised when requested resource (or a referenced one) is not found."""
    
    def __init__(self, resource: str):
        super().__init__(
            message=f"{resource} not found",
            error_code="ERR_NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND
        )


class HasDependentsError(AppException):
    """Raised when a delete is blocked by rows that still reference the target."""
    
    def __init__(self, resource: str, dependents: str):
        super().__init__(
            message=f"Cannot delete {resource} with associated {dependents}",
            error_code="ERR_HAS_DEPENDENTS",
            status_code=status.HTTP_400_BAD_REQUEST
        )


class StoreFailureError(AppException):
    """Raised when the persistence layer fails during an operation."""
    
    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="ERR_STORE_FAILURE",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


def handle_store_errors(message: str):
    """
    Decorator for endpoint coroutines.
    
    Application errors pass through untouched; anything else is logged and
    re-raised as ``StoreFailureError(message)``. Nothing is retried.
    
    Usage:
        @router.get("/brand")
        @handle_store_errors("Error fetching brands")
        async def list_brands(db: AsyncSession = Depends(get_db)):
            ...
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except AppException:
                raise
            except Exception as exc:
                logger.exception("%s: %s", message, exc)
                raise StoreFailureError(message) from exc
        return wrapper
    return decorator


# Global Exception Handlers

def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handler for custom application exceptions."""
    if exc.status_code >= 500:
        logger.error("%s %s failed with %s", request.method, request.url.path, exc.error_code)
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handler for HTTPException (unknown routes, wrong methods)."""
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are client errors; the API never answers 422."""
    logger.info("Rejected body on %s: %s", request.url.path, exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler for unhandled exceptions."""
    logger.error(
        "Unhandled exception on %s: %s: %s",
        request.url.path, type(exc).__name__, exc,
        exc_info=exc,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
