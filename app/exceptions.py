# =============================================================================
# app/exceptions.py - Custom Exceptions and Error Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error leaves the process as JSON: {"message": ..., "stack"?: [...]}
# plus "code", "suggestion" and "details" where the error knows them.
# Stack traces are only attached when NODE_ENV is "development".
# =============================================================================

import logging
import traceback
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class CateringAPIException(Exception):
    """
    Base exception for the storefront API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "CATERING_API_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "message": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Generic HTTP Errors
# =============================================================================

class BadRequestError(CateringAPIException):
    """Raised when the request is well-formed but semantically invalid."""

    def __init__(self, message: str, suggestion: str | None = None, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="BAD_REQUEST",
            status_code=400,
            suggestion=suggestion,
            details=details,
        )


class NotFoundError(CateringAPIException):
    """Raised when a document ID doesn't exist."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            message=f"{resource.capitalize()} not found: {resource_id}",
            code=f"{resource.upper()}_NOT_FOUND",
            status_code=404,
            suggestion=f"Check that the {resource} id is correct",
            details={"id": resource_id},
        )


class ConflictError(CateringAPIException):
    """Raised when a write would violate a uniqueness or integrity rule."""

    def __init__(self, message: str, code: str = "CONFLICT", details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code=code,
            status_code=409,
            details=details,
        )


class UnauthorizedError(CateringAPIException):
    """Raised when credentials are missing or wrong."""

    def __init__(self, message: str = "Not authorized"):
        super().__init__(
            message=message,
            code="UNAUTHORIZED",
            status_code=401,
            suggestion="Log in again via POST /api/users/login",
        )


class ForbiddenError(CateringAPIException):
    """Raised when an authenticated user lacks the required role."""

    def __init__(self, message: str = "Admin access required"):
        super().__init__(
            message=message,
            code="FORBIDDEN",
            status_code=403,
        )


class PayloadTooLargeError(CateringAPIException):
    """Raised when a request body exceeds the configured limit."""

    def __init__(self, max_mb: int):
        super().__init__(
            message=f"Request body too large (max: {max_mb}MB)",
            code="PAYLOAD_TOO_LARGE",
            status_code=413,
            suggestion=f"Send a body smaller than {max_mb}MB",
            details={"max_mb": max_mb},
        )


# =============================================================================
# Order Exceptions
# =============================================================================

class InvalidStatusTransitionError(CateringAPIException):
    """Raised when an order status change is not allowed."""

    def __init__(self, current: str, requested: str, allowed: list[str]):
        super().__init__(
            message=f"Cannot change order status from '{current}' to '{requested}'",
            code="INVALID_STATUS_TRANSITION",
            status_code=409,
            suggestion=(
                f"Allowed next statuses: {', '.join(allowed)}" if allowed
                else "The order is in a final state"
            ),
            details={"current": current, "requested": requested, "allowed": allowed},
        )


# =============================================================================
# Media / Import Exceptions
# =============================================================================

class MediaNotConfiguredError(CateringAPIException):
    """Raised when an upload is attempted without Cloudinary credentials."""

    def __init__(self):
        super().__init__(
            message="Image hosting is not configured",
            code="MEDIA_NOT_CONFIGURED",
            status_code=503,
            suggestion="Set CLOUDINARY_CLOUD_NAME, CLOUDINARY_API_KEY and CLOUDINARY_API_SECRET",
        )


class MediaUploadError(CateringAPIException):
    """Raised when the image host rejects an upload."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Failed to upload image: {error}",
            code="MEDIA_UPLOAD_FAILED",
            status_code=502,
            suggestion="Try again later or contact support if the issue persists",
            details={"error": error},
        )


class MediaDeleteError(CateringAPIException):
    """Raised when the image host fails to delete an asset."""

    def __init__(self, public_id: str, error: str):
        super().__init__(
            message=f"Failed to delete image: {error}",
            code="MEDIA_DELETE_FAILED",
            status_code=502,
            details={"public_id": public_id, "error": error},
        )


class InvalidFileTypeError(CateringAPIException):
    """Raised when uploaded file type is not allowed."""

    def __init__(self, filename: str, allowed: list[str]):
        super().__init__(
            message=f"Invalid file type: {filename}",
            code="INVALID_FILE_TYPE",
            status_code=400,
            suggestion=f"Only these file types are supported: {', '.join(allowed)}",
            details={"filename": filename, "allowed_types": allowed},
        )


class ImportFileError(CateringAPIException):
    """Raised when an import file cannot be read or lacks required columns."""

    def __init__(self, filename: str, error: str):
        super().__init__(
            message=f"Failed to read import file: {error}",
            code="IMPORT_FILE_ERROR",
            status_code=400,
            suggestion="Upload a UTF-8 CSV with at least the columns name, price, category",
            details={"filename": filename, "error": error},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

def _with_stack(request: Request, content: dict[str, Any], exc: BaseException) -> dict[str, Any]:
    """Attach the formatted traceback while running in development."""
    settings = getattr(request.app.state, "settings", None)
    if settings is not None and settings.is_development:
        content["stack"] = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return content


async def catering_exception_handler(
    request: Request,
    exc: CateringAPIException
) -> JSONResponse:
    """Convert CateringAPIException to JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=_with_stack(request, exc.to_dict(), exc),
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle Starlette HTTP errors, including unmatched routes.

    A 404 raised by the router becomes "Not Found - <path>".
    """
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = f"Not Found - {request.url.path}"
    else:
        message = str(exc.detail)

    return JSONResponse(
        status_code=exc.status_code,
        content=_with_stack(request, {"message": message}, exc),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    Converts validation errors to user-friendly messages.
    """
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content=_with_stack(
            request,
            {"message": "Validation error", "code": "VALIDATION_ERROR", "errors": errors},
            exc,
        ),
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")

    settings = getattr(request.app.state, "settings", None)
    if settings is not None and settings.is_development and str(exc):
        message = str(exc)
    else:
        message = "Internal Server Error"

    return JSONResponse(
        status_code=500,
        content=_with_stack(request, {"message": message}, exc),
    )
