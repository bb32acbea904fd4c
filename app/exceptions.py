# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors should tell HOW to fix, not just WHAT failed.
#
# Not-found responses never say whether a resource exists for another user:
# "absent" and "owned by someone else" produce the same 404.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class LifeLogException(Exception):
    """
    Base exception for the LifeLog API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "LIFELOG_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}
        self.headers = headers

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Auth Exceptions
# =============================================================================

class AuthenticationFailedError(LifeLogException):
    """Raised when login credentials don't match a user."""

    def __init__(self):
        super().__init__(
            message="Invalid email or password",
            code="AUTHENTICATION_FAILED",
            status_code=401,
            suggestion="Check your email and password and try again",
        )


class InvalidTokenError(LifeLogException):
    """Raised when a bearer token is missing, malformed, expired or forged."""

    def __init__(self, reason: str = "Invalid or expired token"):
        super().__init__(
            message=reason,
            code="INVALID_TOKEN",
            status_code=401,
            suggestion="Log in again to obtain a new token",
            headers={"WWW-Authenticate": "Bearer"},
        )


class EmailAlreadyRegisteredError(LifeLogException):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            message="Email is already registered",
            code="EMAIL_ALREADY_REGISTERED",
            status_code=400,
            suggestion="Log in with this email or register with a different one",
            details={"email": email},
        )


# =============================================================================
# Resource Exceptions
# =============================================================================

class ResourceNotFoundError(LifeLogException):
    """Raised when a resource doesn't exist or belongs to another user."""

    def __init__(self, resource: str, resource_id: int):
        super().__init__(
            message=f"{resource} not found",
            code="RESOURCE_NOT_FOUND",
            status_code=404,
            suggestion=f"Check that the {resource.lower()} id is correct",
            details={"id": resource_id},
        )


# =============================================================================
# Upload Exceptions
# =============================================================================

class EmptyFileError(LifeLogException):
    """Raised when no file, or an empty file, was uploaded."""

    def __init__(self):
        super().__init__(
            message="No file was uploaded",
            code="EMPTY_FILE",
            status_code=400,
            suggestion="Send a non-empty image in the 'file' form field",
        )


class InvalidFileTypeError(LifeLogException):
    """Raised when uploaded file type is not allowed."""

    def __init__(self, filename: str, allowed: list[str]):
        super().__init__(
            message=f"Invalid file type: {filename}",
            code="INVALID_FILE_TYPE",
            status_code=400,
            suggestion=f"Only these file types are supported: {', '.join(allowed)}",
            details={"filename": filename, "allowed_types": allowed},
        )


class FileTooLargeError(LifeLogException):
    """Raised when uploaded file exceeds size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"File too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            code="FILE_TOO_LARGE",
            status_code=400,
            suggestion=f"Upload a file smaller than {max_mb}MB",
            details={"size_mb": round(size_mb, 2), "max_mb": max_mb},
        )


class InvalidFileNameError(LifeLogException):
    """Raised when a file name is empty or tries to escape the upload directory."""

    def __init__(self, filename: str | None):
        super().__init__(
            message="Invalid file name",
            code="INVALID_FILE_NAME",
            status_code=400,
            suggestion="Pass the bare file name returned in the upload URL",
            details={"filename": filename} if filename else None,
        )


class StoredFileNotFoundError(LifeLogException):
    """Raised when deleting an uploaded file that doesn't exist."""

    def __init__(self, filename: str):
        super().__init__(
            message="File not found",
            code="FILE_NOT_FOUND",
            status_code=404,
            suggestion="Check the file name; it may already have been deleted",
            details={"filename": filename},
        )


class StorageError(LifeLogException):
    """Raised when writing or removing a file on disk fails."""

    def __init__(self, operation: str):
        super().__init__(
            message=f"Failed to {operation} image",
            code="STORAGE_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def lifelog_exception_handler(
    request: Request,
    exc: LifeLogException
) -> JSONResponse:
    """
    Convert LifeLogException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=exc.headers,
    )


def _format_validation_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    errors = []
    for error in exc.errors():
        # loc starts with "body"/"query"/"path"
        location = [str(part) for part in error.get("loc", ())[1:]]
        errors.append({
            "field": ".".join(location) or "body",
            "message": error.get("msg", "Invalid value"),
        })
    return errors


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Reports every failing field at once as a 400, before any handler runs.
    """
    errors = _format_validation_errors(exc)
    logger.info(f"Validation failed for {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=400,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }
    )


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    The exception is logged with its traceback; the client only gets a
    generic message.
    """
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )
