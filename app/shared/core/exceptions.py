# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines the special error types the collection app uses to say
# what went wrong in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Exception hierarchy for the catalog API. Each class fixes its HTTP status and error
# code; constructor keywords become the `details` of the JSON error envelope.
# 🔗 Dependencies:
# FastAPI HTTPException, typing, HTTP status constants
# 🔄 Connected Modules / Calls From:
# Domain services, handlers, repositories, storage, app.api.middleware.error_handling

from typing import Any, Dict, Optional
from fastapi import HTTPException, status


def _with_context(details: Optional[Dict[str, Any]], **context: Any) -> Dict[str, Any]:
    """Copy `details` and add every context value that is set."""
    merged = dict(details or {})
    merged.update({key: value for key, value in context.items() if value not in (None, "")})
    return merged


class PlantCatalogException(Exception):
    """
    Base exception class for the plant collection application.

    Subclasses set `status_code` and `error_code` as class attributes.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: Optional[str] = None

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code or type(self).status_code
        self.details = details or {}
        self.error_code = error_code or type(self).error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }


# =============================================================================
# AUTHENTICATION & AUTHORIZATION EXCEPTIONS
# =============================================================================

class AuthenticationError(PlantCatalogException):
    """No session, or credentials rejected by Supabase Auth."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "AUTHENTICATION_ERROR"

    def __init__(self, message: str = "Authentication failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)


class AuthorizationError(PlantCatalogException):
    """A signed-in user without the administrative capability."""

    status_code = status.HTTP_403_FORBIDDEN
    error_code = "AUTHORIZATION_ERROR"

    def __init__(
        self,
        message: str = "Access denied",
        required_permission: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            details=_with_context(details, required_permission=required_permission),
        )


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class ValidationError(PlantCatalogException):
    """Input that passed schema parsing but breaks a catalog rule."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    error_code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            details=_with_context(
                details,
                field=field,
                value=str(value) if value is not None else None,
            ),
        )


class NotFoundError(PlantCatalogException):
    """
    Exception raised when requested resource is not found.
    Used for missing entities and for ids outside a photo working set.
    """

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            details=_with_context(details, resource_type=resource_type, resource_id=resource_id),
        )


class DuplicateResourceError(PlantCatalogException):
    """Slug collisions."""

    status_code = status.HTTP_409_CONFLICT
    error_code = "DUPLICATE_RESOURCE"

    def __init__(
        self,
        message: str = "Resource already exists",
        resource_type: Optional[str] = None,
        field: Optional[str] = None,
        value: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            details=_with_context(details, resource_type=resource_type, field=field, value=value),
        )


# =============================================================================
# EXTERNAL SERVICE EXCEPTIONS
# =============================================================================

class ExternalServiceError(PlantCatalogException):
    """
    Exception raised when the managed backend rejects or fails a call.
    The provider message is kept verbatim so the client can show it.
    """

    status_code = status.HTTP_502_BAD_GATEWAY
    error_code = "EXTERNAL_SERVICE_ERROR"

    def __init__(
        self,
        message: str = "External service error",
        service: Optional[str] = None,
        service_response: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            details=_with_context(details, service=service, service_response=service_response),
        )


class RepositoryError(ExternalServiceError):
    """A Supabase table or RPC call failed."""

    error_code = "REPOSITORY_ERROR"

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: Optional[str] = None,
        entity: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            details=_with_context(details, operation=operation, entity=entity),
        )


class FileStorageError(ExternalServiceError):
    """The object store rejected an upload."""

    error_code = "FILE_STORAGE_ERROR"

    def __init__(
        self,
        message: str = "File storage error",
        operation: Optional[str] = None,
        filename: Optional[str] = None,
        storage_path: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            details=_with_context(
                details, operation=operation, filename=filename, storage_path=storage_path
            ),
        )


# =============================================================================
# UPLOAD EXCEPTIONS
# =============================================================================

class FileTooLargeError(PlantCatalogException):
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    error_code = "FILE_TOO_LARGE"

    def __init__(
        self,
        message: str = "Uploaded file is too large",
        max_size_mb: Optional[float] = None,
        actual_size_mb: Optional[float] = None,
        filename: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            details=_with_context(
                details,
                max_size_mb=max_size_mb,
                actual_size_mb=actual_size_mb,
                filename=filename,
            ),
        )


class InvalidFileTypeError(PlantCatalogException):
    """An upload that is empty or not a decodable image."""

    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    error_code = "INVALID_FILE_TYPE"

    def __init__(
        self,
        message: str = "Unsupported file type",
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            details=_with_context(details, filename=filename, content_type=content_type),
        )


# =============================================================================
# CATALOG SPECIFIC EXCEPTIONS
# =============================================================================

class PlantTypeNotFoundError(NotFoundError):
    error_code = "PLANT_TYPE_NOT_FOUND"

    def __init__(self, slug: str):
        super().__init__(
            message=f'Plant type with slug "{slug}" was not found',
            resource_type="plant_type",
            resource_id=slug
        )


class InstanceNotFoundError(NotFoundError):
    error_code = "INSTANCE_NOT_FOUND"

    def __init__(self, instance_id: str):
        super().__init__(
            message=f"Plant instance {instance_id} was not found",
            resource_type="plant_instance",
            resource_id=instance_id
        )


class PhotoNotFoundError(NotFoundError):
    """The photo id is not part of the instance's working set."""

    error_code = "PHOTO_NOT_FOUND"

    def __init__(self, photo_id: str, instance_id: Optional[str] = None):
        super().__init__(
            message=f"Photo {photo_id} is not part of this instance",
            resource_type="plant_photo",
            resource_id=photo_id,
            details=_with_context(None, instance_id=instance_id)
        )


# =============================================================================
# EXCEPTION UTILITIES
# =============================================================================

def exception_to_dict(exception: Exception) -> Dict[str, Any]:
    """
    Convert any exception to dictionary format.

    Args:
        exception: Exception to convert

    Returns:
        Dict: Exception data as dictionary
    """
    if isinstance(exception, PlantCatalogException):
        return exception.to_dict()

    return {
        "error": {
            "code": exception.__class__.__name__.upper(),
            "message": str(exception),
            "details": {},
            "status_code": 500
        }
    }


def is_client_error(exception: Exception) -> bool:
    """
    Check if exception represents a client error (4xx).
    """
    if isinstance(exception, (PlantCatalogException, HTTPException)):
        return 400 <= exception.status_code < 500

    return False
