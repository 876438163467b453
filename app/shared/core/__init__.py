"""
Core components for the PlantsByJulie API.
Provides the application exception hierarchy.
"""

from .exceptions import (
    PlantCatalogException,
    AuthenticationError,
    AuthorizationError,
    ValidationError,
    NotFoundError,
    DuplicateResourceError,
    ExternalServiceError,
    RepositoryError,
    FileStorageError,
    FileTooLargeError,
    InvalidFileTypeError,
    PlantTypeNotFoundError,
    InstanceNotFoundError,
    PhotoNotFoundError,
    exception_to_dict,
    is_client_error,
)

__all__ = [
    "PlantCatalogException",
    "AuthenticationError",
    "AuthorizationError",
    "ValidationError",
    "NotFoundError",
    "DuplicateResourceError",
    "ExternalServiceError",
    "RepositoryError",
    "FileStorageError",
    "FileTooLargeError",
    "InvalidFileTypeError",
    "PlantTypeNotFoundError",
    "InstanceNotFoundError",
    "PhotoNotFoundError",
    "exception_to_dict",
    "is_client_error",
]
