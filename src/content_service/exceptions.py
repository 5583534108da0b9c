from __future__ import annotations


class ContentServiceError(Exception):
    """Base error for content-service. Subclasses carry the HTTP status they map to."""

    status_code: int = 500

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message or self.__class__.__doc__ or self.__class__.__name__


class InvalidRequestError(ContentServiceError):
    """Malformed request."""

    status_code = 400


class MissingCredentialsError(InvalidRequestError):
    """Missing or malformed Authorization header."""


class UnauthorizedError(ContentServiceError):
    """Token rejected by the authentication service."""

    status_code = 401


class PayloadTooLargeError(ContentServiceError):
    """Request body exceeds allowed size."""

    status_code = 413


class AuthServiceError(ContentServiceError):
    """Authentication service unavailable."""


class StorageError(ContentServiceError):
    """Storage collaborator failure."""


class RecordNotFoundError(StorageError):
    """File record not found."""


__all__ = [
    "ContentServiceError",
    "InvalidRequestError",
    "MissingCredentialsError",
    "UnauthorizedError",
    "PayloadTooLargeError",
    "AuthServiceError",
    "StorageError",
    "RecordNotFoundError",
]
