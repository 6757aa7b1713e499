"""
Application error types.

Every error raised on purpose by the application derives from AppError, which
carries a machine-readable code and the HTTP status the API answers with.
"""
from typing import Any, List, Optional

from fastapi import status


class AppError(Exception):
    """
    Base error for the application.

    Args:
        message: Human-readable error message
        code: Machine-readable error code
        status_code: HTTP status code for API responses
    """

    def __init__(self, message: str, code: str, status_code: int):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class NotFoundError(AppError):
    """
    Record is absent or owned by another user.
    Both cases share one message so record existence never leaks.
    """

    def __init__(self, entity_type: str, entity_id: str):
        super().__init__(
            f"{entity_type} with id {entity_id} not found",
            "NOT_FOUND",
            status.HTTP_404_NOT_FOUND,
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class ValidationError(AppError):
    """Malformed request input."""

    def __init__(self, message: str = "Validation failed", details: Optional[List[Any]] = None):
        super().__init__(message, "VALIDATION_ERROR", status.HTTP_400_BAD_REQUEST)
        self.details = details or []


class AuthenticationError(AppError):
    """Missing, malformed, invalid or expired bearer token."""

    def __init__(self, message: str, code: str = "UNAUTHORIZED"):
        super().__init__(message, code, status.HTTP_401_UNAUTHORIZED)


class AuthorizationError(AppError):
    """Authenticated caller lacks a required role."""

    def __init__(self, message: str, code: str = "FORBIDDEN"):
        super().__init__(message, code, status.HTTP_403_FORBIDDEN)


class RateLimitError(AppError):
    """Too many write requests in the current window."""

    def __init__(self, retry_after: int, message: str = "Too many requests. Please retry later."):
        super().__init__(message, "RATE_LIMITED", status.HTTP_429_TOO_MANY_REQUESTS)
        self.retry_after = retry_after


class StoreError(AppError):
    """The document store failed (connectivity, permissions, ...)."""

    def __init__(self, message: str):
        super().__init__(message, "STORE_ERROR", status.HTTP_500_INTERNAL_SERVER_ERROR)
