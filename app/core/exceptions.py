from typing import Optional, Sequence

from fastapi import status


class ServiceError(Exception):
    """Base exception for service layer errors."""

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(ServiceError):
    """Missing or malformed input, out-of-range number, inverted date range."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message, status.HTTP_400_BAD_REQUEST)
        self.field = field


class InvalidIdError(ServiceError):
    """An identifier is not a well-formed UUID; raised before any store lookup."""

    def __init__(self, message: str = "Invalid ID") -> None:
        super().__init__(message, status.HTTP_400_BAD_REQUEST)


class DuplicateError(ServiceError):
    def __init__(self, message: str, fields: Sequence[str] = ()) -> None:
        super().__init__(message, status.HTTP_400_BAD_REQUEST)
        self.fields = tuple(fields)


class NotFoundError(ServiceError):
    """Record not found. A bad reference supplied by the caller uses 400 instead of 404."""

    def __init__(self, message: str, status_code: int = status.HTTP_404_NOT_FOUND) -> None:
        super().__init__(message, status_code)


class ConflictError(ServiceError):
    """The operation would break a default/current invariant or a state rule."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status.HTTP_400_BAD_REQUEST)


class StoreError(ServiceError):
    def __init__(self, message: str, error: Optional[str] = None) -> None:
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.error = error
