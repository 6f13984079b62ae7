"""
Error taxonomy for the API.

Every error carries the HTTP status it maps to, a human readable message and
an optional underlying cause. Handlers in ``learnhub.main`` turn them into the
standard ``{"success": false, ...}`` envelope.
"""
from typing import Optional

from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error = error


class ValidationError(AppError):
    """A required field or parameter is missing or empty."""
    status_code = status.HTTP_400_BAD_REQUEST


class FormatError(AppError):
    """An identifier is not in the store's identifier format."""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    """Duplicate record, e.g. a second enrollment for the same pair."""
    status_code = status.HTTP_400_BAD_REQUEST


class StoreError(AppError):
    """Connectivity or unexpected backend failure."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
