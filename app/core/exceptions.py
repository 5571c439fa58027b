# app/core/exceptions.py
from typing import Any, Dict, Optional


class AppError(Exception):
    """Base error for the business backend. Translated to an HTTP response in main.py."""

    status_code = 500

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class ValidationError(AppError):
    """Malformed or missing required input."""

    status_code = 400


class NotFoundError(AppError):
    """Referenced id is absent."""

    status_code = 404


class StorageError(AppError):
    """Reading or writing the data file failed."""

    status_code = 500
