from .base import (
    AppError,
    AuthenticationError,
    ConflictError,
    InternalError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from .http import register_error_handler

__all__ = [
    "AppError",
    "AuthenticationError",
    "ConflictError",
    "InternalError",
    "NotFoundError",
    "StorageError",
    "ValidationError",
    "register_error_handler",
]
