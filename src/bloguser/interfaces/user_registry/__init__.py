"""User registry interface and related errors."""

from .errors import (
    UserAlreadyExistsError,
    UserIdMismatchError,
    UserNotFoundError,
    UserRegistryError,
)
from .user_registry import UserRegistry

__all__ = [
    "UserRegistry",
    "UserRegistryError",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserIdMismatchError",
]
