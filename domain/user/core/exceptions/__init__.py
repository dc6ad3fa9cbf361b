"""Domain exceptions for users."""

from .user_errors import (
    InvalidSearchPatternError,
    InvalidUserFieldError,
    UserAlreadyExistsError,
    UserDomainError,
    UserNotFoundError,
    UserStoreError,
    UserValidationError,
)

__all__ = [
    "UserDomainError",
    "UserNotFoundError",
    "UserAlreadyExistsError",
    "InvalidUserFieldError",
    "UserValidationError",
    "InvalidSearchPatternError",
    "UserStoreError",
]
