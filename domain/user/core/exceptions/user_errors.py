"""User domain exceptions.

Every error carries the ``FailureKind`` it maps to, so the application
layer can collapse it into an ``Outcome`` without a lookup table.
"""

from typing import Optional

from domain.shared.outcome import FailureKind


class UserDomainError(Exception):
    """Base exception for User domain errors."""

    kind: FailureKind = FailureKind.STORE


class UserNotFoundError(UserDomainError):
    """User was not found in the repository."""

    kind = FailureKind.NOT_FOUND

    def __init__(self, username: str):
        """Initialize with the username that was looked up.

        Args:
            username: Username that was not found
        """
        self.username = username
        super().__init__(f"User not found: {username}")


class UserAlreadyExistsError(UserDomainError):
    """A user with the given username already exists."""

    kind = FailureKind.CONFLICT

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"User already exists: {username}")


class InvalidUserFieldError(UserDomainError):
    """Field name is not one of the updatable user fields."""

    kind = FailureKind.VALIDATION

    def __init__(self, field: str):
        """Initialize with the rejected field name.

        Args:
            field: Field name supplied by the caller
        """
        self.field = field
        super().__init__(f"Unknown or non-updatable user field: {field!r}")


class UserValidationError(UserDomainError):
    """User data does not satisfy the user schema."""

    kind = FailureKind.VALIDATION

    def __init__(self, reason: str, field: Optional[str] = None):
        """Initialize with reason and, when known, the offending field.

        Args:
            reason: Why validation failed
            field: Field that failed validation
        """
        self.reason = reason
        self.field = field
        prefix = f"Invalid value for '{field}'" if field else "Invalid user data"
        super().__init__(f"{prefix}: {reason}")


class InvalidSearchPatternError(UserDomainError):
    """Username search pattern is not a valid regular expression."""

    kind = FailureKind.VALIDATION

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid search pattern {pattern!r}: {reason}")


class UserStoreError(UserDomainError):
    """The document store failed (connectivity, timeout, server error)."""

    kind = FailureKind.STORE

    def __init__(self, operation: str, reason: str):
        """Initialize with the failed operation and the driver message.

        Args:
            operation: Repository operation that failed
            reason: Underlying error message
        """
        self.operation = operation
        self.reason = reason
        super().__init__(f"Store failure during {operation}: {reason}")
