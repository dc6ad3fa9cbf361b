"""Operation outcome value object.

Callers that only care about "absent/failed vs success" read ``value``
(``None`` or ``False`` on failure); callers that need to react differently
to a missing record and to a broken store read ``failure``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class FailureKind(str, Enum):
    """Why an operation did not produce a value."""

    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    STORE = "store"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of a user operation.

    Examples:
        >>> Outcome.success(3).ok
        True
        >>> missing = Outcome.fail(FailureKind.NOT_FOUND, "User not found: bob")
        >>> missing.value is None, missing.failure.value
        (True, 'not_found')
    """

    value: Optional[T] = None
    failure: Optional[FailureKind] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True when the operation succeeded."""
        return self.failure is None

    @property
    def is_not_found(self) -> bool:
        return self.failure is FailureKind.NOT_FOUND

    @staticmethod
    def success(value: T) -> "Outcome[T]":
        return Outcome(value=value)

    @staticmethod
    def fail(
        kind: FailureKind,
        detail: Optional[str] = None,
        value: Optional[T] = None,
    ) -> "Outcome[T]":
        """Build a failed outcome.

        Args:
            kind: Failure category
            detail: Human readable reason
            value: Sentinel to expose as ``value`` (``None`` unless the
                operation's contract says otherwise, e.g. ``False`` for delete)
        """
        return Outcome(value=value, failure=kind, detail=detail)
