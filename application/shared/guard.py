"""Conversion of repository calls into ``Outcome`` values."""

from typing import Any, Awaitable, Optional, TypeVar

import structlog

from domain.shared.outcome import FailureKind, Outcome
from domain.user.core.exceptions.user_errors import UserDomainError

T = TypeVar("T")

logger = structlog.get_logger(__name__)


async def guarded(
    operation: str,
    call: Awaitable[T],
    username: Optional[str] = None,
    failure_value: Any = None,
) -> "Outcome[T]":
    """Await a repository call and capture domain errors.

    Store failures are logged at error level; not-found, validation and
    conflict failures at warning level. Errors that are not
    ``UserDomainError`` propagate unchanged.

    Args:
        operation: Operation name for the log event
        call: Awaitable repository call
        username: Username the call is about, for log context
        failure_value: Sentinel exposed as ``Outcome.value`` on failure
    """
    try:
        value = await call
    except UserDomainError as e:
        log = logger.error if e.kind is FailureKind.STORE else logger.warning
        log(
            "user_operation_failed",
            operation=operation,
            username=username,
            failure_kind=e.kind.value,
            error=str(e),
            cause=repr(e.__cause__) if e.__cause__ else None,
        )
        return Outcome.fail(e.kind, str(e), value=failure_value)

    return Outcome.success(value)


async def guarded_lookup(
    operation: str,
    call: Awaitable[Optional[T]],
    username: str,
) -> "Outcome[T]":
    """Like ``guarded`` but a ``None`` result becomes a not-found failure."""
    outcome = await guarded(operation, call, username=username)
    if outcome.ok and outcome.value is None:
        logger.info("user_not_found", operation=operation, username=username)
        return Outcome.fail(FailureKind.NOT_FOUND, f"User not found: {username}")
    return outcome
