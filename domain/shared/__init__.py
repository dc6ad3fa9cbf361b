"""Shared domain primitives."""

from .outcome import FailureKind, Outcome

__all__ = ["FailureKind", "Outcome"]
