"""MongoDB persistence helpers."""

from .base import MongoBaseRepository

__all__ = ["MongoBaseRepository"]
