"""Ports for the user domain."""

from .user_repository import FieldUpdateLike, IUserRepository

__all__ = ["IUserRepository", "FieldUpdateLike"]
