"""Event value objects."""

from .event_id import EventId

__all__ = ["EventId"]
