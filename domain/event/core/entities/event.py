"""Event entity as seen from the user side."""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from domain.event.core.value_objects.event_id import EventId
from domain.user.core.value_objects.user_id import UserId


@dataclass
class Event:
    """Event record joined onto a user or listed as created by a user.

    Only the relationship fields are modelled; every other attribute of the
    stored document is kept verbatim in ``attributes``.

    ``participants`` is ``None`` when the event was loaded through a user
    join, which strips the reverse reference to avoid cycles.

    Examples:
        >>> creator = UserId.generate()
        >>> event = Event(event_id=EventId.generate(), creator=creator)
        >>> event.participants is None
        True
    """

    event_id: EventId
    creator: Optional[UserId]
    participants: Optional[List[UserId]] = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    @property
    def participants_stripped(self) -> bool:
        return self.participants is None

    def to_plain(self) -> Dict[str, Any]:
        """Detached dict snapshot with ids rendered as hex strings."""
        plain: Dict[str, Any] = {"_id": str(self.event_id)}
        plain.update(deepcopy(self.attributes))
        plain["creator"] = str(self.creator) if self.creator else None
        if self.participants is not None:
            plain["participants"] = [str(p) for p in self.participants]
        return plain

    def __eq__(self, other: object) -> bool:
        """Equality based on event_id."""
        if not isinstance(other, Event):
            return False
        return self.event_id == other.event_id

    def __hash__(self) -> int:
        return hash(self.event_id)
