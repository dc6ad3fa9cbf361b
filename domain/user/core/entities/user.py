"""User entity - aggregate root."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from domain.event.core.entities.event import Event
from domain.event.core.value_objects.event_id import EventId
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.user_profile_data import UserProfileData


@dataclass
class User:
    """User aggregate root.

    Identified internally by ``user_id`` and externally by ``username``,
    which is unique and matched case-sensitively.

    ``participating_in`` always holds the ordered event references.
    ``participating_events`` is only set when the references were joined
    against the events collection; joined events never carry their
    ``participants`` list.

    Invariants:
    - username is unique across users (enforced by the store)
    - participating_in references events without owning them

    Examples:
        >>> data = UserProfileData.parse({
        ...     "firstname": "Ada", "lastname": "Lovelace",
        ...     "username": "ada", "email": "ada@example.com",
        ... })
        >>> user = User.create(data)
        >>> user.username, user.is_populated
        ('ada', False)
    """

    user_id: UserId
    firstname: str
    lastname: str
    username: str
    email: str
    participating_in: List[EventId] = field(default_factory=list)
    participating_events: Optional[List[Event]] = None

    @staticmethod
    def create(data: UserProfileData) -> "User":
        """Factory method to create a new, not yet persisted user.

        Args:
            data: Validated user data

        Returns:
            New User with a freshly generated id
        """
        return User(
            user_id=UserId.generate(),
            firstname=data.firstname,
            lastname=data.lastname,
            username=data.username,
            email=data.email,
            participating_in=data.event_ids(),
        )

    @property
    def is_populated(self) -> bool:
        """True when participating events were joined."""
        return self.participating_events is not None

    def to_plain(self) -> Dict[str, Any]:
        """Detached dict snapshot of the user.

        Joined events are rendered as dicts, unjoined references as hex
        strings. Mutating the result never affects this entity.
        """
        if self.participating_events is not None:
            participating: List[Any] = [e.to_plain() for e in self.participating_events]
        else:
            participating = [str(ref) for ref in self.participating_in]

        return {
            "_id": str(self.user_id),
            "firstname": self.firstname,
            "lastname": self.lastname,
            "username": self.username,
            "email": self.email,
            "participatingIn": participating,
        }

    def __eq__(self, other: object) -> bool:
        """Equality based on user_id (aggregate identity)."""
        if not isinstance(other, User):
            return False
        return self.user_id == other.user_id

    def __hash__(self) -> int:
        """Hash based on user_id (aggregate identity)."""
        return hash(self.user_id)
