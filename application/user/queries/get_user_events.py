"""Get user events query."""

from dataclasses import dataclass
from typing import List

from application.shared.guard import guarded_lookup
from domain.event.core.entities.event import Event
from domain.shared.outcome import Outcome
from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class GetUserEventsQuery:
    """Query the events related to a user.

    Examples:
        >>> query = GetUserEventsQuery(repository)
        >>> joined = await query.participating("ada")
        >>> created = await query.created("ada")
    """

    repository: IUserRepository

    async def participating(self, username: str) -> Outcome[List[Event]]:
        """Events the user participates in (participants stripped)."""
        return await guarded_lookup(
            "get_participating_events",
            self.repository.get_participating_events(username),
            username,
        )

    async def created(self, username: str) -> Outcome[List[Event]]:
        """Events created by the user.

        An existing user without created events yields an empty list, not
        a failure.
        """
        return await guarded_lookup(
            "get_created_events",
            self.repository.get_created_events(username),
            username,
        )
