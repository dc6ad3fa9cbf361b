"""Get user query."""

from dataclasses import dataclass
from typing import Any, Dict

from application.shared.guard import guarded_lookup
from domain.shared.outcome import Outcome
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class GetUserQuery:
    """Query to get a user by username.

    Read-only operation that retrieves a user from the repository. A missing
    user is reported as a ``not_found`` outcome; a broken store as ``store``.

    Examples:
        >>> query = GetUserQuery(repository)
        >>> outcome = await query.by_username("ada")
        >>> if outcome.ok:
        ...     print(outcome.value.participating_events)
    """

    repository: IUserRepository

    async def by_username(self, username: str) -> Outcome[User]:
        """Get user with participating events joined."""
        return await guarded_lookup("get_user", self.repository.get_user(username), username)

    async def raw(self, username: str) -> Outcome[User]:
        """Get user without joining event references."""
        return await guarded_lookup("get_raw_user", self.repository.get_raw_user(username), username)

    async def as_plain_object(self, username: str) -> Outcome[Dict[str, Any]]:
        """Get a detached dict snapshot of the joined user."""
        return await guarded_lookup(
            "get_user_as_plain_object",
            self.repository.get_user_as_plain_object(username),
            username,
        )

    async def exists(self, username: str) -> bool:
        """Check if user exists.

        Note:
            Performs a full ``get_user``. If the record is needed too, use
            ``by_username`` and check ``outcome.ok`` instead.
        """
        outcome = await self.by_username(username)
        return outcome.value is not None
