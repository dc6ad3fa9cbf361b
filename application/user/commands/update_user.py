"""Update user command."""

from dataclasses import dataclass
from typing import Any, Sequence, Union

from application.shared.guard import guarded
from domain.shared.outcome import Outcome
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import FieldUpdateLike, IUserRepository
from domain.user.core.value_objects.user_field import UserField


@dataclass
class UpdateUserCommand:
    """Command to update user fields.

    Field names are restricted to ``UserField``; anything else fails with
    ``validation`` before the store is touched.

    Examples:
        >>> command = UpdateUserCommand(repository)
        >>> outcome = await command.field("ada", "email", "ada@lovelace.org")
        >>> outcome = await command.fields("ada", [
        ...     {"field": "email", "value": "a@x.com"},
        ...     {"field": "email", "value": "b@x.com"},
        ... ])
        >>> outcome.value.email
        'b@x.com'
    """

    repository: IUserRepository

    async def field(self, username: str, field: Union[str, UserField], value: Any) -> Outcome[User]:
        """Set a single field.

        Returns:
            Outcome with the updated, joined user; ``not_found`` if the
            user does not exist
        """
        return await guarded(
            "update_field",
            self.repository.update_field(username, field, value),
            username=username,
        )

    async def fields(self, username: str, updates: Sequence[FieldUpdateLike]) -> Outcome[User]:
        """Apply ordered updates in one write; later writes to a field win."""
        return await guarded(
            "update_fields",
            self.repository.update_fields(username, updates),
            username=username,
        )
