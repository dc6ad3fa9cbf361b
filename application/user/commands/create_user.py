"""Create user command."""

from dataclasses import dataclass
from typing import Any, Mapping

from application.shared.guard import guarded
from domain.shared.outcome import Outcome
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class CreateUserCommand:
    """Command to create a user.

    Examples:
        >>> command = CreateUserCommand(repository)
        >>> outcome = await command.basic("Ada", "Lovelace", "ada", "ada@example.com")
        >>> outcome.ok
        True
    """

    repository: IUserRepository

    async def full(self, user_data: Mapping[str, Any]) -> Outcome[User]:
        """Create a user from a mapping shaped like the user schema.

        Returns:
            Outcome with the persisted user; ``validation`` on schema
            violations, ``conflict`` on a taken username, ``store`` on
            store failure
        """
        username = user_data.get("username") if isinstance(user_data, Mapping) else None
        return await guarded(
            "create_full", self.repository.create_full(user_data), username=username
        )

    async def basic(self, firstname: str, lastname: str, username: str, email: str) -> Outcome[User]:
        """Create a user from the mandatory fields only."""
        return await guarded(
            "create_basic",
            self.repository.create_basic(firstname, lastname, username, email),
            username=username,
        )
