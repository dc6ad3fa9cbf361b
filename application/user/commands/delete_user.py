"""Delete user command."""

from dataclasses import dataclass

from application.shared.guard import guarded
from domain.shared.outcome import Outcome
from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class DeleteUserCommand:
    """Command to delete a user.

    Deleting a user that does not exist succeeds. Events the user created
    or joined are left untouched.
    """

    repository: IUserRepository

    async def execute(self, username: str) -> Outcome[bool]:
        """Delete by username.

        Returns:
            Outcome with value True on success, False with ``store`` on
            store failure
        """
        return await guarded(
            "delete_user",
            self.repository.delete_user(username),
            username=username,
            failure_value=False,
        )
