"""Find users query."""

from dataclasses import dataclass
from typing import List

from application.shared.guard import guarded
from domain.shared.outcome import Outcome
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class FindUsersQuery:
    """Username search.

    The search string is a case-insensitive regular expression by default:
    ``"a.c"`` matches ``"abc"`` and ``"axc"``. Pass ``literal=True`` when
    the input comes from end users and should match only itself.
    """

    repository: IUserRepository

    async def matching(self, search_string: str, literal: bool = False) -> Outcome[List[User]]:
        """Find up to the configured limit of users, each joined."""
        return await guarded(
            "find_matching_users",
            self.repository.find_matching_users(search_string, literal=literal),
        )
