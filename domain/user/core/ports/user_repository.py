"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from domain.event.core.entities.event import Event
from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_field import FieldUpdate, UserField

FieldUpdateLike = Union[FieldUpdate, Mapping[str, Any]]


class IUserRepository(ABC):
    """Repository interface for the User aggregate.

    Lookups return ``None`` for absent users. Mutations raise typed
    ``UserDomainError`` subclasses; store failures surface as
    ``UserStoreError``. Each method is an independent request against the
    store: there are no transactions across methods.

    Examples:
        >>> # Implementation example (not actual usage)
        >>> class MongoUserRepository(IUserRepository):
        ...     async def get_raw_user(self, username: str) -> Optional[User]:
        ...         # Query MongoDB
        ...         pass
    """

    @abstractmethod
    async def create_full(self, user_data: Mapping[str, Any]) -> User:
        """Create a user from a mapping shaped like the user schema.

        Args:
            user_data: firstname, lastname, username, email and optionally
                participatingIn

        Returns:
            The persisted user

        Raises:
            UserValidationError: If the data violates the schema
            UserAlreadyExistsError: If the username is taken
            UserStoreError: If the store fails
        """
        pass

    @abstractmethod
    async def create_basic(self, firstname: str, lastname: str, username: str, email: str) -> User:
        """Create a user from the mandatory fields only.

        Same contract as ``create_full``.
        """
        pass

    @abstractmethod
    async def update_field(self, username: str, field: Union[str, UserField], value: Any) -> User:
        """Set one field on a user and persist it.

        The field is checked against ``UserField`` before the store is
        touched.

        Returns:
            The updated user with participating events joined

        Raises:
            InvalidUserFieldError: If the field is not updatable
            UserValidationError: If the value is invalid
            UserNotFoundError: If no user has this username
            UserAlreadyExistsError: If a username change collides
            UserStoreError: If the store fails
        """
        pass

    @abstractmethod
    async def update_fields(self, username: str, updates: Sequence[FieldUpdateLike]) -> User:
        """Apply ordered field updates with a single write.

        Later updates of the same field win. If any update is invalid or the
        write fails, none of them is applied.

        Raises:
            Same as ``update_field``
        """
        pass

    @abstractmethod
    async def delete_user(self, username: str) -> bool:
        """Delete the user with this username.

        Returns:
            True, also when no such user existed

        Raises:
            UserStoreError: If the store fails
        """
        pass

    @abstractmethod
    async def get_user(self, username: str) -> Optional[User]:
        """Find a user with participating events joined (participants stripped)."""
        pass

    @abstractmethod
    async def get_raw_user(self, username: str) -> Optional[User]:
        """Find a user without joining any reference."""
        pass

    @abstractmethod
    async def get_participating_events(self, username: str) -> Optional[List[Event]]:
        """Events the user participates in, in reference order.

        Returns:
            Joined events (participants stripped), or None if the user is
            missing
        """
        pass

    @abstractmethod
    async def get_created_events(self, username: str) -> Optional[List[Event]]:
        """Events whose creator is this user.

        Two round trips: user lookup, then events query. A user deleted
        between them yields an empty list.

        Returns:
            Created events, or None if the user is missing
        """
        pass

    @abstractmethod
    async def find_matching_users(self, search_string: str, literal: bool = False) -> List[User]:
        """Case-insensitive username search.

        ``search_string`` is used as a regular expression unless
        ``literal`` is set, so ``"a.c"`` also matches ``"abc"``.

        Returns:
            At most the configured search limit of users, joined

        Raises:
            InvalidSearchPatternError: If the backend rejects the pattern
            UserStoreError: If the store fails
        """
        pass

    async def get_user_as_plain_object(self, username: str) -> Optional[Dict[str, Any]]:
        """Like ``get_user`` but returns a detached dict snapshot."""
        user = await self.get_user(username)
        if user is None:
            return None
        return user.to_plain()

    async def user_exists(self, username: str) -> bool:
        """Check if a user exists.

        Note:
            Calls ``get_user`` internally. If you also need the record,
            call ``get_user`` and test for None instead.
        """
        return await self.get_user(username) is not None
