"""In-memory User Repository for testing."""

from copy import deepcopy
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from bson import ObjectId

from domain.event.core.entities.event import Event
from domain.event.core.value_objects.event_id import EventId
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import (
    UserAlreadyExistsError,
    UserNotFoundError,
)
from domain.user.core.ports.user_repository import FieldUpdateLike, IUserRepository
from domain.user.core.value_objects.user_field import FieldUpdate, UserField
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.user_profile_data import UserProfileData
from infrastructure.config import DEFAULT_SEARCH_LIMIT
from infrastructure.user.document_mapper import (
    event_from_document,
    mapping_errors,
    order_events,
    updates_to_set,
    user_from_document,
    user_to_document,
)
from infrastructure.user.username_search import (
    build_search_pattern,
    compile_search_pattern,
    username_matches,
)


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository for testing.

    Keeps user and event documents in dicts with the same shape the
    MongoDB repository stores, and enforces the unique username index.
    Documents are copied on the way in and out, like a real store.
    Search patterns are compiled with Python's ``re``, so PCRE-only syntax
    that MongoDB accepts is rejected here as an invalid pattern.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> user = await repo.create_basic("Ada", "Lovelace", "ada", "ada@example.com")
        >>> event_id = repo.add_event(creator=user.user_id, name="Picnic")
        >>> await repo.update_field("ada", "participatingIn", [event_id])
    """

    def __init__(self, search_limit: int = DEFAULT_SEARCH_LIMIT) -> None:
        """Initialize empty in-memory storage.

        Raises:
            ValueError: If search_limit is not positive
        """
        if search_limit <= 0:
            raise ValueError(f"search_limit must be positive, got {search_limit}")
        self._users: Dict[ObjectId, Dict[str, Any]] = {}
        self._events: Dict[ObjectId, Dict[str, Any]] = {}
        self._search_limit = search_limit

    # ============================================================
    # Test helpers
    # ============================================================

    def add_event(
        self,
        creator: Optional[UserId] = None,
        participants: Optional[List[UserId]] = None,
        **attributes: Any,
    ) -> EventId:
        """Store an event document and return its id.

        Args:
            creator: Creating user
            participants: Participating users
            **attributes: Any other event attributes (name, date, ...)
        """
        event_id = EventId.generate()
        doc: Dict[str, Any] = {"_id": event_id.to_object_id()}
        doc.update(attributes)
        doc["creator"] = creator.to_object_id() if creator else None
        doc["participants"] = [p.to_object_id() for p in participants or []]
        self._events[doc["_id"]] = doc
        return event_id

    def remove_event(self, event_id: EventId) -> None:
        self._events.pop(event_id.to_object_id(), None)

    def clear(self) -> None:
        """Clear all users and events from memory."""
        self._users.clear()
        self._events.clear()

    def count(self) -> int:
        """Get total number of users in memory."""
        return len(self._users)

    # ============================================================
    # Repository operations
    # ============================================================

    async def create_full(self, user_data: Mapping[str, Any]) -> User:
        data = UserProfileData.parse(user_data)
        return self._insert(User.create(data))

    async def create_basic(self, firstname: str, lastname: str, username: str, email: str) -> User:
        data = UserProfileData.parse(
            {
                "firstname": firstname,
                "lastname": lastname,
                "username": username,
                "email": email,
            }
        )
        return self._insert(User.create(data))

    async def update_field(self, username: str, field: Union[str, UserField], value: Any) -> User:
        return await self.update_fields(username, [FieldUpdate.of(field, value)])

    async def update_fields(self, username: str, updates: Sequence[FieldUpdateLike]) -> User:
        parsed = [FieldUpdate.coerce(update) for update in updates]
        doc = self._find_doc(username)
        if doc is None:
            raise UserNotFoundError(username)

        set_doc = updates_to_set(parsed)
        new_username = set_doc.get(UserField.USERNAME.value, username)
        if new_username != username and self._find_doc(new_username) is not None:
            raise UserAlreadyExistsError(new_username)

        doc.update(deepcopy(set_doc))
        with mapping_errors("update"):
            return self._join(doc)

    async def delete_user(self, username: str) -> bool:
        doc = self._find_doc(username)
        if doc is not None:
            del self._users[doc["_id"]]
        return True

    async def get_user(self, username: str) -> Optional[User]:
        doc = self._find_doc(username)
        if doc is None:
            return None
        with mapping_errors("get_user"):
            return self._join(doc)

    async def get_raw_user(self, username: str) -> Optional[User]:
        doc = self._find_doc(username)
        if doc is None:
            return None
        with mapping_errors("get_raw_user"):
            return user_from_document(deepcopy(doc))

    async def get_participating_events(self, username: str) -> Optional[List[Event]]:
        doc = self._find_doc(username)
        if doc is None:
            return None
        with mapping_errors("get_participating_events"):
            return self._load_events(doc.get("participatingIn", []))

    async def get_created_events(self, username: str) -> Optional[List[Event]]:
        doc = self._find_doc(username)
        if doc is None:
            return None
        with mapping_errors("get_created_events"):
            return [
                event_from_document(deepcopy(event))
                for event in self._events.values()
                if event.get("creator") == doc["_id"]
            ]

    async def find_matching_users(self, search_string: str, literal: bool = False) -> List[User]:
        pattern = compile_search_pattern(build_search_pattern(search_string, literal))
        matches = [
            doc for doc in self._users.values() if username_matches(pattern, doc["username"])
        ]
        with mapping_errors("find_matching_users"):
            return [self._join(doc) for doc in matches[: self._search_limit]]

    # ============================================================
    # Helpers
    # ============================================================

    def _insert(self, user: User) -> User:
        if self._find_doc(user.username) is not None:
            raise UserAlreadyExistsError(user.username)
        doc = user_to_document(user)
        self._users[doc["_id"]] = doc
        return user

    def _find_doc(self, username: str) -> Optional[Dict[str, Any]]:
        for doc in self._users.values():
            if doc["username"] == username:
                return doc
        return None

    def _join(self, doc: Dict[str, Any]) -> User:
        snapshot = deepcopy(doc)
        return user_from_document(snapshot, self._load_events(snapshot.get("participatingIn", [])))

    def _load_events(self, refs: List[Any]) -> List[Event]:
        stripped = [
            {k: deepcopy(v) for k, v in event.items() if k != "participants"}
            for event in self._events.values()
        ]
        return order_events(refs, stripped)
