"""MongoDB User Repository implementation."""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Union

import structlog
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import DuplicateKeyError, OperationFailure, PyMongoError

from domain.event.core.entities.event import Event
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import (
    InvalidSearchPatternError,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserStoreError,
)
from domain.user.core.ports.user_repository import FieldUpdateLike, IUserRepository
from domain.user.core.value_objects.user_field import FieldUpdate, UserField
from domain.user.core.value_objects.user_profile_data import UserProfileData
from infrastructure.config import EVENTS_COLLECTION, USERS_COLLECTION, get_search_limit
from infrastructure.persistence.mongodb.base import MongoBaseRepository
from infrastructure.user.document_mapper import (
    event_from_document,
    order_events,
    unique_object_ids,
    updates_to_set,
    user_from_document,
    user_to_document,
)
from infrastructure.user.username_search import build_search_pattern, is_regex_failure

logger = structlog.get_logger(__name__)

# Joined events never carry their reverse reference.
_STRIP_PARTICIPANTS = {"participants": 0}


class MongoUserRepository(MongoBaseRepository[User], IUserRepository):
    """MongoDB implementation of the User repository.

    Storage design:
    - Collection ``users``: unique index on ``username``
    - Collection ``events``: index on ``creator``
    - ``participatingIn`` holds ObjectId references into ``events``;
      joins run as one batched ``$in`` query with ``participants``
      projected out

    Updates go through ``find_one_and_update`` so the lookup and the write
    are one atomic operation. Joins and ``get_created_events`` are separate
    reads and may observe concurrent writes in between.

    Examples:
        >>> client = AsyncIOMotorClient("mongodb://localhost:27017")
        >>> repo = MongoUserRepository(client)
        >>> user = await repo.create_basic("Ada", "Lovelace", "ada", "ada@example.com")
        >>> found = await repo.get_user("ada")
    """

    def __init__(
        self,
        client: Optional[AsyncIOMotorClient] = None,  # type: ignore[type-arg]
        database_name: Optional[str] = None,
        search_limit: Optional[int] = None,
    ) -> None:
        """Initialize repository.

        Args:
            client: Motor client (created from MONGODB_URI when omitted)
            database_name: Database name (MONGODB_DATABASE when omitted)
            search_limit: Max users returned by find_matching_users
                (USER_SEARCH_LIMIT when omitted)

        Raises:
            ValueError: If search_limit is not positive
        """
        limit = search_limit if search_limit is not None else get_search_limit()
        if limit <= 0:
            raise ValueError(f"search_limit must be positive, got {limit}")

        super().__init__(client, database_name)
        self._events = self._db[EVENTS_COLLECTION]
        self._search_limit = limit
        self._indexes_created = False

    @property
    def collection_name(self) -> str:
        """MongoDB collection name."""
        return USERS_COLLECTION

    def to_document(self, entity: User) -> Dict[str, Any]:
        return user_to_document(entity)

    def from_document(self, doc: Dict[str, Any]) -> User:
        return user_from_document(doc)

    async def ensure_indexes(self) -> None:
        """Create the indexes the repository relies on (once per instance).

        - unique ``users.username`` (duplicate detection)
        - ``events.creator`` (created-events lookup)
        """
        if self._indexes_created:
            return

        with self._store_errors("ensure_indexes"):
            await self._collection.create_index(
                "username", unique=True, name="idx_username_unique"
            )
            await self._events.create_index("creator", name="idx_creator")

        self._indexes_created = True

    # ============================================================
    # Create
    # ============================================================

    async def create_full(self, user_data: Mapping[str, Any]) -> User:
        data = UserProfileData.parse(user_data)
        return await self._insert(User.create(data))

    async def create_basic(self, firstname: str, lastname: str, username: str, email: str) -> User:
        data = UserProfileData.parse(
            {
                "firstname": firstname,
                "lastname": lastname,
                "username": username,
                "email": email,
            }
        )
        return await self._insert(User.create(data))

    async def _insert(self, user: User) -> User:
        with self._store_errors("create", username=user.username):
            await self._insert_one(self.to_document(user))

        logger.info("user_created", username=user.username, user_id=str(user.user_id))
        return user

    # ============================================================
    # Update
    # ============================================================

    async def update_field(self, username: str, field: Union[str, UserField], value: Any) -> User:
        return await self.update_fields(username, [FieldUpdate.of(field, value)])

    async def update_fields(self, username: str, updates: Sequence[FieldUpdateLike]) -> User:
        """Apply all updates in one ``find_one_and_update``.

        The join that follows is a separate read. If it fails after the
        write committed, the updated user is returned unjoined
        (``participating_events`` is ``None``).
        """
        # Validate everything before touching the store.
        parsed = [FieldUpdate.coerce(update) for update in updates]
        if not parsed:
            user = await self.get_user(username)
            if user is None:
                raise UserNotFoundError(username)
            return user

        set_doc = updates_to_set(parsed)
        target_username = set_doc.get(UserField.USERNAME.value, username)

        with self._store_errors("update", username=target_username):
            doc = await self._find_one_and_update({"username": username}, {"$set": set_doc})

        if doc is None:
            raise UserNotFoundError(username)

        logger.info("user_updated", username=username, fields=list(set_doc))
        # Write committed; a failed join yields the unjoined user.
        with self._store_errors("update", username=target_username):
            try:
                return await self._join(doc)
            except PyMongoError as e:
                logger.warning("user_update_join_failed", username=target_username, error=str(e))
                return self.from_document(doc)

    # ============================================================
    # Delete
    # ============================================================

    async def delete_user(self, username: str) -> bool:
        with self._store_errors("delete", username=username):
            deleted = await self._delete_one({"username": username})

        logger.info("user_deleted", username=username, deleted_count=deleted)
        return True

    # ============================================================
    # Read
    # ============================================================

    async def get_user(self, username: str) -> Optional[User]:
        with self._store_errors("get_user", username=username):
            doc = await self._find_one({"username": username})
            if doc is None:
                return None
            return await self._join(doc)

    async def get_raw_user(self, username: str) -> Optional[User]:
        with self._store_errors("get_raw_user", username=username):
            doc = await self._find_one({"username": username})

            if doc is None:
                return None
            return self.from_document(doc)

    async def get_participating_events(self, username: str) -> Optional[List[Event]]:
        with self._store_errors("get_participating_events", username=username):
            doc = await self._find_one({"username": username}, projection={"participatingIn": 1})
            if doc is None:
                return None
            return await self._load_events(doc.get("participatingIn", []))

    async def get_created_events(self, username: str) -> Optional[List[Event]]:
        with self._store_errors("get_created_events", username=username):
            doc = await self._find_one({"username": username}, projection={"_id": 1})
            if doc is None:
                return None
            event_docs = await self._find_many({"creator": doc["_id"]}, collection=self._events)
            return [event_from_document(event_doc) for event_doc in event_docs]

    async def find_matching_users(self, search_string: str, literal: bool = False) -> List[User]:
        """Case-insensitive ``$regex`` search on username.

        The pattern goes to the server unchanged (PCRE syntax); a pattern
        the server rejects raises ``InvalidSearchPatternError``.
        """
        pattern = build_search_pattern(search_string, literal)

        with self._store_errors("find_matching_users"):
            try:
                docs = await self._find_many(
                    {"username": {"$regex": pattern, "$options": "i"}},
                    limit=self._search_limit,
                )
            except OperationFailure as e:
                if is_regex_failure(e):
                    raise InvalidSearchPatternError(search_string, str(e)) from e
                raise
            events = await self._load_events(
                ref for doc in docs for ref in doc.get("participatingIn", [])
            )

            by_id = {str(event.event_id): event for event in events}
            users: List[User] = []
            for doc in docs:
                refs = doc.get("participatingIn", [])
                joined = [by_id[str(ref)] for ref in refs if str(ref) in by_id]
                users.append(user_from_document(doc, joined))
            return users

    # ============================================================
    # Helpers
    # ============================================================

    async def _join(self, doc: Dict[str, Any]) -> User:
        events = await self._load_events(doc.get("participatingIn", []))
        return user_from_document(doc, events)

    async def _load_events(self, refs: Any) -> List[Event]:
        """Fetch referenced events in reference order, participants stripped."""
        refs = list(refs)
        ids = unique_object_ids(refs)
        if not ids:
            return []

        event_docs = await self._find_many(
            {"_id": {"$in": ids}},
            projection=_STRIP_PARTICIPANTS,
            collection=self._events,
        )
        return order_events(refs, event_docs)

    @contextmanager
    def _store_errors(self, operation: str, username: Optional[str] = None) -> Iterator[None]:
        """Translate driver and document mapping errors into domain errors."""
        try:
            yield
        except DuplicateKeyError as e:
            raise UserAlreadyExistsError(username or "") from e
        except PyMongoError as e:
            raise UserStoreError(operation, str(e)) from e
        except ValueError as e:
            raise UserStoreError(operation, f"malformed document: {e}") from e

