"""Mapping between user/event documents and domain entities.

Shared by the MongoDB and in-memory repositories so both store and read
exactly the same document shape.
"""

from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence

from bson import ObjectId

from domain.event.core.entities.event import Event
from domain.event.core.value_objects.event_id import EventId
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UserStoreError
from domain.user.core.value_objects.user_field import FieldUpdate, UserField
from domain.user.core.value_objects.user_id import UserId

USER_FIELDS = ("firstname", "lastname", "username", "email")

# Keys modelled explicitly on Event; everything else goes to attributes.
_EVENT_KEYS = ("_id", "creator", "participants")


def user_to_document(user: User) -> Dict[str, Any]:
    """Convert a User entity to a MongoDB document."""
    return {
        "_id": user.user_id.to_object_id(),
        "firstname": user.firstname,
        "lastname": user.lastname,
        "username": user.username,
        "email": user.email,
        "participatingIn": [ref.to_object_id() for ref in user.participating_in],
    }


def user_from_document(doc: Dict[str, Any], events: Optional[List[Event]] = None) -> User:
    """Convert a MongoDB document to a User entity.

    Args:
        doc: User document
        events: Joined participating events, if the references were joined

    Raises:
        ValueError: If the document is missing required fields
    """
    missing = [key for key in ("_id",) + USER_FIELDS if key not in doc]
    if missing:
        raise ValueError(f"User document missing fields: {', '.join(missing)}")

    return User(
        user_id=UserId.from_object_id(doc["_id"]),
        firstname=doc["firstname"],
        lastname=doc["lastname"],
        username=doc["username"],
        email=doc["email"],
        participating_in=[EventId.parse(ref) for ref in doc.get("participatingIn", [])],
        participating_events=events,
    )


def event_from_document(doc: Dict[str, Any]) -> Event:
    """Convert an event document to an Event.

    A document without a ``participants`` key (projected out by a join)
    yields ``participants=None``.
    """
    creator = doc.get("creator")
    participants = doc.get("participants") if "participants" in doc else None
    return Event(
        event_id=EventId.parse(doc["_id"]),
        creator=UserId(str(creator)) if creator is not None else None,
        participants=(
            [UserId(str(p)) for p in participants] if participants is not None else None
        ),
        attributes={k: v for k, v in doc.items() if k not in _EVENT_KEYS},
    )


def order_events(refs: Iterable[Any], event_docs: Iterable[Dict[str, Any]]) -> List[Event]:
    """Arrange joined event documents in reference order.

    References to events that no longer exist are dropped; repeated
    references yield repeated entries.
    """
    by_id = {str(doc["_id"]): doc for doc in event_docs}
    ordered: List[Event] = []
    for ref in refs:
        doc = by_id.get(str(ref))
        if doc is not None:
            ordered.append(event_from_document(doc))
    return ordered


def unique_object_ids(refs: Iterable[Any]) -> List[ObjectId]:
    """Distinct ObjectIds of a reference list, first-seen order."""
    seen: Dict[str, ObjectId] = {}
    for ref in refs:
        key = str(ref)
        if key not in seen:
            seen[key] = EventId.parse(ref).to_object_id()
    return list(seen.values())


def updates_to_set(updates: Sequence[FieldUpdate]) -> Dict[str, Any]:
    """Fold ordered field updates into a single ``$set`` document.

    Later updates of the same field overwrite earlier ones.
    """
    set_doc: Dict[str, Any] = {}
    for update in updates:
        if update.field is UserField.PARTICIPATING_IN:
            set_doc[update.field.value] = [ObjectId(ref) for ref in update.value]
        else:
            set_doc[update.field.value] = update.value
    return set_doc


@contextmanager
def mapping_errors(operation: str) -> Iterator[None]:
    """Report a stored document that cannot be mapped as a store failure."""
    try:
        yield
    except ValueError as e:
        raise UserStoreError(operation, f"malformed document: {e}") from e
