"""Validated user creation input."""

from __future__ import annotations

import re
from typing import Any, Iterable, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from domain.event.core.value_objects.event_id import EventId
from domain.user.core.exceptions.user_errors import UserValidationError

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")


def clean_text(value: Any) -> str:
    """Require a non-blank string; the value is kept as given."""
    if not isinstance(value, str):
        raise ValueError("must be a string")
    if not value.strip():
        raise ValueError("cannot be empty or whitespace")
    return value


def clean_email(value: Any) -> str:
    email = clean_text(value)
    if not _EMAIL_PATTERN.match(email):
        raise ValueError(f"not a valid email address: {email}")
    return email


def clean_event_refs(value: Any) -> List[str]:
    """Normalize event references to a list of ObjectId hex strings.

    Accepts ObjectId, EventId or hex strings, in any iterable except a bare
    string. Order and duplicates are preserved.
    """
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise ValueError("must be a list of event ids")
    return [EventId.parse(ref).value for ref in value]


class UserProfileData(BaseModel):
    """User data accepted by the create operations.

    Mirrors the stored user schema. Unknown keys are rejected rather than
    silently stored.

    Examples:
        >>> data = UserProfileData.parse({
        ...     "firstname": "Ada",
        ...     "lastname": "Lovelace",
        ...     "username": "ada",
        ...     "email": "ada@example.com",
        ... })
        >>> data.participating_in
        []
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    firstname: str
    lastname: str
    username: str
    email: str
    participating_in: List[str] = Field(default_factory=list, alias="participatingIn")

    @field_validator("firstname", "lastname", "username", mode="before")
    @classmethod
    def check_text(cls, v: Any) -> str:
        return clean_text(v)

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, v: Any) -> str:
        return clean_email(v)

    @field_validator("participating_in", mode="before")
    @classmethod
    def check_event_refs(cls, v: Any) -> List[str]:
        return clean_event_refs(v)

    @classmethod
    def parse(cls, data: Mapping[str, Any]) -> "UserProfileData":
        """Validate a mapping shaped like the user schema.

        Raises:
            UserValidationError: If a required field is missing, a value is
                invalid or an unknown key is present
        """
        if not isinstance(data, Mapping):
            raise UserValidationError("user data must be a mapping")
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            first = e.errors()[0]
            loc = first.get("loc") or ()
            field = str(loc[0]) if loc else None
            raise UserValidationError(first.get("msg", str(e)), field=field) from e

    def event_ids(self) -> List[EventId]:
        return [EventId(ref) for ref in self.participating_in]
