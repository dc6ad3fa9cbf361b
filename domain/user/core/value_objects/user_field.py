"""Updatable user fields."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Union

from domain.user.core.exceptions.user_errors import (
    InvalidUserFieldError,
    UserValidationError,
)
from domain.user.core.value_objects.user_profile_data import (
    clean_email,
    clean_event_refs,
    clean_text,
)


class UserField(str, Enum):
    """Closed set of user fields that may be updated.

    Values are the keys used in the stored document.
    """

    FIRSTNAME = "firstname"
    LASTNAME = "lastname"
    USERNAME = "username"
    EMAIL = "email"
    PARTICIPATING_IN = "participatingIn"

    @classmethod
    def parse(cls, name: Union[str, "UserField"]) -> "UserField":
        """Resolve a field from its enum member, document key or snake_case name.

        Examples:
            >>> UserField.parse("email")
            <UserField.EMAIL: 'email'>
            >>> UserField.parse("participating_in")
            <UserField.PARTICIPATING_IN: 'participatingIn'>

        Raises:
            InvalidUserFieldError: If the name is not an updatable field
        """
        if isinstance(name, UserField):
            return name
        if isinstance(name, str):
            for member in cls:
                if name == member.value or name.upper() == member.name:
                    return member
        raise InvalidUserFieldError(str(name))

    def clean(self, value: Any) -> Any:
        """Validate and normalize a value for this field.

        Raises:
            UserValidationError: If the value is not acceptable
        """
        try:
            return _CLEANERS[self](value)
        except ValueError as e:
            raise UserValidationError(str(e), field=self.value) from e


_CLEANERS: Dict[UserField, Callable[[Any], Any]] = {
    UserField.FIRSTNAME: clean_text,
    UserField.LASTNAME: clean_text,
    UserField.USERNAME: clean_text,
    UserField.EMAIL: clean_email,
    UserField.PARTICIPATING_IN: clean_event_refs,
}


@dataclass(frozen=True)
class FieldUpdate:
    """A single ``{field, value}`` assignment.

    Examples:
        >>> FieldUpdate.of("email", "a@x.com").field
        <UserField.EMAIL: 'email'>
    """

    field: UserField
    value: Any

    @staticmethod
    def of(field: Union[str, UserField], value: Any) -> "FieldUpdate":
        """Build a validated update.

        Raises:
            InvalidUserFieldError: If the field is not updatable
            UserValidationError: If the value is invalid for the field
        """
        parsed = UserField.parse(field)
        return FieldUpdate(field=parsed, value=parsed.clean(value))

    @staticmethod
    def coerce(update: Union["FieldUpdate", Mapping[str, Any]]) -> "FieldUpdate":
        """Accept a FieldUpdate or a ``{"field": ..., "value": ...}`` mapping."""
        if isinstance(update, FieldUpdate):
            return FieldUpdate.of(update.field, update.value)
        if isinstance(update, Mapping) and "field" in update and "value" in update:
            return FieldUpdate.of(update["field"], update["value"])
        raise UserValidationError(f"update must have 'field' and 'value': {update!r}")
