"""UserId value object."""

from dataclasses import dataclass

from bson import ObjectId


@dataclass(frozen=True)
class UserId:
    """User identifier value object.

    Wraps the hex form of the MongoDB ``_id`` of a user document.

    Examples:
        >>> user_id = UserId("64b7f0c2a1b2c3d4e5f60718")
        >>> str(user_id)
        '64b7f0c2a1b2c3d4e5f60718'

        >>> UserId.from_object_id(ObjectId("64b7f0c2a1b2c3d4e5f60718")) == user_id
        True
    """

    value: str

    def __post_init__(self) -> None:
        """Validate ObjectId format."""
        if not isinstance(self.value, str) or not ObjectId.is_valid(self.value):
            raise ValueError(f"Invalid ObjectId format: {self.value}")

    @staticmethod
    def generate() -> "UserId":
        """Generate a new UserId backed by a fresh ObjectId."""
        return UserId(str(ObjectId()))

    @staticmethod
    def from_object_id(object_id: ObjectId) -> "UserId":
        return UserId(str(object_id))

    def to_object_id(self) -> ObjectId:
        return ObjectId(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"UserId('{self.value}')"
