"""EventId value object."""

from dataclasses import dataclass

from bson import ObjectId


@dataclass(frozen=True)
class EventId:
    """Event identifier value object (hex form of the event ``_id``)."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not ObjectId.is_valid(self.value):
            raise ValueError(f"Invalid ObjectId format: {self.value}")

    @staticmethod
    def generate() -> "EventId":
        return EventId(str(ObjectId()))

    @staticmethod
    def from_object_id(object_id: ObjectId) -> "EventId":
        return EventId(str(object_id))

    @staticmethod
    def parse(raw: object) -> "EventId":
        """Build an EventId from an ObjectId, an EventId or a hex string.

        Raises:
            ValueError: If the value is not a valid ObjectId
        """
        if isinstance(raw, EventId):
            return raw
        if isinstance(raw, ObjectId):
            return EventId.from_object_id(raw)
        if isinstance(raw, str):
            return EventId(raw)
        raise ValueError(f"Invalid ObjectId format: {raw!r}")

    def to_object_id(self) -> ObjectId:
        return ObjectId(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"EventId('{self.value}')"
