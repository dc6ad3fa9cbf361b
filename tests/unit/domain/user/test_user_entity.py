"""Unit tests for User and Event entities."""

from bson import ObjectId

from domain.event.core.entities.event import Event
from domain.event.core.value_objects.event_id import EventId
from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.user_profile_data import UserProfileData


def _user(ada_data, **overrides) -> User:
    return User.create(UserProfileData.parse({**ada_data, **overrides}))


class TestUserEntity:
    """Test User aggregate."""

    def test_create_generates_id_and_copies_fields(self, ada_data):
        user = _user(ada_data)

        assert ObjectId.is_valid(user.user_id.value)
        assert (user.firstname, user.lastname, user.username, user.email) == (
            "Ada",
            "Lovelace",
            "ada",
            "ada@example.com",
        )
        assert user.participating_in == []
        assert user.is_populated is False

    def test_equality_by_identity(self, ada_data):
        user = _user(ada_data)
        same = User(
            user_id=user.user_id,
            firstname="Other",
            lastname="Name",
            username="other",
            email="o@x.com",
        )

        assert user == same
        assert hash(user) == hash(same)
        assert user != _user(ada_data)

    def test_to_plain_unjoined_renders_reference_ids(self, ada_data):
        oid = ObjectId()
        user = _user(ada_data, participatingIn=[oid])

        plain = user.to_plain()

        assert plain["_id"] == str(user.user_id)
        assert plain["participatingIn"] == [str(oid)]

    def test_to_plain_joined_renders_events_and_is_detached(self, ada_data):
        user = _user(ada_data)
        event = Event(
            event_id=EventId.generate(),
            creator=user.user_id,
            attributes={"name": "Picnic", "tags": ["outdoor"]},
        )
        user.participating_events = [event]

        plain = user.to_plain()
        plain["participatingIn"][0]["tags"].append("mutated")
        plain["firstname"] = "Changed"

        assert plain["participatingIn"][0]["name"] == "Picnic"
        assert "participants" not in plain["participatingIn"][0]
        assert event.attributes["tags"] == ["outdoor"]
        assert user.firstname == "Ada"


class TestEventEntity:
    """Test Event entity."""

    def test_participants_none_means_stripped(self):
        event = Event(event_id=EventId.generate(), creator=None)

        assert event.participants_stripped is True
        assert event.to_plain()["creator"] is None

    def test_to_plain_with_participants(self):
        participant = UserId.generate()
        event = Event(
            event_id=EventId.generate(),
            creator=participant,
            participants=[participant],
        )

        assert event.to_plain()["participants"] == [str(participant)]
