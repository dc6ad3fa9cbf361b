"""Unit tests for UserProfileData validation."""

import pytest
from bson import ObjectId

from domain.user.core.exceptions.user_errors import UserValidationError
from domain.user.core.value_objects.user_profile_data import UserProfileData


class TestUserProfileData:
    """Test creation input validation."""

    def test_parse_required_fields(self, ada_data):
        data = UserProfileData.parse(ada_data)

        assert data.username == "ada"
        assert data.participating_in == []

    def test_parse_accepts_document_key_for_references(self, ada_data):
        oid = ObjectId()
        data = UserProfileData.parse({**ada_data, "participatingIn": [oid]})

        assert data.participating_in == [str(oid)]
        assert data.event_ids()[0].to_object_id() == oid

    def test_parse_accepts_snake_case_key_for_references(self, ada_data):
        oid = ObjectId()
        data = UserProfileData.parse({**ada_data, "participating_in": [str(oid)]})

        assert data.participating_in == [str(oid)]

    def test_missing_required_field(self, ada_data):
        del ada_data["email"]

        with pytest.raises(UserValidationError) as exc_info:
            UserProfileData.parse(ada_data)

        assert exc_info.value.field == "email"

    def test_unknown_key_rejected(self, ada_data):
        with pytest.raises(UserValidationError) as exc_info:
            UserProfileData.parse({**ada_data, "isAdmin": True})

        assert exc_info.value.field == "isAdmin"

    def test_blank_name_rejected(self, ada_data):
        with pytest.raises(UserValidationError, match="empty"):
            UserProfileData.parse({**ada_data, "firstname": "   "})

    def test_non_string_username_rejected(self, ada_data):
        with pytest.raises(UserValidationError, match="must be a string"):
            UserProfileData.parse({**ada_data, "username": 42})

    def test_invalid_email_rejected(self, ada_data):
        with pytest.raises(UserValidationError) as exc_info:
            UserProfileData.parse({**ada_data, "email": "not-an-email"})

        assert exc_info.value.field == "email"

    def test_invalid_reference_rejected(self, ada_data):
        with pytest.raises(UserValidationError):
            UserProfileData.parse({**ada_data, "participatingIn": ["nope"]})

    def test_string_instead_of_reference_list_rejected(self, ada_data):
        with pytest.raises(UserValidationError, match="list of event ids"):
            UserProfileData.parse({**ada_data, "participatingIn": str(ObjectId())})

    def test_non_mapping_rejected(self):
        with pytest.raises(UserValidationError, match="mapping"):
            UserProfileData.parse(["ada"])  # type: ignore[arg-type]

    def test_username_is_kept_as_given(self, ada_data):
        data = UserProfileData.parse({**ada_data, "username": "Ada.L"})

        assert data.username == "Ada.L"
