"""Value objects for the user domain."""

from .user_field import FieldUpdate, UserField
from .user_id import UserId
from .user_profile_data import UserProfileData

__all__ = [
    "UserId",
    "UserField",
    "FieldUpdate",
    "UserProfileData",
]
