from .find_users import FindUsersQuery
from .get_user import GetUserQuery
from .get_user_events import GetUserEventsQuery

__all__ = ["GetUserQuery", "GetUserEventsQuery", "FindUsersQuery"]
