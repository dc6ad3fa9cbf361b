from .create_user import CreateUserCommand
from .delete_user import DeleteUserCommand
from .update_user import UpdateUserCommand

__all__ = ["CreateUserCommand", "UpdateUserCommand", "DeleteUserCommand"]
