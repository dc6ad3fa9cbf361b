"""Unit tests for user domain exceptions."""

from domain.shared.outcome import FailureKind
from domain.user.core.exceptions.user_errors import (
    InvalidSearchPatternError,
    InvalidUserFieldError,
    UserAlreadyExistsError,
    UserDomainError,
    UserNotFoundError,
    UserStoreError,
    UserValidationError,
)


class TestUserDomainExceptions:
    """Test user domain exception hierarchy and failure kinds."""

    def test_user_not_found(self):
        error = UserNotFoundError("bob")

        assert isinstance(error, UserDomainError)
        assert error.username == "bob"
        assert "not found" in str(error).lower()
        assert error.kind is FailureKind.NOT_FOUND

    def test_user_already_exists(self):
        error = UserAlreadyExistsError("bob")

        assert error.kind is FailureKind.CONFLICT
        assert "bob" in str(error)

    def test_invalid_user_field(self):
        error = InvalidUserFieldError("isAdmin")

        assert error.kind is FailureKind.VALIDATION
        assert error.field == "isAdmin"
        assert "isAdmin" in str(error)

    def test_user_validation_error_with_field(self):
        error = UserValidationError("cannot be empty or whitespace", field="firstname")

        assert error.kind is FailureKind.VALIDATION
        assert error.field == "firstname"
        assert "firstname" in str(error)

    def test_user_validation_error_without_field(self):
        error = UserValidationError("user data must be a mapping")

        assert error.field is None
        assert str(error) == "Invalid user data: user data must be a mapping"

    def test_invalid_search_pattern(self):
        error = InvalidSearchPatternError("(", "missing )")

        assert error.kind is FailureKind.VALIDATION
        assert error.pattern == "("

    def test_user_store_error(self):
        error = UserStoreError("get_user", "connection refused")

        assert error.kind is FailureKind.STORE
        assert error.operation == "get_user"
        assert "connection refused" in str(error)
