"""Unit tests for Outcome value object."""

from domain.shared.outcome import FailureKind, Outcome


class TestOutcome:
    """Test Outcome construction and flags."""

    def test_success_is_ok(self):
        outcome = Outcome.success("value")

        assert outcome.ok is True
        assert outcome.value == "value"
        assert outcome.failure is None

    def test_fail_defaults_value_to_none(self):
        outcome = Outcome.fail(FailureKind.STORE, "connection refused")

        assert outcome.ok is False
        assert outcome.value is None
        assert outcome.failure is FailureKind.STORE
        assert outcome.detail == "connection refused"

    def test_fail_with_custom_sentinel(self):
        """Delete reports False rather than None on failure."""
        outcome = Outcome.fail(FailureKind.STORE, value=False)

        assert outcome.value is False

    def test_is_not_found(self):
        assert Outcome.fail(FailureKind.NOT_FOUND).is_not_found is True
        assert Outcome.fail(FailureKind.VALIDATION).is_not_found is False
        assert Outcome.success(1).is_not_found is False

    def test_failure_kind_values(self):
        assert {k.value for k in FailureKind} == {"not_found", "validation", "conflict", "store"}
