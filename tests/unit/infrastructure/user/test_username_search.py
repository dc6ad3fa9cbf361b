"""Tests for username search patterns."""

import pytest
from pymongo.errors import OperationFailure

from domain.user.core.exceptions.user_errors import InvalidSearchPatternError
from infrastructure.user.username_search import (
    build_search_pattern,
    compile_search_pattern,
    is_regex_failure,
    username_matches,
)


def _matches(search_string: str, username: str, literal: bool = False) -> bool:
    return username_matches(
        compile_search_pattern(build_search_pattern(search_string, literal)), username
    )


@pytest.mark.parametrize(
    "pattern,username,expected",
    [
        ("bob", "bob", True),
        ("bob", "bobby", True),
        ("bob", "Bob123", True),
        ("bob", "alice", False),
        ("a.c", "abc", True),
        ("a.c", "axc", True),
        ("a.c", "ac", False),
        ("^ada$", "ada", True),
        ("^ada$", "adam", False),
    ],
)
def test_regex_match_is_case_insensitive_substring(pattern, username, expected):
    assert _matches(pattern, username) is expected


def test_literal_escapes_metacharacters():
    assert _matches("a.c", "a.c", literal=True)
    assert not _matches("a.c", "abc", literal=True)


def test_empty_string_matches_everything():
    assert _matches("", "anyone")


@pytest.mark.parametrize("pcre_only", [r"\p{Lu}", "a(?i)b", r"\Qa.c\E", "[unclosed"])
def test_store_pattern_is_passed_through_unchecked(pcre_only):
    assert build_search_pattern(pcre_only) == pcre_only


@pytest.mark.parametrize("bad", ["(", "[unclosed", "*start", r"\p{Lu}"])
def test_in_process_compile_rejects_what_re_cannot_compile(bad):
    with pytest.raises(InvalidSearchPatternError):
        compile_search_pattern(bad)


def test_literal_mode_accepts_any_text():
    assert build_search_pattern("(", literal=True) == r"\("


def test_non_string_rejected():
    with pytest.raises(InvalidSearchPatternError, match="must be a string"):
        build_search_pattern(None)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "error,expected",
    [
        (OperationFailure("Regular expression is invalid: missing )", code=51091), True),
        (OperationFailure("invalid flag in regex options: u", code=51108), True),
        (OperationFailure("$regex has to be a string", code=2), True),
        (OperationFailure("not authorized on eventhub", code=13), False),
    ],
)
def test_is_regex_failure(error, expected):
    assert is_regex_failure(error) is expected
