"""Username search pattern handling.

The search string is a regular expression matched case-insensitively
anywhere in the username (MongoDB ``$regex`` with ``$options: "i"``).
Passing ``literal=True`` escapes it so metacharacters match themselves.

MongoDB evaluates ``$regex`` with PCRE, so the MongoDB repository sends
the pattern as given and lets the server judge it. Only the in-memory
repository compiles it with Python's ``re``.
"""

import re
from typing import Pattern

from pymongo.errors import OperationFailure

from domain.user.core.exceptions.user_errors import InvalidSearchPatternError

# Server codes for a rejected $regex: BadValue, invalid regex, invalid options.
_REGEX_ERROR_CODES = frozenset({2, 51091, 51108})


def build_search_pattern(search_string: str, literal: bool = False) -> str:
    """Build the username regex as sent to the store.

    Examples:
        >>> build_search_pattern("a.c")
        'a.c'
        >>> build_search_pattern("a.c", literal=True)
        'a\\\\.c'

    Raises:
        InvalidSearchPatternError: If the search string is not a string
    """
    if not isinstance(search_string, str):
        raise InvalidSearchPatternError(repr(search_string), "search string must be a string")

    return re.escape(search_string) if literal else search_string


def compile_search_pattern(pattern: str) -> Pattern[str]:
    """Compile a pattern for in-process matching.

    Raises:
        InvalidSearchPatternError: If Python's ``re`` cannot compile it
    """
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise InvalidSearchPatternError(pattern, str(e)) from e


def username_matches(pattern: Pattern[str], username: str) -> bool:
    """Python equivalent of ``{"$regex": pattern, "$options": "i"}``."""
    return pattern.search(username) is not None


def is_regex_failure(error: OperationFailure) -> bool:
    """True when the server rejected the ``$regex`` itself."""
    if error.code in _REGEX_ERROR_CODES:
        return True
    return "regular expression" in str(error).lower()
