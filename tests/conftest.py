"""Shared test fixtures.

Unit tests run against InMemoryUserRepository or motor doubles; tests under
tests/integration need a reachable MongoDB (MONGODB_URI) and are skipped
otherwise.
"""

from typing import Generator

import pytest

from infrastructure.user.in_memory_user_repository import InMemoryUserRepository
from infrastructure.user.repository_factory import reset_user_repository


@pytest.fixture(autouse=True)
def _reset_repository_singleton() -> Generator[None, None, None]:
    """Each test starts without a cached repository."""
    reset_user_repository()
    yield
    reset_user_repository()


@pytest.fixture
def repository() -> InMemoryUserRepository:
    """Create in-memory repository."""
    return InMemoryUserRepository()


@pytest.fixture
def ada_data() -> dict:
    return {
        "firstname": "Ada",
        "lastname": "Lovelace",
        "username": "ada",
        "email": "ada@example.com",
    }
