"""Tests for user queries."""

from unittest.mock import AsyncMock

import pytest
from bson import ObjectId

from application.user.queries import FindUsersQuery, GetUserEventsQuery, GetUserQuery
from domain.shared.outcome import FailureKind
from domain.user.core.exceptions.user_errors import UserStoreError


class TestGetUserQuery:
    @pytest.mark.asyncio
    async def test_by_username_found(self, repository, ada_data):
        await repository.create_full(ada_data)

        outcome = await GetUserQuery(repository).by_username("ada")

        assert outcome.ok
        assert outcome.value.username == "ada"
        assert outcome.value.participating_events == []

    @pytest.mark.asyncio
    async def test_by_username_missing_is_not_found(self, repository):
        outcome = await GetUserQuery(repository).by_username("ghost")

        assert outcome.is_not_found
        assert outcome.detail == "User not found: ghost"

    @pytest.mark.asyncio
    async def test_raw_does_not_join(self, repository, ada_data):
        await repository.create_full(ada_data)

        outcome = await GetUserQuery(repository).raw("ada")

        assert outcome.value.participating_events is None

    @pytest.mark.asyncio
    async def test_as_plain_object(self, repository, ada_data):
        created = await repository.create_full(ada_data)

        outcome = await GetUserQuery(repository).as_plain_object("ada")

        assert outcome.value == {
            "_id": str(created.user_id),
            "firstname": "Ada",
            "lastname": "Lovelace",
            "username": "ada",
            "email": "ada@example.com",
            "participatingIn": [],
        }

    @pytest.mark.asyncio
    async def test_exists(self, repository, ada_data):
        await repository.create_full(ada_data)
        query = GetUserQuery(repository)

        assert await query.exists("ada") is True
        assert await query.exists("ghost") is False

    @pytest.mark.asyncio
    async def test_exists_collapses_store_failure_to_false(self, repository):
        repository.get_user = AsyncMock(side_effect=UserStoreError("get_user", "down"))

        assert await GetUserQuery(repository).exists("ada") is False

    @pytest.mark.asyncio
    async def test_store_failure_is_distinct_from_not_found(self, repository):
        repository.get_user = AsyncMock(side_effect=UserStoreError("get_user", "down"))

        outcome = await GetUserQuery(repository).by_username("ada")

        assert outcome.failure is FailureKind.STORE
        assert not outcome.is_not_found

    @pytest.mark.asyncio
    async def test_malformed_stored_user_is_store_failure(self, repository):
        doc_id = ObjectId()
        repository._users[doc_id] = {"_id": doc_id, "username": "ada", "firstname": "Ada"}

        outcome = await GetUserQuery(repository).by_username("ada")

        assert outcome.failure is FailureKind.STORE
        assert outcome.value is None
        assert "malformed document" in outcome.detail


class TestGetUserEventsQuery:
    @pytest.mark.asyncio
    async def test_participating(self, repository, ada_data):
        await repository.create_full(ada_data)
        event_id = repository.add_event(name="Picnic")
        await repository.update_field("ada", "participatingIn", [event_id])

        outcome = await GetUserEventsQuery(repository).participating("ada")

        assert [e.event_id for e in outcome.value] == [event_id]

    @pytest.mark.asyncio
    async def test_created_empty_is_success(self, repository, ada_data):
        await repository.create_full(ada_data)

        outcome = await GetUserEventsQuery(repository).created("ada")

        assert outcome.ok
        assert outcome.value == []

    @pytest.mark.asyncio
    async def test_missing_user_is_not_found(self, repository):
        query = GetUserEventsQuery(repository)

        assert (await query.participating("ghost")).is_not_found
        assert (await query.created("ghost")).is_not_found

    @pytest.mark.asyncio
    async def test_malformed_joined_event_is_store_failure(self, repository, ada_data):
        await repository.create_full(ada_data)
        event_id = repository.add_event(name="Picnic")
        repository._events[event_id.to_object_id()]["creator"] = "system"
        await repository.update_field("ada", "participatingIn", [event_id])

        outcome = await GetUserEventsQuery(repository).participating("ada")

        assert outcome.failure is FailureKind.STORE
        assert outcome.value is None


class TestFindUsersQuery:
    @pytest.mark.asyncio
    async def test_matching(self, repository):
        for name in ("bob", "bobby", "alice"):
            await repository.create_basic("F", "L", name, f"{name}@example.com")

        outcome = await FindUsersQuery(repository).matching("BOB")

        assert sorted(u.username for u in outcome.value) == ["bob", "bobby"]

    @pytest.mark.asyncio
    async def test_no_match_is_empty_success(self, repository):
        outcome = await FindUsersQuery(repository).matching("zzz")

        assert outcome.ok
        assert outcome.value == []

    @pytest.mark.asyncio
    async def test_invalid_pattern_is_validation(self, repository):
        outcome = await FindUsersQuery(repository).matching("(")

        assert outcome.failure is FailureKind.VALIDATION

    @pytest.mark.asyncio
    async def test_literal(self, repository):
        for name in ("a.c", "abc"):
            await repository.create_basic("F", "L", name, "x@example.com")

        outcome = await FindUsersQuery(repository).matching("a.c", literal=True)

        assert [u.username for u in outcome.value] == ["a.c"]
