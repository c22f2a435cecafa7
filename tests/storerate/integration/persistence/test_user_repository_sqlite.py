"""UserRepositorySQLAlchemy against SQLite."""

from uuid import uuid4

import pytest

from storerate.domain.shared.pagination import PageRequest, SortOrder
from storerate.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserFilter,
    UserRole,
    UserSort,
    UserSortField,
)
from tests.shared.fixtures.factories import make_user


async def _seed(repo) -> dict[str, User]:
    users = {
        "alice": make_user(
            name="Alice Anders",
            email="alice@example.com",
            address="1 Main Street",
        ),
        "bob": make_user(
            name="Bob Brown",
            email="bob@shop.com",
            address="22 Harbour Road",
            role=UserRole.STORE_OWNER,
        ),
        "carol": make_user(
            name="Carol Clark",
            email="carol@example.com",
            address="3 Main Street",
            role=UserRole.ADMIN,
        ),
    }
    for user in users.values():
        await repo.save(user)
    return users


class TestUserRepository:
    async def test_save_and_find(self, factory):
        repo = factory.user_repository()
        user = make_user()
        await repo.save(user)

        by_id = await repo.find_by_id(user.id)
        by_email = await repo.find_by_email("ALICE@example.com")

        assert by_id == user
        assert by_id.role == UserRole.USER
        assert by_id.created_at.tzinfo is not None
        assert by_email == user
        assert await repo.exists_by_email("alice@example.com")
        assert await repo.find_by_id(uuid4()) is None

    async def test_save_updates_role(self, factory):
        repo = factory.user_repository()
        user = make_user()
        await repo.save(user)

        user.assign_store_ownership()
        await repo.save(user)

        reloaded = await repo.find_by_id(user.id)
        assert reloaded.role == UserRole.STORE_OWNER

    async def test_duplicate_email_maps_to_domain_error(self, factory):
        repo = factory.user_repository()
        await repo.save(make_user(email="dup@example.com"))

        with pytest.raises(EmailAlreadyExistsError):
            await repo.save(make_user(name="Other", email="dup@example.com"))

    async def test_find_by_ids(self, factory):
        repo = factory.user_repository()
        users = await _seed(repo)

        found = await repo.find_by_ids([users["alice"].id, users["bob"].id, uuid4()])

        assert set(found) == {users["alice"].id, users["bob"].id}
        assert await repo.find_by_ids([]) == {}


class TestUserSearch:
    async def test_search_matches_any_text_column_case_insensitive(self, factory):
        repo = factory.user_repository()
        users = await _seed(repo)

        found, total = await repo.search(
            UserFilter(search="MAIN street"),
            UserSort(),
            PageRequest(),
        )

        assert total == 2
        assert [u.id for u in found] == [users["alice"].id, users["carol"].id]

    async def test_filters_are_combined(self, factory):
        repo = factory.user_repository()
        users = await _seed(repo)

        found, total = await repo.search(
            UserFilter(address="main", role=UserRole.ADMIN),
            UserSort(),
            PageRequest(),
        )

        assert total == 1
        assert found[0].id == users["carol"].id

    async def test_like_wildcards_are_literal(self, factory):
        repo = factory.user_repository()
        await _seed(repo)
        await repo.save(
            make_user(name="Per_cent 100%", email="pct@example.com", address="x"),
        )

        found, total = await repo.search(UserFilter(search="%"), UserSort(), PageRequest())
        assert total == 1
        assert found[0].email == "pct@example.com"

        _, total = await repo.search(UserFilter(name="r_"), UserSort(), PageRequest())
        assert total == 1

    async def test_blank_search_is_ignored(self, factory):
        repo = factory.user_repository()
        await _seed(repo)

        _, total = await repo.search(UserFilter(search="   "), UserSort(), PageRequest())

        assert total == 3

    async def test_sort_and_paginate(self, factory):
        repo = factory.user_repository()
        users = await _seed(repo)
        sort = UserSort(field=UserSortField.EMAIL, order=SortOrder.DESC)

        first, total = await repo.search(UserFilter(), sort, PageRequest(page=1, limit=2))
        second, _ = await repo.search(UserFilter(), sort, PageRequest(page=2, limit=2))

        assert total == 3
        assert [u.id for u in first] == [users["carol"].id, users["bob"].id]
        assert [u.id for u in second] == [users["alice"].id]

    async def test_page_past_the_end_is_empty(self, factory):
        repo = factory.user_repository()
        await _seed(repo)

        found, total = await repo.search(
            UserFilter(),
            UserSort(),
            PageRequest(page=5, limit=10),
        )

        assert found == []
        assert total == 3

    async def test_page_beyond_integer_range_is_empty(self, factory):
        repo = factory.user_repository()
        await _seed(repo)

        found, total = await repo.search(
            UserFilter(),
            UserSort(),
            PageRequest(page=10**18, limit=10),
        )

        assert found == []
        assert total == 3

    async def test_count(self, factory):
        repo = factory.user_repository()
        await _seed(repo)

        assert await repo.count() == 3
