"""Repository behaviour on PostgreSQL (Testcontainers, needs Docker)."""

import pytest

from storerate.domain.rating import DuplicateRatingError
from storerate.domain.shared.pagination import PageRequest
from storerate.domain.store import OwnerAlreadyHasStoreError
from storerate.domain.user import EmailAlreadyExistsError, UserFilter, UserSort
from storerate.infrastructure.persistence.sqlalchemy import SQLAlchemyRepositoryFactory
from tests.shared.fixtures.factories import make_rating, make_store, make_user

pytestmark = pytest.mark.integration


async def test_constraints_map_to_domain_errors(postgres_database):
    async with postgres_database.session() as session:
        factory = SQLAlchemyRepositoryFactory(session)
        owner = make_user(email="owner@example.com")
        await factory.user_repository().save(owner)
        store = make_store(owner_id=owner.id)
        await factory.store_repository().save(store)
        await factory.rating_repository().save(make_rating(owner.id, store.id, 5))
        await session.commit()

    async with postgres_database.session() as session:
        factory = SQLAlchemyRepositoryFactory(session)
        with pytest.raises(EmailAlreadyExistsError):
            await factory.user_repository().save(make_user(email="owner@example.com"))

    async with postgres_database.session() as session:
        factory = SQLAlchemyRepositoryFactory(session)
        with pytest.raises(OwnerAlreadyHasStoreError):
            await factory.store_repository().save(
                make_store(email="second@shop.com", owner_id=owner.id),
            )

    async with postgres_database.session() as session:
        factory = SQLAlchemyRepositoryFactory(session)
        with pytest.raises(DuplicateRatingError):
            await factory.rating_repository().save(make_rating(owner.id, store.id, 1))


async def test_search_escapes_wildcards_and_ignores_case(postgres_database):
    async with postgres_database.session() as session:
        repo = SQLAlchemyRepositoryFactory(session).user_repository()
        await repo.save(make_user(name="Plain Name", email="plain@example.com"))
        await repo.save(make_user(name="100% Sure", email="sure@example.com"))

        found, total = await repo.search(
            UserFilter(search="%"),
            UserSort(),
            PageRequest(),
        )
        assert total == 1
        assert found[0].email == "sure@example.com"

        _, total = await repo.search(
            UserFilter(name="PLAIN"),
            UserSort(),
            PageRequest(),
        )
        assert total == 1
