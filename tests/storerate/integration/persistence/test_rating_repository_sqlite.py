"""RatingRepositorySQLAlchemy against SQLite."""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio

from storerate.domain.rating import DuplicateRatingError, Rating
from tests.shared.fixtures.factories import make_rating, make_store, make_user


@pytest_asyncio.fixture
async def rated_store(factory):
    alice = make_user(name="Alice", email="alice@example.com")
    bob = make_user(name="Bob", email="bob@example.com")
    for user in (alice, bob):
        await factory.user_repository().save(user)
    store = make_store()
    await factory.store_repository().save(store)
    return store, alice, bob


async def test_save_and_find(factory, rated_store):
    store, alice, _ = rated_store
    repo = factory.rating_repository()
    rating = make_rating(alice.id, store.id, score=5)
    await repo.save(rating)

    found = await repo.find_by_user_and_store(alice.id, store.id)

    assert found == rating
    assert found.score == 5


async def test_update_score(factory, rated_store):
    store, alice, _ = rated_store
    repo = factory.rating_repository()
    rating = make_rating(alice.id, store.id, score=5)
    await repo.save(rating)

    rating.change_score(2)
    await repo.save(rating)

    assert (await repo.find_by_user_and_store(alice.id, store.id)).score == 2
    assert await repo.count() == 1


async def test_unique_constraint_maps_to_duplicate(factory, rated_store):
    store, alice, _ = rated_store
    repo = factory.rating_repository()
    await repo.save(make_rating(alice.id, store.id, score=5))

    with pytest.raises(DuplicateRatingError):
        await repo.save(make_rating(alice.id, store.id, score=1))


async def test_statistics(factory, rated_store):
    store, alice, bob = rated_store
    empty_store = make_store(name="Empty", email="empty@shop.com")
    await factory.store_repository().save(empty_store)
    repo = factory.rating_repository()
    await repo.save(make_rating(alice.id, store.id, score=5))
    await repo.save(make_rating(bob.id, store.id, score=4))

    stats = await repo.statistics_for_stores([store.id, empty_store.id])

    assert stats[store.id].total_ratings == 2
    assert stats[store.id].average_rating == "4.5"
    assert stats[empty_store.id].total_ratings == 0
    assert stats[empty_store.id].average_rating is None
    assert (await repo.statistics_for_store(store.id)).score_sum == 9


async def test_lists_are_newest_first(factory, rated_store):
    store, alice, bob = rated_store
    other = make_store(name="Other", email="other@shop.com")
    await factory.store_repository().save(other)
    repo = factory.rating_repository()
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    older = Rating(alice.id, store.id, 3, created_at=base)
    newer = Rating(bob.id, store.id, 4, created_at=base + timedelta(hours=1))
    newest_for_alice = Rating(alice.id, other.id, 2, created_at=base + timedelta(days=1))
    for rating in (older, newer, newest_for_alice):
        await repo.save(rating)

    assert await repo.list_for_store(store.id) == [newer, older]
    assert await repo.list_for_user(alice.id) == [newest_for_alice, older]
    assert await repo.find_by_user_for_stores(alice.id, [store.id, other.id]) == {
        store.id: older,
        other.id: newest_for_alice,
    }
