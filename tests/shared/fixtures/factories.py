"""Builders for domain objects used across unit tests."""

from uuid import UUID

from storerate.domain.rating import Rating
from storerate.domain.store import Store
from storerate.domain.user import User, UserRole


def make_user(
    name: str = "Alice Example",
    email: str = "alice@example.com",
    address: str = "1 Main Street",
    role: UserRole = UserRole.USER,
) -> User:
    return User.create(name=name, email=email, address=address, role=role)


def make_store(
    name: str = "Corner Books",
    email: str = "hello@cornerbooks.com",
    address: str = "5 Library Lane",
    owner_id: UUID | None = None,
) -> Store:
    return Store.create(name=name, email=email, address=address, owner_id=owner_id)


def make_rating(user_id: UUID, store_id: UUID, score: int = 4) -> Rating:
    return Rating.create(user_id=user_id, store_id=store_id, score=score)
