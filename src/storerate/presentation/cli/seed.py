"""Demo data for `storerate db seed`.

Seeding is idempotent: users and stores whose email already exists are
left untouched, and an existing rating for a (user, store) pair is kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from storerate.application.commands import (
    CreateStoreCommand,
    CreateUserCommand,
    SubmitRatingCommand,
)
from storerate.application.factories import RepositoryFactory
from storerate.domain.store import Store
from storerate.domain.user import User, UserRole
from storerate_auth import PasswordHashingService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedUser:
    name: str
    email: str
    password: str
    address: str
    role: UserRole


@dataclass(frozen=True)
class SeedStore:
    name: str
    email: str
    address: str
    owner_email: str


SEED_USERS = (
    SeedUser(
        name="System Administrator Account",
        email="admin@storereviewer.com",
        password="Admin@123",
        address="123 Admin Street, Admin City, Admin Country",
        role=UserRole.ADMIN,
    ),
    SeedUser(
        name="John Doe Regular User",
        email="john.doe@example.com",
        password="User@123",
        address="456 User Lane, User City, User Country",
        role=UserRole.USER,
    ),
    SeedUser(
        name="Jane Smith Regular User",
        email="jane.smith@example.com",
        password="User@123",
        address="789 Customer Road, Customer Town, Customer State",
        role=UserRole.USER,
    ),
    SeedUser(
        name="Tech Store Owner Account",
        email="owner1@techstore.com",
        password="Owner@123",
        address="100 Tech Avenue, Silicon Valley, California",
        role=UserRole.STORE_OWNER,
    ),
    SeedUser(
        name="Fashion Hub Store Owner",
        email="owner2@fashionhub.com",
        password="Owner@123",
        address="200 Fashion Street, New York City, New York",
        role=UserRole.STORE_OWNER,
    ),
    SeedUser(
        name="Bookworm Paradise Store Owner",
        email="owner3@bookworm.com",
        password="Owner@123",
        address="300 Literary Lane, Boston, Massachusetts",
        role=UserRole.STORE_OWNER,
    ),
)

SEED_STORES = (
    SeedStore(
        name="Tech Gadgets Electronics Store",
        email="contact@techstore.com",
        address="100 Tech Avenue, Silicon Valley, California, USA 94000",
        owner_email="owner1@techstore.com",
    ),
    SeedStore(
        name="Fashion Hub Clothing Store",
        email="contact@fashionhub.com",
        address="200 Fashion Street, New York City, New York, USA 10001",
        owner_email="owner2@fashionhub.com",
    ),
    SeedStore(
        name="Bookworm Paradise Bookstore",
        email="contact@bookworm.com",
        address="300 Literary Lane, Boston, Massachusetts, USA 02101",
        owner_email="owner3@bookworm.com",
    ),
)

# (rater email, store email, score)
SEED_RATINGS = (
    ("john.doe@example.com", "contact@techstore.com", 5),
    ("john.doe@example.com", "contact@fashionhub.com", 4),
    ("jane.smith@example.com", "contact@techstore.com", 4),
    ("jane.smith@example.com", "contact@bookworm.com", 5),
)


@dataclass
class SeedReport:
    users_created: list[str] = field(default_factory=list)
    users_skipped: list[str] = field(default_factory=list)
    stores_created: list[str] = field(default_factory=list)
    stores_skipped: list[str] = field(default_factory=list)
    ratings_created: int = 0
    ratings_skipped: int = 0


async def seed_demo_data(
    factory: RepositoryFactory,
    password_service: PasswordHashingService,
) -> SeedReport:
    """Insert the demo users, stores and ratings that are still missing.

    The caller owns the transaction and commits afterwards.
    """
    report = SeedReport()
    user_repo = factory.user_repository()
    store_repo = factory.store_repository()
    rating_repo = factory.rating_repository()

    users: dict[str, User] = {}
    create_user = CreateUserCommand.from_factory(factory, password_service)
    for seed in SEED_USERS:
        user = await user_repo.find_by_email(seed.email)
        if user is not None:
            report.users_skipped.append(seed.email)
        else:
            user = await create_user.execute(
                name=seed.name,
                email=seed.email,
                password=seed.password,
                address=seed.address,
                role=seed.role,
            )
            report.users_created.append(seed.email)
        users[seed.email] = user

    stores: dict[str, Store] = {}
    create_store = CreateStoreCommand.from_factory(factory)
    for seed in SEED_STORES:
        store = await store_repo.find_by_email(seed.email)
        if store is not None:
            report.stores_skipped.append(seed.email)
        else:
            owner = users[seed.owner_email]
            owner_id = owner.id
            if await store_repo.find_by_owner_id(owner.id) is not None:
                logger.warning(
                    "Seed owner %s already owns a store, creating %s unowned",
                    owner.email,
                    seed.email,
                )
                owner_id = None
            store, _ = await create_store.execute(
                name=seed.name,
                email=seed.email,
                address=seed.address,
                owner_id=owner_id,
            )
            report.stores_created.append(seed.email)
        stores[seed.email] = store

    submit_rating = SubmitRatingCommand.from_factory(factory)
    for rater_email, store_email, score in SEED_RATINGS:
        rater = users[rater_email]
        store = stores[store_email]
        if await rating_repo.find_by_user_and_store(rater.id, store.id):
            report.ratings_skipped += 1
            continue
        await submit_rating.execute(user_id=rater.id, store_id=store.id, score=score)
        report.ratings_created += 1

    logger.info(
        "Seeded %d users, %d stores, %d ratings",
        len(report.users_created),
        len(report.stores_created),
        report.ratings_created,
    )
    return report
