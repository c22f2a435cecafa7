"""SQLAlchemy implementation of UserRepository."""

import logging
from collections.abc import Iterable
from typing import Any, Union
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storerate.domain.shared.pagination import PageRequest
from storerate.domain.shared.time import ensure_tz_aware
from storerate.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserFilter,
    UserRepository,
    UserSort,
    UserSortField,
)
from storerate.infrastructure.persistence.sqlalchemy.models import UserModel
from storerate.infrastructure.persistence.sqlalchemy.repositories.listing import (
    any_contains_ci,
    contains_ci,
    normalize_term,
    order_by_clause,
)

logger = logging.getLogger(__name__)

_SORT_COLUMNS = {
    UserSortField.NAME: UserModel.name,
    UserSortField.EMAIL: UserModel.email,
    UserSortField.ADDRESS: UserModel.address,
    UserSortField.ROLE: UserModel.role,
    UserSortField.CREATED_AT: UserModel.created_at,
}


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_ids(self, user_ids: Iterable[UUID]) -> dict[UUID, User]:
        ids = set(user_ids)
        if not ids:
            return {}

        stmt = select(UserModel).where(UserModel.id.in_(ids))
        result = await self._session.execute(stmt)
        return {model.id: self._map_to_domain(model) for model in result.scalars()}

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(UserModel.email == email_value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        user = await self.find_by_email(email)
        return user is not None

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                model = self._map_to_model(user)
                self._session.add(model)
                logger.info("Created user: %s (email: %s)", user.id, user.email)

            await self._session.flush()
        except IntegrityError as e:
            if "unique" in str(e).lower():
                raise EmailAlreadyExistsError(user.email) from e
            raise

    async def search(
        self,
        user_filter: UserFilter,
        sort: UserSort,
        page: PageRequest,
    ) -> tuple[list[User], int]:
        conditions = self._build_conditions(user_filter)

        count_stmt = select(func.count()).select_from(UserModel).where(*conditions)
        total = (await self._session.execute(count_stmt)).scalar_one()
        if page.offset >= total:
            return [], total

        stmt = (
            select(UserModel)
            .where(*conditions)
            .order_by(
                order_by_clause(_SORT_COLUMNS[sort.field], sort.order),
                UserModel.id,
            )
            .offset(page.offset)
            .limit(page.limit)
        )
        result = await self._session.execute(stmt)
        users = [self._map_to_domain(model) for model in result.scalars()]
        return users, total

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    def _build_conditions(self, user_filter: UserFilter) -> list[Any]:
        conditions: list[Any] = []

        search = normalize_term(user_filter.search)
        if search:
            conditions.append(
                any_contains_ci(
                    [UserModel.name, UserModel.email, UserModel.address],
                    search,
                ),
            )

        for column, value in (
            (UserModel.name, user_filter.name),
            (UserModel.email, user_filter.email),
            (UserModel.address, user_filter.address),
        ):
            term = normalize_term(value)
            if term:
                conditions.append(contains_ci(column, term))

        if user_filter.role is not None:
            conditions.append(UserModel.role == user_filter.role.value)

        return conditions

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            address=model.address,
            role=model.role,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            address=user.address,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email
        model.address = user.address
        model.role = user.role.value
        model.updated_at = user.updated_at
