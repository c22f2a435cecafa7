"""SQLAlchemy implementation of StoreRepository."""

import logging
from collections.abc import Iterable
from typing import Any, Union
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storerate.domain.shared.email import Email
from storerate.domain.shared.pagination import PageRequest
from storerate.domain.shared.time import ensure_tz_aware
from storerate.domain.store import (
    OwnerAlreadyHasStoreError,
    Store,
    StoreEmailAlreadyExistsError,
    StoreFilter,
    StoreRepository,
    StoreSort,
    StoreSortField,
)
from storerate.infrastructure.persistence.sqlalchemy.models import StoreModel
from storerate.infrastructure.persistence.sqlalchemy.repositories.listing import (
    any_contains_ci,
    contains_ci,
    normalize_term,
    order_by_clause,
)

logger = logging.getLogger(__name__)

_SORT_COLUMNS = {
    StoreSortField.NAME: StoreModel.name,
    StoreSortField.EMAIL: StoreModel.email,
    StoreSortField.ADDRESS: StoreModel.address,
    StoreSortField.CREATED_AT: StoreModel.created_at,
}


class StoreRepositorySQLAlchemy(StoreRepository):
    """SQLAlchemy implementation of the StoreRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, store_id: UUID) -> Store | None:
        model = await self._find_model_by_id(store_id)
        return self._map_to_domain(model) if model else None

    async def find_by_ids(self, store_ids: Iterable[UUID]) -> dict[UUID, Store]:
        ids = set(store_ids)
        if not ids:
            return {}

        stmt = select(StoreModel).where(StoreModel.id.in_(ids))
        result = await self._session.execute(stmt)
        return {model.id: self._map_to_domain(model) for model in result.scalars()}

    async def find_by_email(self, email: Union[str, Email]) -> Store | None:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(StoreModel).where(StoreModel.email == email_value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_by_owner_id(self, owner_id: UUID) -> Store | None:
        stmt = select(StoreModel).where(StoreModel.owner_id == owner_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_by_owner_ids(self, owner_ids: Iterable[UUID]) -> dict[UUID, Store]:
        ids = set(owner_ids)
        if not ids:
            return {}

        stmt = select(StoreModel).where(StoreModel.owner_id.in_(ids))
        result = await self._session.execute(stmt)
        return {
            model.owner_id: self._map_to_domain(model)
            for model in result.scalars()
            if model.owner_id is not None
        }

    async def save(self, store: Store) -> None:
        existing = await self._find_model_by_id(store.id)

        try:
            if existing:
                self._update_model(existing, store)
                logger.debug("Updated store: %s", store.id)
            else:
                self._session.add(self._map_to_model(store))
                logger.info("Created store: %s (name: %s)", store.id, store.name)

            await self._session.flush()
        except IntegrityError as e:
            message = str(e).lower()
            if "unique" not in message and "duplicate" not in message:
                raise
            if "owner_id" in message:
                raise OwnerAlreadyHasStoreError(store.owner_id or "") from e
            raise StoreEmailAlreadyExistsError(store.email) from e

    async def search(
        self,
        store_filter: StoreFilter,
        sort: StoreSort,
        page: PageRequest,
    ) -> tuple[list[Store], int]:
        conditions = self._build_conditions(store_filter)

        count_stmt = select(func.count()).select_from(StoreModel).where(*conditions)
        total = (await self._session.execute(count_stmt)).scalar_one()
        if page.offset >= total:
            return [], total

        stmt = (
            select(StoreModel)
            .where(*conditions)
            .order_by(
                order_by_clause(_SORT_COLUMNS[sort.field], sort.order),
                StoreModel.id,
            )
            .offset(page.offset)
            .limit(page.limit)
        )
        result = await self._session.execute(stmt)
        stores = [self._map_to_domain(model) for model in result.scalars()]
        return stores, total

    async def count(self) -> int:
        stmt = select(func.count()).select_from(StoreModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    def _build_conditions(self, store_filter: StoreFilter) -> list[Any]:
        conditions: list[Any] = []

        search = normalize_term(store_filter.search)
        if search:
            conditions.append(
                any_contains_ci(
                    [StoreModel.name, StoreModel.email, StoreModel.address],
                    search,
                ),
            )

        for column, value in (
            (StoreModel.name, store_filter.name),
            (StoreModel.email, store_filter.email),
            (StoreModel.address, store_filter.address),
        ):
            term = normalize_term(value)
            if term:
                conditions.append(contains_ci(column, term))

        return conditions

    async def _find_model_by_id(self, store_id: UUID) -> StoreModel | None:
        stmt = select(StoreModel).where(StoreModel.id == store_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: StoreModel) -> Store:
        return Store.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            address=model.address,
            owner_id=model.owner_id,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, store: Store) -> StoreModel:
        return StoreModel(
            id=store.id,
            name=store.name,
            email=store.email,
            address=store.address,
            owner_id=store.owner_id,
            created_at=store.created_at,
            updated_at=store.updated_at,
        )

    def _update_model(self, model: StoreModel, store: Store) -> None:
        model.name = store.name
        model.email = store.email
        model.address = store.address
        model.owner_id = store.owner_id
        model.updated_at = store.updated_at
