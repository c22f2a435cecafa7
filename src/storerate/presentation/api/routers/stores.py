"""Store directory router."""

import logging
from uuid import UUID

from fastapi import APIRouter, Query, status

from storerate.application.commands import CreateStoreCommand
from storerate.application.queries import (
    GetOwnedStoreQuery,
    GetStoreQuery,
    ListStoresQuery,
)
from storerate.domain.shared.pagination import PageRequest
from storerate.domain.store import StoreFilter, StoreSort
from storerate.presentation.api.dependencies import (
    AdminUser,
    CurrentUserContext,
    RepoFactory,
    SettingsDep,
    StoreOwnerUser,
)
from storerate.presentation.api.schemas.common import PaginationResponse
from storerate.presentation.api.schemas.stores import (
    CreateStoreRequest,
    CreateStoreResponse,
    StoreDetailResponse,
    StoreEnvelope,
    StoreListItemResponse,
    StoreListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="List stores",
    responses={
        200: {"description": "Page of stores with rating data"},
        400: {"description": "Invalid sort field, sort order or paging"},
    },
)
async def list_stores(  # NOQA: PLR0913
    user_context: CurrentUserContext,
    factory: RepoFactory,
    settings: SettingsDep,
    search: str | None = Query(None, description="Matches name, email or address"),
    name: str | None = Query(None),
    email: str | None = Query(None),
    address: str | None = Query(None),
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_order: str | None = Query(None, alias="sortOrder"),
    page: int = Query(1),
    limit: int | None = Query(None),
) -> StoreListResponse:
    """
    Search, sort and paginate stores.

    Each entry also carries the caller's own rating of the store, if any.
    """
    query = ListStoresQuery.from_factory(factory)
    result = await query.execute(
        store_filter=StoreFilter(
            search=search,
            name=name,
            email=email,
            address=address,
        ),
        sort=StoreSort.parse(sort_by, sort_order),
        page=PageRequest(
            page=page,
            limit=settings.default_page_size if limit is None else limit,
            max_limit=settings.max_page_size,
        ),
        requesting_user_id=user_context.user_id,
    )
    return StoreListResponse(
        stores=[StoreListItemResponse.from_dto(item) for item in result.items],
        pagination=PaginationResponse.from_page(result),
    )


# Declared before /{store_id} so "my-store" is not parsed as an id
@router.get(
    "/my-store",
    summary="Get the caller's own store",
    responses={
        200: {"description": "The owned store with its ratings"},
        403: {"description": "Store owner access required"},
        404: {"description": "You do not own a store"},
    },
)
async def get_my_store(owner: StoreOwnerUser, factory: RepoFactory) -> StoreEnvelope:
    query = GetOwnedStoreQuery.from_factory(factory)
    dto = await query.execute(owner.user_id)
    return StoreEnvelope(store=StoreDetailResponse.from_dto(dto))


@router.get(
    "/{store_id}",
    summary="Get store details",
    responses={
        200: {"description": "Store with owner and ratings"},
        404: {"description": "Store not found"},
    },
)
async def get_store(
    store_id: UUID,
    _user: CurrentUserContext,
    factory: RepoFactory,
) -> StoreEnvelope:
    query = GetStoreQuery.from_factory(factory)
    dto = await query.execute(store_id)
    return StoreEnvelope(store=StoreDetailResponse.from_dto(dto))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a store",
    responses={
        201: {"description": "Store created successfully"},
        400: {"description": "Duplicate store email or owner already has a store"},
        403: {"description": "Admin access required"},
        404: {"description": "Owner not found"},
    },
)
async def create_store(
    request: CreateStoreRequest,
    admin: AdminUser,
    factory: RepoFactory,
) -> CreateStoreResponse:
    """
    Create a store, optionally assigned to an owner.

    The owner is promoted to STORE_OWNER in the same transaction.
    """
    command = CreateStoreCommand.from_factory(factory)
    try:
        store, _owner = await command.execute(
            name=request.name,
            email=request.email,
            address=request.address,
            owner_id=request.owner_id,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Admin %s created store %s", admin.email, store.id)

    dto = await GetStoreQuery.from_factory(factory).execute(store.id)
    return CreateStoreResponse(
        message="Store created successfully",
        store=StoreDetailResponse.from_dto(dto),
    )
