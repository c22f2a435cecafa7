"""User directory router (admin only)."""

import logging
from uuid import UUID

from fastapi import APIRouter, Query, status

from storerate.application.commands import CreateUserCommand
from storerate.application.queries import GetUserQuery, ListUsersQuery
from storerate.domain.shared.pagination import PageRequest
from storerate.domain.user import UserFilter, UserRole, UserSort
from storerate.presentation.api.dependencies import (
    AdminUser,
    PasswordService,
    RepoFactory,
    SettingsDep,
)
from storerate.presentation.api.schemas.common import PaginationResponse
from storerate.presentation.api.schemas.users import (
    CreateUserRequest,
    CreateUserResponse,
    UserDetailEnvelope,
    UserListResponse,
    UserResponse,
    UserWithStoreResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="List users",
    responses={
        200: {"description": "Page of users"},
        400: {"description": "Invalid sort field, sort order or paging"},
        403: {"description": "Admin access required"},
    },
)
async def list_users(  # NOQA: PLR0913
    _admin: AdminUser,
    factory: RepoFactory,
    settings: SettingsDep,
    search: str | None = Query(None, description="Matches name, email or address"),
    name: str | None = Query(None),
    email: str | None = Query(None),
    address: str | None = Query(None),
    role: UserRole | None = Query(None),
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_order: str | None = Query(None, alias="sortOrder"),
    page: int = Query(1),
    limit: int | None = Query(None),
) -> UserListResponse:
    """
    Search, filter, sort and paginate users.

    Each entry carries the summary of the store the user owns, if any.
    """
    query = ListUsersQuery.from_factory(factory)
    result = await query.execute(
        user_filter=UserFilter(
            search=search,
            name=name,
            email=email,
            address=address,
            role=role,
        ),
        sort=UserSort.parse(sort_by, sort_order),
        page=PageRequest(
            page=page,
            limit=settings.default_page_size if limit is None else limit,
            max_limit=settings.max_page_size,
        ),
    )
    return UserListResponse(
        users=[UserWithStoreResponse.from_dto(item) for item in result.items],
        pagination=PaginationResponse.from_page(result),
    )


@router.get(
    "/{user_id}",
    summary="Get user details",
    responses={
        200: {"description": "User details"},
        403: {"description": "Admin access required"},
        404: {"description": "User not found"},
    },
)
async def get_user(
    user_id: UUID,
    _admin: AdminUser,
    factory: RepoFactory,
) -> UserDetailEnvelope:
    query = GetUserQuery.from_factory(factory)
    dto = await query.execute(user_id)
    return UserDetailEnvelope(user=UserWithStoreResponse.from_dto(dto))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={
        201: {"description": "User created successfully"},
        400: {"description": "Invalid input or email already registered"},
        403: {"description": "Admin access required"},
    },
)
async def create_user(
    request: CreateUserRequest,
    admin: AdminUser,
    factory: RepoFactory,
    password_service: PasswordService,
) -> CreateUserResponse:
    """Create a user with any role."""
    command = CreateUserCommand.from_factory(factory, password_service)
    try:
        user = await command.execute(
            name=request.name,
            email=request.email,
            password=request.password,
            address=request.address,
            role=request.role,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Admin %s created user %s", admin.email, user.email)
    return CreateUserResponse(
        message="User created successfully",
        user=UserResponse.from_domain(user),
    )
