"""Authentication router for signup, login, and password management."""

import logging

from fastapi import APIRouter, HTTPException, status

from storerate.domain.user import UserNotFoundError
from storerate.presentation.api.dependencies import (
    AuthService,
    CurrentUser,
    DBSession,
)
from storerate.presentation.api.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    SignupRequest,
)
from storerate.presentation.api.schemas.common import MessageResponse
from storerate.presentation.api.schemas.users import UserEnvelope, UserResponse
from storerate_auth import InvalidCredentialsError, WeakPasswordError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Invalid input or email already registered"},
    },
)
async def signup(
    request: SignupRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    """
    Self-service registration.

    New accounts always get the USER role. Returns a bearer token so the
    client is signed in right away.
    """
    try:
        user, token = await auth_service.signup(
            name=request.name,
            email=request.email,
            password=request.password,
            address=request.address,
        )
        await session.commit()
    except WeakPasswordError as e:
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e
    except Exception:
        await session.rollback()
        raise

    return AuthResponse(
        message="User registered successfully",
        token=token,
        user=UserResponse.from_domain(user),
    )


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid email or password"},
    },
)
async def login(request: LoginRequest, auth_service: AuthService) -> AuthResponse:
    """Authenticate with email and password."""
    try:
        user, token = await auth_service.login(
            email=request.email,
            password=request.password,
        )
    except InvalidCredentialsError as e:
        logger.info("Failed login attempt for: %s", request.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        ) from e

    return AuthResponse(
        message="Login successful",
        token=token,
        user=UserResponse.from_domain(user),
    )


@router.put(
    "/password",
    summary="Change password",
    responses={
        200: {"description": "Password updated"},
        400: {"description": "New password does not meet requirements"},
        401: {"description": "Current password is incorrect"},
        404: {"description": "User not found"},
    },
)
async def change_password(
    request: ChangePasswordRequest,
    current_user: CurrentUser,
    auth_service: AuthService,
    session: DBSession,
) -> MessageResponse:
    try:
        await auth_service.change_password(
            user_id=current_user.id,
            current_password=request.current_password,
            new_password=request.new_password,
        )
        await session.commit()
    except InvalidCredentialsError as e:
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        ) from e
    except WeakPasswordError as e:
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e
    except UserNotFoundError:
        await session.rollback()
        raise

    return MessageResponse(message="Password updated successfully")


@router.get(
    "/profile",
    summary="Get current user profile",
    responses={
        200: {"description": "Current user profile"},
        401: {"description": "Not authenticated"},
    },
)
async def get_profile(current_user: CurrentUser) -> UserEnvelope:
    """Get the profile of the authenticated user."""
    return UserEnvelope(user=UserResponse.from_domain(current_user))
