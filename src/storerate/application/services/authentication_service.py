"""Authentication service for signup, login and password changes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from storerate.domain.user import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserNotFoundError,
    UserRole,
)
from storerate_auth import (
    InvalidCredentialsError,
    JWTService,
    PasswordHashingService,
    TokenPayload,
)
from storerate_auth.repositories import UserCredentialRepository

if TYPE_CHECKING:
    from storerate.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates storerate_auth infrastructure (password hashing, JWT tokens)
    with the User domain to provide:
    - Self-service signup (always role USER)
    - Login with password
    - Password change
    """

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    def issue_token(self, user: User) -> str:
        return self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
            role=user.role.value,
        )

    async def signup(
        self,
        name: str,
        email: str,
        password: str,
        address: str,
    ) -> tuple[User, str]:
        user = User.create(name=name, email=email, address=address, role=UserRole.USER)

        if await self._user_repo.exists_by_email(user.email_obj):
            raise EmailAlreadyExistsError(user.email)

        password_hash = self._password_service.hash(password)
        await self._user_repo.save(user)
        await self._credential_repo.save(user_id=user.id, password_hash=password_hash)

        logger.info("User registered: %s", user.email)
        return user, self.issue_token(user)

    async def login(self, email: str, password: str) -> tuple[User, str]:
        try:
            user = await self._user_repo.find_by_email(email)
        except InvalidEmailError as e:
            raise InvalidCredentialsError from e
        if user is None:
            raise InvalidCredentialsError

        credential = await self._credential_repo.find_by_user_id(user.id)
        if credential is None:
            raise InvalidCredentialsError

        if not self._password_service.verify(password, credential.password_hash):
            raise InvalidCredentialsError

        logger.info("User logged in: %s", user.email)
        return user, self.issue_token(user)

    async def change_password(
        self,
        user_id: UUID,
        current_password: str,
        new_password: str,
    ) -> None:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        credential = await self._credential_repo.find_by_user_id(user_id)
        if credential is None or not self._password_service.verify(
            current_password,
            credential.password_hash,
        ):
            msg = "Current password is incorrect"
            raise InvalidCredentialsError(msg)

        new_hash = self._password_service.hash(new_password)
        await self._credential_repo.save(user_id=user_id, password_hash=new_hash)

        logger.info("Password changed for user: %s", user_id)

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)
