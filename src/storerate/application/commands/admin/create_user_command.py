from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storerate.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserRepository,
    UserRole,
)
from storerate_auth.repositories import UserCredentialRepository
from storerate_auth.services import PasswordHashingService

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateUserCommand:
    """Command for an admin to create a user with any role."""

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        password_service: PasswordHashingService,
    ) -> CreateUserCommand:
        return cls(
            user_repository=factory.user_repository(),
            credential_repository=factory.credential_repository(),
            password_service=password_service,
        )

    async def execute(
        self,
        name: str,
        email: str,
        password: str,
        address: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        user = User.create(name=name, email=email, address=address, role=role)

        existing = await self._user_repo.find_by_email(user.email_obj)
        if existing:
            raise EmailAlreadyExistsError(user.email)

        password_hash = self._password_service.hash(password)

        await self._user_repo.save(user)
        await self._credential_repo.save(user_id=user.id, password_hash=password_hash)

        logger.info("Admin created user %s with role %s", user.email, role.value)
        return user
