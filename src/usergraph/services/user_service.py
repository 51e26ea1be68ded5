"""Business logic for users."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import UUID

from ..dbmodels import Users
from ..logging import get_logger
from ..repositories import UserRepository
from ..results import Err, ErrorKind, Ok, Result

logger = get_logger(__name__)


class UserService:
    """Orchestrates ``UserRepository`` calls for the API layer.

    The only rule enforced here is that an update needs an existing record.
    Identifiers arrive already parsed; storage errors propagate unchanged.
    """

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    async def get_all_users(self) -> Sequence[Users]:
        return await self.repository.find_all()

    async def get_user_by_id(self, user_id: UUID) -> Users | None:
        return await self.repository.find_by_id(user_id)

    async def create_user(self, name: str, email: str) -> Users:
        user = await self.repository.save(Users(name=name, email=email))
        logger.info("User created", user_id=str(user.id))
        return user

    async def update_user(self, user_id: UUID, name: str, email: str) -> Result[Users]:
        user = await self.repository.find_by_id(user_id)
        if user is None:
            logger.info("User not found for update", user_id=str(user_id))
            return Err(ErrorKind.NOT_FOUND)

        user.name = name
        user.email = email
        user = await self.repository.save(user)
        logger.info("User updated", user_id=str(user_id))
        return Ok(user)

    async def delete_user(self, user_id: UUID) -> bool:
        if not await self.repository.exists_by_id(user_id):
            return False

        await self.repository.delete_by_id(user_id)
        logger.info("User deleted", user_id=str(user_id))
        return True
