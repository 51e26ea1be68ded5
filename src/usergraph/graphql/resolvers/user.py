from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...results import Err
from ..errors import UserOperationError
from ..ids import parse_user_id

if TYPE_CHECKING:
    from ...services import UserService
    from ..types.user import User

logger = get_logger(__name__)


def get_user_service(info: strawberry.Info) -> UserService:
    return info.context["user_service"]


# Query resolvers
async def resolve_users(info: strawberry.Info) -> list[User]:
    from ..types.user import User as UserType

    users = await get_user_service(info).get_all_users()
    return [UserType.from_model(user) for user in users]


async def resolve_user_by_id(info: strawberry.Info, id: str) -> User | None:
    """
    Resolve a user by its textual ID.

    A malformed ID is reported the same way as an unknown one: null, no error.
    """
    parsed = parse_user_id(id)
    if isinstance(parsed, Err):
        logger.debug("Ignoring malformed user id", user_id=id)
        return None

    user = await get_user_service(info).get_user_by_id(parsed.value)
    if user is None:
        return None

    from ..types.user import User as UserType

    return UserType.from_model(user)


# Mutation resolvers
async def create_user(info: strawberry.Info, name: str, email: str) -> User:
    from ..types.user import User as UserType

    user = await get_user_service(info).create_user(name, email)
    return UserType.from_model(user)


async def update_user(info: strawberry.Info, id: str, name: str, email: str) -> User:
    """
    Update a user's name and email.

    Unlike the other resolvers, a malformed ID is an error here, as is an
    unknown one.
    """
    parsed = parse_user_id(id)
    if isinstance(parsed, Err):
        raise UserOperationError(parsed.kind)

    result = await get_user_service(info).update_user(parsed.value, name, email)
    if isinstance(result, Err):
        raise UserOperationError(result.kind)

    from ..types.user import User as UserType

    return UserType.from_model(result.value)


async def delete_user(info: strawberry.Info, id: str) -> bool:
    """Delete a user. Malformed and unknown IDs both yield False."""
    parsed = parse_user_id(id)
    if isinstance(parsed, Err):
        logger.debug("Ignoring malformed user id", user_id=id)
        return False

    return await get_user_service(info).delete_user(parsed.value)
