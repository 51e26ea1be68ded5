"""
Root GraphQL query definitions
"""

import strawberry

from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def users(self, info: strawberry.Info) -> list[User]:
        """Get all users."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info)

    @strawberry.field
    async def user(self, info: strawberry.Info, id: str) -> User | None:
        """Get a user by ID. Returns null for unknown or malformed IDs."""
        from ..resolvers.user import resolve_user_by_id

        return await resolve_user_by_id(info, id)
