"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.user import User


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createUser")
    async def create_user(self, info: strawberry.Info, name: str, email: str) -> User:
        """Create a new user."""
        from ..resolvers.user import create_user

        return await create_user(info, name, email)

    @strawberry.mutation(name="updateUser")
    async def update_user(
        self, info: strawberry.Info, id: str, name: str, email: str
    ) -> User | None:
        """Update an existing user's name and email."""
        from ..resolvers.user import update_user

        return await update_user(info, id, name, email)

    @strawberry.mutation(name="deleteUser")
    async def delete_user(self, info: strawberry.Info, id: str) -> bool:
        """Delete a user."""
        from ..resolvers.user import delete_user

        return await delete_user(info, id)
