"""
User GraphQL type definitions
"""

import strawberry

from ...dbmodels import Users


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID | None
    name: str
    email: str

    @classmethod
    def from_model(cls, user: Users) -> "User":
        return cls(
            id=strawberry.ID(str(user.id)) if user.id is not None else None,
            name=user.name,
            email=user.email,
        )
