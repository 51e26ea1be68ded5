"""
Reusable seed data functions for database initialization.
"""

from __future__ import annotations

from ..dbmodels import Users
from ..logging import get_logger
from ..repositories import UserRepository

logger = get_logger(__name__)

SAMPLE_USERS: list[tuple[str, str]] = [
    ("John Doe", "john.doe@example.com"),
    ("Jane Smith", "jane.smith@example.com"),
    ("Bob Johnson", "bob.johnson@example.com"),
]


async def seed_sample_users(repository: UserRepository) -> int:
    """
    Insert the sample users into an empty ``users`` table.

    Nothing is written if any user already exists, so this is safe to call on
    every startup.

    Returns:
        Number of users created
    """
    existing = await repository.find_all()
    if existing:
        logger.debug("Skipping sample data, users already present", count=len(existing))
        return 0

    for name, email in SAMPLE_USERS:
        user = await repository.save(Users(name=name, email=email))
        logger.debug("Seeded sample user", user_id=str(user.id), email=email)

    logger.info("Sample users seeded", count=len(SAMPLE_USERS))
    return len(SAMPLE_USERS)
