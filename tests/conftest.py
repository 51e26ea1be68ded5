"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from usergraph.repositories import UserRepository
from usergraph.services import UserService


@pytest.fixture(scope="function")
def database_url(tmp_path: Path) -> str:
    """URL of a fresh SQLite database file for this test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'usergraph_test.db'}"


@pytest_asyncio.fixture(scope="function")
async def db(database_url: str) -> AsyncGenerator[str, None]:
    """Point the shared connection pool at an empty database with the schema created."""
    from usergraph.database.connection import create_tables, dispose_database, init_database

    await dispose_database()
    init_database(database_url, force_reinit=True)
    await create_tables()

    yield database_url

    await dispose_database()


@pytest.fixture(scope="function")
def user_repository(db: str) -> UserRepository:
    from usergraph.database.connection import get_async_session

    return UserRepository(get_async_session)


@pytest.fixture(scope="function")
def user_service(user_repository: UserRepository) -> UserService:
    return UserService(user_repository)


@pytest_asyncio.fixture(scope="function")
async def client(user_service: UserService) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for the full application, backed by the test database."""
    from usergraph.api.app import create_app

    app = create_app(user_service)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line(  # type: ignore[reportUnknownMemberType]
        "markers", "requires_db: mark test as requiring database connection"
    )
    config.addinivalue_line("markers", "slow: mark test as slow running")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
