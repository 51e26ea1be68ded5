"""Repository over the ``users`` table."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from contextlib import AbstractAsyncContextManager
from uuid import UUID

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Users

SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


class UserRepository:
    """CRUD primitives over ``Users``.

    Every call runs in its own session obtained from ``session_factory``, which
    is expected to commit on a clean exit and roll back on error (see
    ``database.connection.get_async_session``). Returned records are detached
    but fully loaded.
    """

    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    async def find_all(self) -> Sequence[Users]:
        async with self._session_factory() as session:
            result = await session.execute(select(Users))
            return result.scalars().all()

    async def find_by_id(self, user_id: UUID) -> Users | None:
        async with self._session_factory() as session:
            return await session.get(Users, user_id)

    async def exists_by_id(self, user_id: UUID) -> bool:
        async with self._session_factory() as session:
            result = await session.execute(select(exists().where(Users.id == user_id)))
            return bool(result.scalar())

    async def save(self, user: Users) -> Users:
        """Insert a new record or overwrite an existing one.

        A record without an id is inserted and gets its id on flush; a record
        with an id is merged onto the stored row.
        """
        async with self._session_factory() as session:
            if user.id is None:
                session.add(user)
                stored = user
            else:
                stored = await session.merge(user)
            await session.flush()
            return stored

    async def delete_by_id(self, user_id: UUID) -> None:
        async with self._session_factory() as session:
            await session.execute(delete(Users).where(Users.id == user_id))
