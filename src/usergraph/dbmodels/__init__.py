"""
Database models for usergraph (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
Alembic autogenerate diffs, and exposes `target_metadata` for Alembic.
"""

from uuid import UUID, uuid4

from sqlalchemy import MetaData, PrimaryKeyConstraint, String, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Users(Base):
    __tablename__ = "users"
    __table_args__ = (PrimaryKeyConstraint("id", name="users_pkey"),)

    # Assigned at flush; None until the record is first saved
    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    def __init__(self, name: str, email: str, id: UUID | None = None) -> None:
        super().__init__(name=name, email=email)
        if id is not None:
            self.id = id

    def __repr__(self) -> str:
        return f"Users(id={self.id!r}, name={self.name!r}, email={self.email!r})"


# Expose for Alembic
target_metadata = Base.metadata
