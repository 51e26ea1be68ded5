"""Data access for usergraph records."""

from .user import SessionFactory, UserRepository

__all__ = ["SessionFactory", "UserRepository"]
