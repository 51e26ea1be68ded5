"""
Tagged result values returned by the service layer.

Operations that can fail for a user-visible reason return ``Ok(value)`` or
``Err(kind)`` instead of raising, and the API layer decides how each kind is
reported to the client.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """User-visible failure conditions. The value is the client-facing message."""

    NOT_FOUND = "User not found"
    INVALID_ID = "Invalid identifier format"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    kind: ErrorKind


Result = Ok[T] | Err
