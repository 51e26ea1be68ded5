"""
Errors surfaced to GraphQL clients
"""

from ..results import ErrorKind


class UserOperationError(RuntimeError):
    """Raised by resolvers to report a failed operation in the response errors."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind
