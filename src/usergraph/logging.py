"""
Centralized logging configuration using structlog
"""

import base64
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog

# Context variable for request tracking
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)


class RequestContextFilter:
    """Add request context to log records."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        _ = logger, method_name

        request_id = request_id_ctx.get()
        if request_id:
            event_dict["request_id"] = request_id

        return event_dict


def resolve_log_level(debug: bool = False, level: str | None = None) -> int:
    """Map a level name such as ``"warning"`` onto a stdlib level.

    ``debug`` always wins; unknown names fall back to INFO.
    """
    if debug:
        return logging.DEBUG
    if level is None:
        return logging.INFO
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure structlog over stdlib logging.

    Args:
        debug: Colored console output at DEBUG level. Otherwise one JSON
            object per line.
        level: Level name used when ``debug`` is off (default: info).
    """
    logging.basicConfig(
        level=resolve_log_level(debug, level),
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            RequestContextFilter(),
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Generate a compact request ID from a microsecond timestamp plus randomness.

    Format: 14-character urlsafe base64 string (e.g., 'AAYh3kXb9mF2xQ')
    """
    timestamp_us = int(time.time() * 1_000_000)
    random_bytes = secrets.token_bytes(2)

    combined_bytes = timestamp_us.to_bytes(8, byteorder="big") + random_bytes
    return base64.urlsafe_b64encode(combined_bytes).decode("ascii").rstrip("=")


def set_request_context(request_id: str | None = None) -> None:
    """Set request context variables, generating a request ID if none is given."""
    if request_id is None:
        request_id = generate_request_id()

    request_id_ctx.set(request_id)


def clear_request_context() -> None:
    """Clear request context variables."""
    request_id_ctx.set(None)
