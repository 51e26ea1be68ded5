#!/usr/bin/env python3
"""
CLI entry point for usergraph database migrations.
"""

import sys
from collections.abc import Callable
from pathlib import Path

import click

from alembic import command
from alembic.config import Config
from usergraph import __version__
from usergraph.logging import configure_logging, get_logger

logger = get_logger(__name__)

# alembic.ini and alembic/ live at the project root, next to src/
PROJECT_DIR = Path(__file__).resolve().parents[3]


def get_alembic_config() -> Config:
    """Load alembic.ini from the project root."""
    alembic_ini = PROJECT_DIR / "alembic.ini"
    if not alembic_ini.exists():
        raise FileNotFoundError(f"alembic.ini not found at {alembic_ini}")
    return Config(str(alembic_ini))


def run_alembic(action: str, operation: Callable[[Config], None], **log_fields) -> None:
    """Run one alembic command, logging the outcome and exiting 1 on failure."""
    try:
        config = get_alembic_config()
        logger.info(f"Database {action} started", **log_fields)
        operation(config)
        logger.info(f"Database {action} completed", **log_fields)
    except Exception as e:
        logger.error(f"Database {action} failed", error=str(e), **log_fields)
        sys.exit(1)


@click.group()
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.version_option(version=__version__, prog_name="usergraph-migrate")
def main(log_level: str) -> None:
    """usergraph database migration management."""
    configure_logging(debug=(log_level == "debug"), level=log_level)


@main.command()
@click.argument("revision", default="head")
def upgrade(revision: str) -> None:
    """Upgrade database to a revision (default: head)."""
    run_alembic("upgrade", lambda config: command.upgrade(config, revision), revision=revision)


@main.command()
@click.argument("revision", default="-1")
def downgrade(revision: str) -> None:
    """Downgrade database to a revision (default: -1)."""
    run_alembic(
        "downgrade", lambda config: command.downgrade(config, revision), revision=revision
    )


@main.command()
def current() -> None:
    """Show current database revision."""
    run_alembic("revision lookup", command.current)


@main.command()
def history() -> None:
    """Show migration history."""
    run_alembic("history listing", command.history)


if __name__ == "__main__":
    main()
