#!/usr/bin/env python3
"""
Main CLI entry point for the usergraph server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from usergraph import __version__
from usergraph.config import settings
from usergraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="usergraph")
def cli() -> None:
    """usergraph CLI - run the server and manage the database."""
    pass


@cli.command()
@click.option(
    "--host",
    default=lambda: settings.api_host,
    show_default="USERGRAPH_API_HOST or 0.0.0.0",
    help="Host to bind to",
)
@click.option(
    "--port",
    default=lambda: settings.api_port,
    type=int,
    show_default="USERGRAPH_API_PORT or 8080",
    help="Port to bind to",
)
@click.option(
    "--reload/--no-reload",
    default=lambda: settings.api_reload,
    show_default="USERGRAPH_API_RELOAD or off",
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default=lambda: settings.log_level.lower(),
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    show_default="USERGRAPH_LOG_LEVEL or info",
    help="Log level",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the usergraph API server."""
    log_level = log_level.lower()
    debug = log_level == "debug"

    # get_app() reads these in this process; the env copy covers reload subprocesses
    settings.debug = debug
    settings.log_level = log_level
    os.environ["USERGRAPH_DEBUG"] = "true" if debug else "false"
    os.environ["USERGRAPH_LOG_LEVEL"] = log_level

    configure_logging(debug=debug, level=log_level)
    logger.info("Starting usergraph API server", host=host, port=port, reload=reload)

    try:
        uvicorn.run(
            "usergraph.api.app:get_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
def init_db() -> None:
    """Create the database tables from the ORM models."""
    from usergraph.database.connection import create_tables, dispose_database

    configure_logging(level=settings.log_level)

    async def do_init():
        try:
            await create_tables()
        finally:
            await dispose_database()

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Failed to create tables", error=str(e))
        click.echo(f"✗ Error creating tables: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Database tables created")


@cli.command()
def seed() -> None:
    """Load the sample users into an empty database."""
    from usergraph.database.connection import dispose_database, get_async_session
    from usergraph.database.seed_data import seed_sample_users
    from usergraph.repositories import UserRepository

    configure_logging(level=settings.log_level)

    async def do_seed() -> int:
        try:
            return await seed_sample_users(UserRepository(get_async_session))
        finally:
            await dispose_database()

    try:
        created = asyncio.run(do_seed())
    except Exception as e:
        logger.error("Failed to seed sample users", error=str(e))
        click.echo(f"✗ Error seeding sample users: {e}", err=True)
        sys.exit(1)

    if created:
        click.echo(f"✓ Created {created} sample users")
    else:
        click.echo("Users already present, nothing to seed")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
