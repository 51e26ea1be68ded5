"""
Main FastAPI application for the usergraph service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database.connection import check_database_connection, get_async_session, init_database
from ..database.seed_data import seed_sample_users
from ..graphql.schema import create_graphql_router, validate_schema
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..repositories import UserRepository
from ..services import UserService

logger = get_logger(__name__)


def create_app(user_service: UserService | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        user_service: Service backing the GraphQL resolvers. Defaults to one
            built over the shared database connection pool.
    """
    if user_service is None:
        user_service = UserService(UserRepository(get_async_session))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting usergraph API...")
        init_database()

        ok, error = await check_database_connection()
        if not ok:
            logger.error("Database connection check failed", error=error)

        if settings.seed_sample_data:
            await seed_sample_users(user_service.repository)

        yield

        logger.info("Shutting down usergraph API...")

    app = FastAPI(
        title="usergraph API",
        description="User management over GraphQL",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        logger.info("Validating GraphQL schema...")
        validate_schema()
        app.include_router(create_graphql_router(user_service, graphiql=settings.debug))
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


def get_app() -> FastAPI:
    """Application factory for uvicorn (``--factory``)."""
    configure_logging(debug=settings.debug, level=settings.log_level)
    return create_app()
