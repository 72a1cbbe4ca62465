"""
Main FastAPI application for the SocialNet API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database import check_database_connection, close_database, init_database
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting SocialNet API...")
    init_database()

    ok, error = await check_database_connection()
    if ok:
        logger.info("Connected to MongoDB", database=settings.database_name)
    else:
        # Keep serving; /health reports the database state
        logger.error("MongoDB not reachable at startup", error=error)

    yield

    logger.info("Shutting down SocialNet API...")
    close_database()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="SocialNet API",
        description="GraphQL API for users, posts, comments and likes",
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
        ok, error = await check_database_connection()
        return {
            "status": "healthy" if ok else "degraded",
            "version": __version__,
            "database": {"connected": ok, "error": error},
        }

    from ..graphql.schema import create_graphql_router, validate_schema

    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app


# Create the main application instance
app = create_app()
