#!/usr/bin/env python3
"""
Main CLI entry point for the SocialNet API server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from socialnet import __version__
from socialnet.config import settings
from socialnet.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="socialnet")
def cli() -> None:
    """SocialNet CLI - run the GraphQL server and check the database."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, help="Host to bind to")
@click.option("--port", default=settings.api_port, type=int, help="Port to bind to")
@click.option(
    "--reload",
    is_flag=True,
    default=settings.api_reload,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default=settings.log_level.lower(),
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the SocialNet API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting SocialNet API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app module reads settings at import time, also in reloader processes
    if log_level == "debug":
        os.environ["SOCIALNET_DEBUG"] = "true"
    os.environ["SOCIALNET_LOG_LEVEL"] = log_level

    try:
        uvicorn.run(
            "socialnet.api.app:app",
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


@cli.command()
@click.option("--mongo-url", default=None, help="MongoDB URL (defaults to SOCIALNET_MONGO_URL)")
def ping(mongo_url: str | None) -> None:
    """Check that MongoDB is reachable."""
    from socialnet.database import check_database_connection, close_database, init_database

    configure_logging()

    async def do_ping() -> tuple[bool, str | None]:
        init_database(mongo_url, force_reinit=True)
        try:
            return await check_database_connection()
        finally:
            close_database()

    ok, error = asyncio.run(do_ping())
    if not ok:
        click.echo(f"✗ {error}", err=True)
        sys.exit(1)

    click.echo(f"✓ MongoDB reachable (database: {settings.database_name})")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
