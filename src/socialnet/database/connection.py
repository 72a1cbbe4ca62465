"""
MongoDB connection management
"""

import threading

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from ..config import settings
from ..logging import get_logger

logger = get_logger(__name__)

# Shared client for the whole process
_client: AsyncIOMotorClient | None = None
_database_name: str | None = None
_init_lock = threading.Lock()


def init_database(
    mongo_url: str | None = None,
    client: AsyncIOMotorClient | None = None,
    database_name: str | None = None,
    force_reinit: bool = False,
) -> None:
    """Initialize the shared MongoDB client.

    Args:
        mongo_url: Connection string, defaults to ``settings.mongo_url``
        client: Pre-built client to install instead of creating one
        database_name: Database to use, defaults to ``settings.database_name``
        force_reinit: Replace an existing client
    """
    global _client, _database_name

    if _client is not None and not force_reinit:
        return

    with _init_lock:
        if _client is not None and not force_reinit:
            return

        if client is None:
            url = mongo_url or settings.mongo_url
            client = AsyncIOMotorClient(url)
            logger.info("MongoDB client created", database=database_name or settings.database_name)

        _client = client
        _database_name = database_name or settings.database_name


def get_client() -> AsyncIOMotorClient:
    if _client is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")
    return _client


def get_database() -> AsyncIOMotorDatabase:
    """Get the configured database from the shared client."""
    return get_client()[_database_name or settings.database_name]


def close_database() -> None:
    """Close the shared client and forget it."""
    global _client
    if _client is not None:
        _client.close()
        logger.info("MongoDB client closed")
    reset_database()


def reset_database() -> None:
    """Drop the shared client reference (for tests)."""
    global _client, _database_name
    _client = None
    _database_name = None


async def check_database_connection() -> tuple[bool, str | None]:
    """
    Ping the database server.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    if _client is None:
        return False, "Database client not initialized"

    try:
        await get_database().command("ping")
        return True, None
    except PyMongoError as e:
        return False, f"Cannot reach MongoDB ({type(e).__name__}): {e}"
