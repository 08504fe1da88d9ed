"""
Document store connection management
"""

import os
import threading

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from ..config import settings
from ..graphql.context import StoreContext
from ..hashing import PasswordHasher, get_hasher
from ..logging import get_logger

logger = get_logger(__name__)

# Shared client; Motor pools connections internally
_client: AsyncIOMotorClient | None = None
_database_name: str | None = None
_hasher: PasswordHasher | None = None
_initialized = False
_init_lock = threading.Lock()


def get_mongo_url() -> str:
    """Get the MongoDB URL, checking environment variables first for test compatibility."""
    return os.getenv("POSTBOARD_MONGO_URL") or settings.mongo_url


def reset_database() -> None:
    """Reset the shared client (for tests)."""
    global _client, _database_name, _hasher, _initialized
    _client = None
    _database_name = None
    _hasher = None
    _initialized = False


def init_database(
    mongo_url: str | None = None,
    database_name: str | None = None,
    client: AsyncIOMotorClient | None = None,
    force_reinit: bool = False,
) -> None:
    """Initialize the shared MongoDB client.

    Args:
        mongo_url: Connection string; defaults to settings
        database_name: Database to use; defaults to settings
        client: Pre-built client (e.g. an in-memory mock for tests)
        force_reinit: Replace an already initialized client
    """
    global _client, _database_name, _hasher, _initialized

    if _initialized and not force_reinit and client is None:
        return

    with _init_lock:
        if _initialized and not force_reinit and client is None:
            return

        if client is None:
            url = mongo_url or get_mongo_url()
            client = AsyncIOMotorClient(
                url,
                serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
            )
            logger.info("MongoDB client created", mongo_url=url)

        _client = client
        _database_name = database_name or settings.mongo_database
        _hasher = get_hasher(settings.password_hasher)
        _initialized = True
        logger.info("Database initialized", database=_database_name)


def get_client() -> AsyncIOMotorClient:
    """Get the shared MongoDB client."""
    if _client is None:
        init_database()
    assert _client is not None
    return _client


def get_database() -> AsyncIOMotorDatabase:
    """Get the configured database handle."""
    client = get_client()
    return client[_database_name or settings.mongo_database]


def build_store_context(hasher: PasswordHasher | None = None) -> StoreContext:
    """Bundle collection handles for a single request.

    The hasher is built once by ``init_database`` and shared across requests.
    """
    db = get_database()
    return StoreContext(
        users=db[settings.users_collection],
        posts=db[settings.posts_collection],
        comments=db[settings.comments_collection],
        hasher=hasher or _hasher,
    )


async def test_database_connection() -> tuple[bool, str | None]:
    """
    Ping the server and return a helpful error message on failure.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    if _client is None:
        return False, "Database client not initialized"

    try:
        await _client.admin.command("ping")
        return True, None
    except Exception as e:
        error_str = str(e)
        error_type = type(e).__name__

        if "ServerSelectionTimeoutError" in error_type or "Connection refused" in error_str:
            return False, (
                f"Cannot connect to MongoDB server: {error_str}\n"
                f"The server appears to be down or unreachable.\n"
                f"Please check that MongoDB is running at {get_mongo_url()}."
            )
        elif "Authentication failed" in error_str:
            return False, (
                f"MongoDB authentication failed: {error_str}\n"
                f"Please check the credentials in POSTBOARD_MONGO_URL."
            )
        else:
            return False, f"Database connection error ({error_type}): {error_str}"
