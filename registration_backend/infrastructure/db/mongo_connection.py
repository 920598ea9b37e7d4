# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo.errors import ConfigurationError, PyMongoError

# Local application imports
from ...core.config import get_settings
from ...domain.exceptions import ConnectivityError

logger = logging.getLogger(__name__)


# Global MongoDB connection instances, owned by connect_to_mongo/close_mongo_connection
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_client() -> AsyncIOMotorClient:
    """
    Get the process-wide MongoDB client, creating it on first use

    Motor connects lazily, so creating the client does not touch the network.

    Returns:
        AsyncIOMotorClient instance

    Raises:
        ConnectivityError: If no connection string is configured or it is malformed
    """
    global _mongo_client

    if _mongo_client is not None:
        return _mongo_client

    settings = get_settings()
    if not settings.mongo_uri:
        raise ConnectivityError("MONGO_URI is not set; cannot connect to MongoDB")

    try:
        _mongo_client = AsyncIOMotorClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        )
    except ConfigurationError as e:
        raise ConnectivityError(f"Invalid MongoDB connection string: {str(e)}") from e
    return _mongo_client


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    _mongo_database = get_client()[get_settings().mongo_database_name]
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()[get_settings().users_collection_name]


async def connect_to_mongo() -> AsyncIOMotorDatabase:
    """
    Open the client and check the server answers a ping

    Returns:
        MongoDB database instance

    Raises:
        ConnectivityError: If the client cannot be created or the server is unreachable
    """
    database = get_database()
    try:
        await get_client().admin.command("ping")
    except PyMongoError as e:
        raise ConnectivityError(f"MongoDB ping failed: {str(e)}") from e
    return database


def close_mongo_connection() -> None:
    """Close the client (if any) and forget it"""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB connection closed")

    _mongo_client = None
    _mongo_database = None
