# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import UserFields

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
COUNTERS_COLLECTION = "counters"

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    # Explicit timeout so an unreachable server fails the request instead of hanging
    _mongo_client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
    )
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()[USERS_COLLECTION]


def get_counter_collection() -> AsyncIOMotorCollection:
    """
    Get the collection holding id sequences

    Returns:
        MongoDB collection for counters
    """
    return get_database()[COUNTERS_COLLECTION]


async def ensure_user_indexes(user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
    """
    Create the unique indexes on username and email.

    These indexes are the authoritative uniqueness guard; the use case
    pre-checks only produce friendlier errors in the common case.

    Args:
        user_collection: Collection to index (defaults to the users collection)
    """
    collection = user_collection if user_collection is not None else get_user_collection()
    for field in UserFields.UNIQUE:
        await collection.create_index([(field, ASCENDING)], unique=True, name=f"{field}_unique")
    logger.info(f"Unique indexes ensured on {', '.join(UserFields.UNIQUE)}")


def close_connection() -> None:
    """Close the MongoDB client, if one was opened"""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB client closed")
    _mongo_client = None
    _mongo_database = None
