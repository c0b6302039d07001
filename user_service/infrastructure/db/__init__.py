from .mongo_connection import (
    get_database,
    get_user_collection,
    get_counter_collection,
    ensure_user_indexes,
    close_connection,
)
from .mongo_user_repository import MongoUserRepository
from .memory_user_repository import InMemoryUserRepository

__all__ = [
    "get_database",
    "get_user_collection",
    "get_counter_collection",
    "ensure_user_indexes",
    "close_connection",
    "MongoUserRepository",
    "InMemoryUserRepository",
]
