from .mongo_connection import (
    get_client,
    get_database,
    get_user_collection,
    connect_to_mongo,
    close_mongo_connection,
)
from .mongo_user_repository import MongoUserRepository

__all__ = [
    "get_client",
    "get_database",
    "get_user_collection",
    "connect_to_mongo",
    "close_mongo_connection",
    "MongoUserRepository",
]
