"""
Database module - MongoDB connection and lifecycle.
"""
from smartclass.db.mongodb import (
    COLLECTIONS,
    close_mongo,
    connect_mongo,
    get_collection,
    get_db,
    check_mongo_connection,
)

__all__ = [
    "COLLECTIONS",
    "close_mongo",
    "connect_mongo",
    "get_collection",
    "get_db",
    "check_mongo_connection",
]
