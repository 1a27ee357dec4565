"""
MongoDB Connection Utility

MongoDB stores every SmartClass entity:
- users (credentials for students and admins)
- faculty, grades, classrooms, labs, subjects
- schedules (the timetable), swap requests, leaves, feedback

Each entity lives in its own collection. Nothing references anything
else by ObjectId; cross-entity fields (Schedule.faculty etc.) are plain
strings.

Lifecycle:
- connect_mongo() on app startup
- close_mongo() on app shutdown
- get_db() is the FastAPI dependency that hands the database to routes
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.collection import Collection

from smartclass.core.config import get_settings

logger = logging.getLogger(__name__)

# Process-wide client (connection pooling handled internally by pymongo)
_client: Optional[MongoClient] = None


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "faculty": "faculties",
    "grades": "grades",
    "classrooms": "classrooms",
    "labs": "labs",
    "subjects": "subjects",
    "schedules": "schedules",
    "swaps": "swaps",
    "leaves": "leaves",
    "feedback": "feedbacks",
}


def connect_mongo() -> MongoClient:
    """Open the MongoDB client. Called once on startup."""
    global _client
    if _client is None:
        settings = get_settings()
        _client = MongoClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=settings.mongodb_timeout_ms
        )
        logger.info("MongoDB client opened for database '%s'", settings.mongodb_db)
    return _client


def close_mongo() -> None:
    """Close the MongoDB client. Called once on shutdown."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoDB client closed")


def get_mongo_db() -> Database:
    """Get the SmartClass database from the open client."""
    if _client is None:
        raise RuntimeError("MongoDB client is not connected; call connect_mongo() first")
    return _client[get_settings().mongodb_db]


def get_db() -> Database:
    """
    Dependency for FastAPI route injection.
    Usage:
        @router.get("/faculty")
        def list_faculty(db: Database = Depends(get_db)):
            ...
    Tests override this with an in-memory database.
    """
    return get_mongo_db()


def get_collection(db: Database, name: str) -> Collection:
    """Get a collection by its key in COLLECTIONS."""
    return db[COLLECTIONS[name]]


def check_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = connect_mongo()
        # ping command checks connection
        client.admin.command("ping")
        return True
    except Exception as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


def init_mongo_indexes(db: Database) -> None:
    """
    Create indexes. Call this once during app startup.
    The only constraint the data model has is one account per email.
    """
    get_collection(db, "users").create_index("email", unique=True)
    logger.info("MongoDB indexes created")
