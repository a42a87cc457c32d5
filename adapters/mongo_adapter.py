"""MongoDB adapter - process-wide client and database handle.
"""

from typing import Optional
import logging

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database

from app.config import settings

logger = logging.getLogger("foodorder.mongo")

_client: Optional[MongoClient] = None
_db: Optional[Database] = None


# Collection names mirror the ones the mobile clients already read.
USERS = "users"
ADDRESSES = "useraddresses"
ORDERS = "orders"
SUBSCRIPTIONS = "subscriptions"
FOODS = "foods"
FOOD_CATEGORIES = "foodcategories"
CATEGORIES = "categories"
ITEMS = "items"
XM_CATEGORIES = "xmcategories"
XM_PHOTOS = "xmphotos"
XM_STORIES = "xmstories"
XM_USERS = "xmusers"
XM_APP_OPENS = "appopens"
XM_ONBOARDS = "xmonboards"
XM_REELS = "xmreels"
XM_SERVICE_STATUS = "xmservicestatuses"

PRIMARY_ADDRESS_INDEX = "unique_primary_address_per_user"


# ------------------ Connection ------------------
def connect(uri: str, db_name: str) -> Database:
    """Open the shared client, verify it with a ping and return the database."""
    global _client, _db
    client = MongoClient(uri)
    try:
        client.admin.command("ping")
    except Exception:
        client.close()
        raise
    _client = client
    _db = client[db_name]
    logger.info("Connected to MongoDB %s (database: %s)", uri, db_name)
    return _db


def close():
    """Close MongoDB connection."""
    global _client, _db
    try:
        if _client is not None:
            _client.close()
            logger.info("MongoDB client closed")
    except Exception:
        logger.exception("Error closing MongoDB client")
    finally:
        _client = None
        _db = None


def get_database() -> Database:
    """FastAPI dependency returning the shared database handle.

    Lazily connects with configured settings when the lifespan hook has not
    run (e.g. when the app is mounted inside another ASGI process).
    """
    if _db is not None:
        return _db
    return connect(settings.mongo_uri, settings.mongo_db_name)


def ping(db: Database) -> bool:
    try:
        db.client.admin.command("ping")
        return True
    except Exception:
        logger.exception("MongoDB ping failed")
        return False


# ------------------ Indexes ------------------
def ensure_indexes(db: Database) -> None:
    """Create the unique and lookup indexes the services rely on."""
    db[USERS].create_index([("username", ASCENDING)], unique=True, name="unique_username")
    db[USERS].create_index([("email", ASCENDING)], unique=True, name="unique_email")
    db[USERS].create_index([("resetPasswordToken", ASCENDING)], sparse=True)
    db[CATEGORIES].create_index(
        [("categoryName", ASCENDING)], unique=True, name="unique_category_name"
    )
    db[FOOD_CATEGORIES].create_index(
        [("categoryName", ASCENDING)], unique=True, name="unique_category_name"
    )
    db[XM_CATEGORIES].create_index([("name", ASCENDING)], unique=True, name="unique_name")
    db[XM_USERS].create_index([("email", ASCENDING)], unique=True, name="unique_email")

    # Backstop for the one-primary-address rule across processes; in-process
    # callers already serialize promotions per user (services.address_guard).
    db[ADDRESSES].create_index(
        [("userId", ASCENDING)],
        unique=True,
        name=PRIMARY_ADDRESS_INDEX,
        partialFilterExpression={"isPrimary": True},
    )
    db[ADDRESSES].create_index(
        [("userId", ASCENDING), ("isPrimary", ASCENDING)], name="address_user"
    )
    db[ORDERS].create_index([("user", ASCENDING), ("createdAt", DESCENDING)])
    db[SUBSCRIPTIONS].create_index([("user", ASCENDING)])
    logger.info("MongoDB indexes ensured")
