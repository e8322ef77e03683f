import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from app.core.config import settings

logger = logging.getLogger(__name__)

USER_COLLECTION = "user"
FIELD_COLLECTION = "fields"
PREDICTION_COLLECTION = "predictions"
IRRIGATION_LOG_COLLECTION = "irrigation_logs"
PLAN_COLLECTION = "plans"

# Every list query filters by owner and sorts on the second key.
INDEXES = {
    USER_COLLECTION: [([("email", ASCENDING)], {"unique": True})],
    FIELD_COLLECTION: [([("owner_id", ASCENDING), ("name", ASCENDING)], {})],
    PREDICTION_COLLECTION: [([("user_id", ASCENDING), ("created_at", DESCENDING)], {})],
    IRRIGATION_LOG_COLLECTION: [
        ([("owner_id", ASCENDING), ("timestamp", DESCENDING)], {})
    ],
    PLAN_COLLECTION: [([("owner_id", ASCENDING), ("start_date", DESCENDING)], {})],
}

_client: AsyncIOMotorClient = None
_database: AsyncIOMotorDatabase = None


def _get_database() -> AsyncIOMotorDatabase:
    global _client, _database
    if _client is None:
        mongo_uri = settings.MONGO_DIRECT_URI or settings.MONGO_URI
        _client = AsyncIOMotorClient(mongo_uri, uuidRepresentation="standard")
    if _database is None:
        _database = _client[settings.MONGO_DB_NAME]
    return _database


async def init_mongo_client() -> None:
    _get_database()
    logger.info("MongoDB client ready for database '%s'", settings.MONGO_DB_NAME)


async def ensure_indexes() -> None:
    database = _get_database()
    for collection_name, indexes in INDEXES.items():
        for keys, options in indexes:
            await database[collection_name].create_index(keys, **options)
    logger.info("Ensured indexes on %d collections", len(INDEXES))


async def close_mongo_client() -> None:
    global _client, _database
    if _client is not None:
        _client.close()
        logger.info("MongoDB client closed")
    _client = None
    _database = None


def get_user_collection() -> AsyncIOMotorCollection:
    return _get_database()[USER_COLLECTION]


def get_field_collection() -> AsyncIOMotorCollection:
    return _get_database()[FIELD_COLLECTION]


def get_prediction_collection() -> AsyncIOMotorCollection:
    return _get_database()[PREDICTION_COLLECTION]


def get_irrigation_log_collection() -> AsyncIOMotorCollection:
    return _get_database()[IRRIGATION_LOG_COLLECTION]


def get_plan_collection() -> AsyncIOMotorCollection:
    return _get_database()[PLAN_COLLECTION]
