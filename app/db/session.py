import logging
from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from app.core.config import MONGO_URI, MONGO_DB_NAME

logger = logging.getLogger(__name__)

client: Optional[AsyncIOMotorClient] = None
db: Optional[AsyncIOMotorDatabase] = None

REQUIRED_COLLECTIONS = [
    "users",
    "categories",
    "events",
]


def get_db():
    """Return the shared database handle, creating the client on first use."""
    global client, db
    if client is None:
        client = AsyncIOMotorClient(MONGO_URI)
        db = client[MONGO_DB_NAME]
    return db


async def ensure_collections_exist():
    """Ensure all required collections exist in the database."""
    database = get_db()
    existing_collections = await database.list_collection_names()

    for collection in REQUIRED_COLLECTIONS:
        if collection not in existing_collections:
            await database.create_collection(collection)
            logger.info(f"Created collection: {collection}")


async def connect_to_database():
    """Idempotent: ping the server and make sure the collections are there."""
    database = get_db()
    await database.command("ping")
    await ensure_collections_exist()
    logger.info(f"Connected to MongoDB database {MONGO_DB_NAME}")
    return database


def close_database():
    global client, db
    if client is not None:
        client.close()
        client = None
        db = None
