import asyncio
import logging
from uuid import uuid4
from app.core.logging_config import setup_logging
from app.db.repository.categories import CategoriesRepository
from app.db.repository.users import UsersRepository
from app.db.session import close_database, connect_to_database

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = ["Conference", "Concert", "Workshop", "Meetup", "Sports"]

async def initialize_db():
    db = await connect_to_database()
    categories = CategoriesRepository(db)
    users = UsersRepository(db)

    # Seed initial data
    for name in DEFAULT_CATEGORIES:
        if not await db["categories"].find_one({"name": name}):
            await categories.insert_one({"_id": str(uuid4()), "name": name})
            logger.info(f"Added category {name}")

    if not await db["users"].find_one({"username": "admin"}):
        await users.insert_one({
            "_id": str(uuid4()),
            "username": "admin",
            "email": "admin@example.com",
            "first_name": "Admin",
            "last_name": "User",
        })
    logger.info("Database initialized with default data.")

# Run with: python -m scripts.initialize_db
if __name__ == "__main__":
    setup_logging()
    try:
        asyncio.run(initialize_db())
    finally:
        close_database()
