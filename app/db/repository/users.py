from typing import Any, Dict, Iterable, List, Optional
from app.db.session import get_db

ORGANIZER_PROJECTION = {"_id": 1, "first_name": 1, "last_name": 1}

class UsersRepository:
    def __init__(self, db=None):
        self.collection = (db if db is not None else get_db())["users"]

    async def find_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one({"_id": user_id})

    async def find_organizers(self, user_ids: Iterable[str]) -> List[Dict[str, Any]]:
        """Reduced ``{_id, first_name, last_name}`` view of the given users."""
        cursor = self.collection.find({"_id": {"$in": list(user_ids)}}, ORGANIZER_PROJECTION)
        return [doc async for doc in cursor]

    async def insert_one(self, user: Dict[str, Any]):
        result = await self.collection.insert_one(user)
        return result.inserted_id
