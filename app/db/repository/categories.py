import re
from typing import Any, Dict, Iterable, List, Optional
from app.db.session import get_db

CATEGORY_PROJECTION = {"_id": 1, "name": 1}

class CategoriesRepository:
    def __init__(self, db=None):
        self.collection = (db if db is not None else get_db())["categories"]

    async def find_by_id(self, category_id: str) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one({"_id": category_id})

    async def find_by_name(self, name: str) -> Optional[Dict[str, Any]]:
        """First category whose name contains ``name``, ignoring case."""
        return await self.collection.find_one(
            {"name": {"$regex": re.escape(name), "$options": "i"}}
        )

    async def find_many_by_ids(self, category_ids: Iterable[str]) -> List[Dict[str, Any]]:
        cursor = self.collection.find({"_id": {"$in": list(category_ids)}}, CATEGORY_PROJECTION)
        return [doc async for doc in cursor]

    async def insert_one(self, category: Dict[str, Any]):
        result = await self.collection.insert_one(category)
        return result.inserted_id
