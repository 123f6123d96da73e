from typing import Any, Dict, List, Optional
from app.db.session import get_db

class EventsRepository:
    def __init__(self, db=None):
        self.collection = (db if db is not None else get_db())["events"]

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one(query)

    async def find_many(self, query, skip=0, limit=100, sort=None) -> List[Dict[str, Any]]:
        cursor = self.collection.find(query)

        if sort:
            cursor = cursor.sort(sort)

        cursor = cursor.skip(skip).limit(limit)
        return [doc async for doc in cursor]

    async def insert_one(self, event: Dict[str, Any]):
        result = await self.collection.insert_one(event)
        return result.inserted_id

    async def delete_one(self, query: Dict[str, Any]) -> int:
        result = await self.collection.delete_one(query)
        return result.deleted_count

    async def count(self, query: Dict[str, Any]) -> int:
        return await self.collection.count_documents(query)
