from pydantic import BaseModel, Field
from typing import Any, Dict, Optional
from datetime import datetime

from app.models.category import Category
from app.models.user import User
from app.schemas.event import CategoryOut, EnrichedEvent, EventRecord, OrganizerOut

class Event(BaseModel):
    """An ``events`` document as stored; ``category`` and ``organizer`` hold ids."""
    id: str = Field(alias="_id")
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    image_url: Optional[str] = None
    start_date_time: Optional[datetime] = None
    end_date_time: Optional[datetime] = None
    price: Optional[str] = None
    is_free: bool = False
    url: Optional[str] = None
    category: str
    organizer: str
    created_at: datetime

    class Config:
        populate_by_name = True

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Event":
        return cls.model_validate(document)

    def _fields(self) -> Dict[str, Any]:
        return self.model_dump(exclude={"category", "organizer"})

    def to_record(self) -> EventRecord:
        return EventRecord(**self._fields(), category=self.category, organizer=self.organizer)

    def to_enriched(
        self,
        organizer: Optional[User] = None,
        category: Optional[Category] = None,
    ) -> EnrichedEvent:
        return EnrichedEvent(
            **self._fields(),
            organizer=OrganizerOut(
                id=organizer.id,
                first_name=organizer.first_name,
                last_name=organizer.last_name,
            ) if organizer else None,
            category=CategoryOut(id=category.id, name=category.name) if category else None,
        )
