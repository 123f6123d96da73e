from datetime import datetime
from pydantic import BaseModel
from typing import List, Optional

class EventBase(BaseModel):
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    image_url: Optional[str] = None
    start_date_time: Optional[datetime] = None
    end_date_time: Optional[datetime] = None
    price: Optional[str] = None
    is_free: bool = False
    url: Optional[str] = None

class EventCreate(EventBase):
    category_id: str

class EventRecord(EventBase):
    """A stored event with its references left as ids."""
    id: str
    category: str
    organizer: str
    created_at: datetime

class OrganizerOut(BaseModel):
    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None

class CategoryOut(BaseModel):
    id: str
    name: str

class EnrichedEvent(EventBase):
    id: str
    created_at: datetime
    organizer: Optional[OrganizerOut] = None
    category: Optional[CategoryOut] = None

class EventPage(BaseModel):
    data: List[EnrichedEvent]
    total_pages: int

class DeleteEventResponse(BaseModel):
    message: str
