"""
Event operations used by the ``/events`` endpoints.

Each operation builds a filter, runs one or two queries against the
``events`` collection and maps the documents to plain response models. The
organizer and category references are attached with one batched lookup per
reference collection. Failures of any kind go through ``handle_error`` and
surface as ``EventsError`` subclasses.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from app.core.config import DEFAULT_PAGE_SIZE, RELATED_PAGE_SIZE
from app.core.errors import InvalidArgumentError, NotFoundError, handle_error
from app.core.signals import EventBus, EventCreated, EventDeleted, event_bus
from app.db.filters import CategoryMatch, FilterExpression, compile_filter, related_to, title_and_category
from app.db.repository.categories import CategoriesRepository
from app.db.repository.events import EventsRepository
from app.db.repository.users import UsersRepository
from app.models import Category, Event, User
from app.schemas.event import EnrichedEvent, EventCreate, EventPage, EventRecord

logger = logging.getLogger(__name__)

NEWEST_FIRST = [("created_at", -1)]


def skip_amount(page: int, limit: int) -> int:
    if limit < 1:
        raise InvalidArgumentError(f"limit must be at least 1, got {limit}")
    if page < 1:
        raise InvalidArgumentError(f"page must be at least 1, got {page}")
    return (page - 1) * limit


def total_pages(count: int, limit: int) -> int:
    return math.ceil(count / limit)


class EventService:
    def __init__(self, db=None, bus: Optional[EventBus] = None):
        self.events = EventsRepository(db)
        self.users = UsersRepository(db)
        self.categories = CategoriesRepository(db)
        self.bus = bus if bus is not None else event_bus

    async def get_category_by_name(self, name: str) -> Optional[Category]:
        document = await self.categories.find_by_name(name)
        return Category.model_validate(document) if document else None

    async def populate(self, documents: List[Dict[str, Any]]) -> List[EnrichedEvent]:
        """Attach the reduced organizer and category to each event document."""
        events = [Event.from_document(doc) for doc in documents]
        if not events:
            return []

        organizers = {
            doc["_id"]: User.model_validate(doc)
            for doc in await self.users.find_organizers({e.organizer for e in events})
        }
        categories = {
            doc["_id"]: Category.model_validate(doc)
            for doc in await self.categories.find_many_by_ids({e.category for e in events})
        }
        return [
            event.to_enriched(organizers.get(event.organizer), categories.get(event.category))
            for event in events
        ]

    async def _page(self, expr: FilterExpression, limit: int, page: int) -> EventPage:
        conditions = compile_filter(expr)
        skip = skip_amount(page, limit)

        documents = await self.events.find_many(conditions, skip=skip, limit=limit, sort=NEWEST_FIRST)
        data = await self.populate(documents)
        count = await self.events.count(conditions)

        return EventPage(data=data, total_pages=total_pages(count, limit))

    async def create_event(self, event: EventCreate, user_id: str) -> EventRecord:
        try:
            organizer = await self.users.find_by_id(user_id)
            if not organizer:
                raise NotFoundError("User not found")

            if not await self.categories.find_by_id(event.category_id):
                raise NotFoundError("Category not found")

            document = event.model_dump(exclude={"category_id"})
            document.update({
                "_id": str(uuid4()),
                "category": event.category_id,
                "organizer": organizer["_id"],
                "created_at": datetime.now(timezone.utc),
            })
            await self.events.insert_one(document)
            logger.info(f"User {user_id} created event {document['_id']} '{event.title}'")
            await self.bus.publish(EventCreated(event_id=document["_id"], category_id=event.category_id))

            return Event.from_document(document).to_record()
        except Exception as error:
            handle_error(error)

    async def get_all_events(
        self,
        query: Optional[str] = None,
        limit: int = DEFAULT_PAGE_SIZE,
        page: int = 1,
        category: Optional[str] = None,
    ) -> EventPage:
        try:
            category_match = None
            if category:
                found = await self.get_category_by_name(category)
                # an unknown category name filters everything out
                category_match = CategoryMatch(found.id if found else None)
                if found is None:
                    logger.info(f"No category matches '{category}'")

            return await self._page(title_and_category(query, category_match), limit, page)
        except Exception as error:
            handle_error(error)

    async def get_event(self, event_id: str) -> EnrichedEvent:
        try:
            document = await self.events.find_one({"_id": event_id})
            if not document:
                raise NotFoundError("Event not found")

            enriched = await self.populate([document])
            return enriched[0]
        except Exception as error:
            handle_error(error)

    async def get_event_by_category(
        self,
        category_id: str,
        event_id: str,
        limit: int = RELATED_PAGE_SIZE,
        page: int = 1,
    ) -> EventPage:
        try:
            return await self._page(related_to(category_id, event_id), limit, page)
        except Exception as error:
            handle_error(error)

    async def delete_event(self, event_id: str, path: str) -> None:
        try:
            deleted = await self.events.delete_one({"_id": event_id})
            if not deleted:
                logger.debug(f"Delete of missing event {event_id} ignored")
                return

            logger.info(f"Deleted event {event_id}")
            await self.bus.publish(EventDeleted(event_id=event_id, path=path))
        except Exception as error:
            handle_error(error)
