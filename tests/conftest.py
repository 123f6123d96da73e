import pytest
from datetime import datetime, timedelta, timezone

from app.core.signals import EventBus, EventCreated, EventDeleted
from app.services.events import EventService
from app.utils.page_cache import PageCache
from tests.data import MUSIC_ID, ORGANIZER_ID, TECH_ID
from tests.fakes import FakeDatabase


@pytest.fixture
def db():
    database = FakeDatabase()
    database["users"].seed({
        "_id": ORGANIZER_ID,
        "first_name": "Ada",
        "last_name": "Lovelace",
        "username": "ada",
        "email": "ada@example.com",
    })
    database["categories"].seed(
        {"_id": MUSIC_ID, "name": "Music"},
        {"_id": TECH_ID, "name": "Technology"},
    )
    return database


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def service(db, bus):
    return EventService(db, bus=bus)


@pytest.fixture
def cache(bus):
    page_cache = PageCache()
    bus.subscribe(EventCreated, page_cache.on_event_created)
    bus.subscribe(EventDeleted, page_cache.on_event_deleted)
    return page_cache


@pytest.fixture
def event_factory(db):
    """Insert events straight into the fake collection; higher index = newer."""
    base = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def make(index, category=MUSIC_ID, title=None, organizer=ORGANIZER_ID):
        document = {
            "_id": f"evt-{index:02d}",
            "title": title or f"Event {index}",
            "description": f"Description {index}",
            "is_free": True,
            "category": category,
            "organizer": organizer,
            "created_at": base + timedelta(hours=index),
        }
        db["events"].seed(document)
        return document

    return make
