from fastapi import APIRouter, Depends, Query, Request
from fastapi.encoders import jsonable_encoder
from typing import Any, Dict, Optional
from app.core.config import DEFAULT_PAGE_SIZE, RELATED_PAGE_SIZE
from app.core.security import get_current_user
from app.schemas.event import DeleteEventResponse, EnrichedEvent, EventCreate, EventPage, EventRecord
from app.services.events import EventService
from app.utils.page_cache import PageCache, page_cache


router = APIRouter()


def get_event_service() -> EventService:
    return EventService()


def get_page_cache() -> PageCache:
    return page_cache


async def _cached(request: Request, cache: PageCache, render):
    key = cache.key(request.url.path, request.url.query)
    payload = cache.get(key)
    if payload is None:
        payload = jsonable_encoder(await render())
        cache.set(key, payload)
    return payload


@router.post("/", response_model=EventRecord)
async def create_event(
    event: EventCreate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    service: EventService = Depends(get_event_service),
):
    return await service.create_event(event, current_user["_id"])


@router.get("/", response_model=EventPage)
async def get_all_events(
    request: Request,
    query: Optional[str] = Query(None, description="Case-insensitive search in event titles"),
    category: Optional[str] = Query(None, description="Category name to filter by"),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1),
    page: int = Query(1, ge=1),
    service: EventService = Depends(get_event_service),
    cache: PageCache = Depends(get_page_cache),
):
    return await _cached(
        request, cache,
        lambda: service.get_all_events(query=query, limit=limit, page=page, category=category),
    )


@router.get("/related", response_model=EventPage)
async def get_related_events(
    request: Request,
    category_id: str = Query(...),
    event_id: str = Query(..., description="Event to leave out of the results"),
    limit: int = Query(RELATED_PAGE_SIZE, ge=1),
    page: int = Query(1, ge=1),
    service: EventService = Depends(get_event_service),
    cache: PageCache = Depends(get_page_cache),
):
    return await _cached(
        request, cache,
        lambda: service.get_event_by_category(category_id, event_id, limit=limit, page=page),
    )


@router.get("/{event_id}", response_model=EnrichedEvent)
async def get_event(
    request: Request,
    event_id: str,
    service: EventService = Depends(get_event_service),
    cache: PageCache = Depends(get_page_cache),
):
    return await _cached(request, cache, lambda: service.get_event(event_id))


@router.delete("/{event_id}", response_model=DeleteEventResponse)
async def delete_event(
    event_id: str,
    path: str = Query("/events/", description="Cached page to revalidate after the delete"),
    current_user: Dict[str, Any] = Depends(get_current_user),
    service: EventService = Depends(get_event_service),
):
    await service.delete_event(event_id, path)
    return {"message": "Event deleted successfully"}
