from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.api.v1.endpoints import events
from app.core.config import CORS_ORIGINS, LOG_LEVEL
from app.core.errors import EventsError
from app.core.logging_config import setup_logging
from app.core.signals import EventCreated, EventDeleted, event_bus
from app.db.session import close_database, connect_to_database
from app.utils.page_cache import page_cache

setup_logging(LOG_LEVEL)

app = FastAPI(
    title="EventlyBE",
    description="Backend Docs For Evently",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

event_bus.subscribe(EventCreated, page_cache.on_event_created)
event_bus.subscribe(EventDeleted, page_cache.on_event_deleted)

@app.on_event("startup")
async def startup_event():
    await connect_to_database()

@app.on_event("shutdown")
async def shutdown_event():
    close_database()

@app.exception_handler(EventsError)
async def events_error_handler(request: Request, exc: EventsError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

app.include_router(events.router, prefix="/events", tags=["Events"])
