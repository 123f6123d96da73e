"""
In-process domain signals.

The event operations publish messages here instead of talking to the cache
layer directly; subscribers register a coroutine per message type.
"""

import logging
from collections import defaultdict
from datetime import datetime, timezone
from typing import Awaitable, Callable, DefaultDict, List, Type

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class Signal(BaseModel):
    signal_type: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class EventCreated(Signal):
    """Published once a new event document has been stored."""
    signal_type: str = "event.created"
    event_id: str
    category_id: str


class EventDeleted(Signal):
    """Published once an event document has actually been removed."""
    signal_type: str = "event.deleted"
    event_id: str
    path: str


Handler = Callable[[Signal], Awaitable[None]]


class EventBus:
    def __init__(self):
        self._handlers: DefaultDict[Type[Signal], List[Handler]] = defaultdict(list)

    def subscribe(self, signal_cls: Type[Signal], handler: Handler) -> None:
        if handler not in self._handlers[signal_cls]:
            self._handlers[signal_cls].append(handler)

    async def publish(self, signal: Signal) -> None:
        handlers = list(self._handlers[type(signal)])
        logger.debug(f"Publishing {signal.signal_type} to {len(handlers)} handler(s)")
        for handler in handlers:
            try:
                await handler(signal)
            except Exception as e:
                # subscribers never fail the publisher
                logger.error(f"Handler {handler!r} failed for {signal.signal_type}: {e!r}", exc_info=e)


event_bus = EventBus()
