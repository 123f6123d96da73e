import logging
import time
from collections import OrderedDict
from typing import Any, Callable, Optional, Tuple

from app.core.config import PAGE_CACHE_MAX_ENTRIES, PAGE_CACHE_TTL_SECONDS
from app.core.signals import EventCreated, EventDeleted

logger = logging.getLogger(__name__)

LISTING_PATHS = ("/events/", "/events/related")


class PageCache:
    """Rendered GET responses keyed by request path (query string included).

    Holds at most ``max_entries`` pages, evicting the least recently used
    one first; entries older than ``ttl_seconds`` are treated as absent.
    """

    def __init__(
        self,
        max_entries: int = PAGE_CACHE_MAX_ENTRIES,
        ttl_seconds: float = PAGE_CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: "OrderedDict[str, Tuple[float, Any]]" = OrderedDict()

    @staticmethod
    def key(path: str, query: str = "") -> str:
        return f"{path}?{query}" if query else path

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None

        expires_at, payload = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None

        self._entries.move_to_end(key)
        return payload

    def set(self, key: str, payload: Any) -> None:
        self._entries[key] = (self._clock() + self.ttl_seconds, payload)
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"Evicted cached page {evicted}")

    def invalidate(self, path: str) -> int:
        """Drop ``path`` and every cached query-string variant of it."""
        stale = [k for k in self._entries if k == path or k.startswith(f"{path}?")]
        for k in stale:
            del self._entries[k]
        logger.info(f"Invalidated {len(stale)} cached page(s) for {path}")
        return len(stale)

    async def on_event_created(self, signal: EventCreated) -> None:
        for path in LISTING_PATHS:
            self.invalidate(path)

    async def on_event_deleted(self, signal: EventDeleted) -> None:
        self.invalidate(signal.path)
        self._entries.pop(f"/events/{signal.event_id}", None)


page_cache = PageCache()
