"""
In-memory listing cache keyed by subreddit name.

Entries live in a cachetools FIFOCache so that, once full, the listing
refreshed longest ago is evicted first. Freshness is checked against an
injectable monotonic clock, and concurrent misses for the same subreddit
share a single upstream fetch through a registry of in-flight tasks.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from cachetools import FIFOCache

from .models import Listing

logger = logging.getLogger(__name__)


class ListingFetcher(Protocol):
    async def fetch(self, subreddit: str) -> Listing: ...


@dataclass(frozen=True)
class CacheEntry:
    listing: Listing
    refreshed_at: float


class _RefreshOrderCache(FIFOCache):
    """FIFOCache that logs the entries it evicts."""

    def popitem(self):
        key, entry = super().popitem()
        logger.info("Evicted r/%s from listing cache", key)
        return key, entry


class ListingCache:
    """
    Async-safe TTL cache of subreddit listings.

    A fresh entry is returned without touching the fetcher. A stale or
    missing entry triggers one fetch per key; callers arriving while that
    fetch runs await the same task and see the same listing or exception.
    Failed fetches leave the previous entry, if any, as it was.
    """

    def __init__(
        self,
        fetcher: ListingFetcher,
        *,
        ttl_seconds: float,
        max_entries: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._fetcher = fetcher
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: FIFOCache[str, CacheEntry] = _RefreshOrderCache(maxsize=max_entries)
        self._inflight: dict[str, asyncio.Task[Listing]] = {}
        # Created lazily so the cache can be built before an event loop exists.
        self._lock: asyncio.Lock | None = None

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, subreddit: object) -> bool:
        return subreddit in self._entries

    async def get(self, subreddit: str) -> Listing:
        """
        Return the listing for a subreddit, fetching it when stale or missing.

        Raises whatever the fetcher raised for the fetch this call waited on.
        """
        key = subreddit.strip()
        lock = self._ensure_lock()
        async with lock:
            entry = self._entries.get(key)
            if entry is not None and self._clock() - entry.refreshed_at < self._ttl:
                logger.debug("Listing cache hit for r/%s", key)
                return entry.listing

            task = self._inflight.get(key)
            if task is None:
                task = asyncio.create_task(self._refresh(key))
                self._inflight[key] = task
            else:
                logger.debug("Joining in-flight fetch for r/%s", key)

        # Shielded so one cancelled requester does not cancel the fetch for everyone.
        return await asyncio.shield(task)

    async def _refresh(self, key: str) -> Listing:
        try:
            listing = await self._fetcher.fetch(key)
            self._install(key, listing)
            return listing
        finally:
            self._inflight.pop(key, None)

    def _install(self, key: str, listing: Listing) -> None:
        # Re-inserting moves the key to the newest position in eviction order.
        self._entries.pop(key, None)
        self._entries[key] = CacheEntry(listing=listing, refreshed_at=self._clock())
        logger.info("Cached %s posts for r/%s", len(listing.posts), key)

    def _ensure_lock(self) -> asyncio.Lock:
        if self._lock is None:
            self._lock = asyncio.Lock()
        return self._lock


__all__ = ["CacheEntry", "ListingCache", "ListingFetcher"]
