from __future__ import annotations

import asyncio
import json
import logging
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Mapping, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def cache_key(url: str, params: Mapping[str, Any] | None = None) -> str:
    """Deterministic key: URL plus the query map serialized with sorted keys."""

    return url + json.dumps(
        dict(params or {}), sort_keys=True, separators=(",", ":"), default=str
    )


@dataclass(slots=True)
class _Entry:
    task: asyncio.Future[Any]
    stored_at: float


@dataclass(slots=True)
class ResponseCache:
    """Bounded LRU + TTL cache of in-flight upstream fetches.

    The pending task is stored before it resolves, so concurrent callers for the
    same key share one upstream call. Entries leave only by TTL expiry, LRU
    eviction, or when their fetch fails.

    Construct one per application (or per test); it is not thread-safe and must
    be used from a single event loop.
    """

    max_entries: int = 200
    ttl_s: float = 20.0
    clock: Callable[[], float] = time.monotonic

    _entries: OrderedDict[str, _Entry] = field(
        default_factory=OrderedDict, init=False, repr=False
    )

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    async def get_or_fetch(self, key: str, fetch: Callable[[], Awaitable[T]]) -> T:
        # No await between lookup and insert: check-and-store is atomic per loop.
        now = self.clock()
        entry = self._entries.get(key)
        if entry is not None and (now - entry.stored_at) < self.ttl_s:
            self._entries.move_to_end(key)
            logger.debug("cache hit %s", key)
            task = entry.task
        else:
            logger.debug("cache miss %s", key)
            task = asyncio.ensure_future(fetch())
            self._store(key, _Entry(task=task, stored_at=now))

        # Shield so a cancelled caller does not cancel the shared fetch.
        return await asyncio.shield(task)

    def _store(self, key: str, entry: _Entry) -> None:
        self._entries[key] = entry
        self._entries.move_to_end(key)
        entry.task.add_done_callback(lambda t: self._on_done(key, entry))

        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("cache evict %s", evicted)

    def _on_done(self, key: str, entry: _Entry) -> None:
        task = entry.task
        if task.cancelled() or task.exception() is not None:
            # Failed fetches are not served from cache; the next caller retries.
            if self._entries.get(key) is entry:
                del self._entries[key]
