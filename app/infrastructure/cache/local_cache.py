"""In-process cache tier with single-flight loading.

Bounded LRU map with a fixed time-to-live per entry. get_or_load() collapses
concurrent misses for the same key into one loader call: the first caller
starts a task, every later caller awaits that same task. Only successful
loads are stored; a loader exception reaches every caller of that round and
leaves no entry behind, so the next call loads again.

All mutation happens on the event loop thread between awaits, so callers
never see a lock.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections import OrderedDict
from collections.abc import Awaitable, Callable, Hashable
from dataclasses import dataclass
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")


@dataclass
class CacheEntry(Generic[V]):
    """Stored value and its absolute expiry (clock seconds)."""

    value: V
    expires_at: float


@dataclass
class CacheStats:
    """Counters since process start."""

    size: int = 0
    hits: int = 0
    misses: int = 0
    loads: int = 0
    load_failures: int = 0
    evictions: int = 0
    in_flight: int = 0

    def as_dict(self) -> dict[str, int]:
        return {
            "size": self.size,
            "hits": self.hits,
            "misses": self.misses,
            "loads": self.loads,
            "load_failures": self.load_failures,
            "evictions": self.evictions,
            "in_flight": self.in_flight,
        }


class LocalCache(Generic[V]):
    """LRU + TTL cache with per-key single-flight loads."""

    def __init__(
        self,
        max_size: int = 10_000,
        ttl_seconds: float = 1800,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: OrderedDict[Hashable, CacheEntry[V]] = OrderedDict()
        self._in_flight: dict[Hashable, asyncio.Task[V]] = {}
        self._stats = CacheStats()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return self.get(key, record=False) is not None

    def get(self, key: Hashable, record: bool = True) -> V | None:
        """Return the live value for key (refreshing its LRU position) or None."""
        entry = self._entries.get(key)
        if entry is None:
            if record:
                self._stats.misses += 1
            return None
        if entry.expires_at <= self._clock():
            del self._entries[key]
            if record:
                self._stats.misses += 1
            return None
        self._entries.move_to_end(key)
        if record:
            self._stats.hits += 1
        return entry.value

    def put(self, key: Hashable, value: V) -> None:
        """Store value under key with this tier's TTL, evicting the LRU entry when full."""
        self._entries[key] = CacheEntry(value, self._clock() + self.ttl_seconds)
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_size:
            evicted, _ = self._entries.popitem(last=False)
            self._stats.evictions += 1
            logger.debug("Local cache EVICT: %s", evicted)

    async def get_or_load(self, key: Hashable, loader: Callable[[], Awaitable[V]]) -> V:
        """Return the cached value for key, or load it exactly once.

        Concurrent callers for the same key share one loader task. Cancelling
        one waiter does not cancel the shared load.

        Raises:
            Whatever the loader raised; nothing is cached in that case.
        """
        value = self.get(key)
        if value is not None:
            return value
        task = self._in_flight.get(key)
        if task is None:
            task = asyncio.ensure_future(loader())
            self._in_flight[key] = task
            self._stats.loads += 1
            task.add_done_callback(lambda t: self._complete(key, t))
        else:
            logger.debug("Local cache JOIN in-flight load: %s", key)
        return await asyncio.shield(task)

    def _complete(self, key: Hashable, task: asyncio.Task[V]) -> None:
        """Done callback: drop the in-flight marker and keep successful results."""
        if self._in_flight.get(key) is task:
            del self._in_flight[key]
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            self._stats.load_failures += 1
            return
        result = task.result()
        if result is not None:
            self.put(key, result)

    def stats(self) -> CacheStats:
        """Snapshot of counters, with current size and in-flight count."""
        snapshot = CacheStats(**self._stats.as_dict())
        snapshot.size = len(self._entries)
        snapshot.in_flight = len(self._in_flight)
        return snapshot
