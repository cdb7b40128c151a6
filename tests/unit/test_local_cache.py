"""Tests for the in-process LRU/TTL tier and its single-flight loading."""

import asyncio

import pytest

from app.infrastructure.cache.local_cache import LocalCache


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_lru_evicts_least_recently_used() -> None:
    cache: LocalCache[str] = LocalCache(max_size=2, ttl_seconds=60)
    cache.put("a", "1")
    cache.put("b", "2")
    assert cache.get("a") == "1"  # a is now most recent
    cache.put("c", "3")
    assert cache.get("b") is None
    assert cache.get("a") == "1"
    assert cache.get("c") == "3"
    assert cache.stats().evictions == 1


def test_entries_expire_after_ttl() -> None:
    clock = FakeClock()
    cache: LocalCache[str] = LocalCache(max_size=10, ttl_seconds=30, clock=clock)
    cache.put("k", "v")
    clock.now += 29
    assert cache.get("k") == "v"
    clock.now += 1
    assert cache.get("k") is None
    assert len(cache) == 0


def test_rejects_non_positive_bounds() -> None:
    with pytest.raises(ValueError):
        LocalCache(max_size=0)
    with pytest.raises(ValueError):
        LocalCache(ttl_seconds=0)


async def test_concurrent_loads_share_one_call() -> None:
    cache: LocalCache[str] = LocalCache()
    calls = 0

    async def loader() -> str:
        nonlocal calls
        calls += 1
        await asyncio.sleep(0.01)
        return "value"

    results = await asyncio.gather(*(cache.get_or_load("k", loader) for _ in range(50)))
    assert calls == 1
    assert set(results) == {"value"}
    assert cache.get("k") == "value"
    stats = cache.stats()
    assert stats.loads == 1
    assert stats.in_flight == 0


async def test_failed_load_reaches_all_callers_and_is_not_cached() -> None:
    cache: LocalCache[str] = LocalCache()
    calls = 0

    async def failing() -> str:
        nonlocal calls
        calls += 1
        await asyncio.sleep(0.01)
        raise RuntimeError("backend down")

    results = await asyncio.gather(
        *(cache.get_or_load("k", failing) for _ in range(5)), return_exceptions=True
    )
    assert calls == 1
    assert all(isinstance(r, RuntimeError) for r in results)
    assert "k" not in cache
    assert cache.stats().load_failures == 1

    async def ok() -> str:
        return "recovered"

    assert await cache.get_or_load("k", ok) == "recovered"


async def test_cancelled_waiter_does_not_cancel_shared_load() -> None:
    cache: LocalCache[str] = LocalCache()
    release = asyncio.Event()

    async def loader() -> str:
        await release.wait()
        return "done"

    first = asyncio.create_task(cache.get_or_load("k", loader))
    second = asyncio.create_task(cache.get_or_load("k", loader))
    await asyncio.sleep(0)
    first.cancel()
    await asyncio.sleep(0)
    release.set()
    assert await second == "done"
    with pytest.raises(asyncio.CancelledError):
        await first
    assert cache.get("k") == "done"
