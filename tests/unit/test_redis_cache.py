"""Tests for the Redis CacheService with a mocked client."""

import json
from unittest.mock import AsyncMock

import redis.asyncio as redis

from app.infrastructure.cache.redis_cache import CacheService


def _service(client: AsyncMock) -> CacheService:
    return CacheService(redis_client=client)


async def test_get_decodes_json() -> None:
    client = AsyncMock()
    client.get.return_value = json.dumps({"bio": "Biographie"})
    cache = _service(client)
    assert cache.is_available()
    assert await cache.get("metadata:User:fr") == {"bio": "Biographie"}
    client.get.assert_awaited_once_with("metadata:User:fr")


async def test_get_missing_key_is_none() -> None:
    client = AsyncMock()
    client.get.return_value = None
    assert await _service(client).get("trans:fr:en:1") is None


async def test_invalid_json_is_a_miss() -> None:
    client = AsyncMock()
    client.get.return_value = "{not json"
    assert await _service(client).get("trans:fr:en:1") is None


async def test_redis_error_is_a_miss() -> None:
    client = AsyncMock()
    client.get.side_effect = redis.RedisError("boom")
    assert await _service(client).get("trans:fr:en:1") is None


async def test_set_uses_setex_with_ttl_and_keeps_unicode() -> None:
    client = AsyncMock()
    cache = _service(client)
    assert await cache.set("trans:en:fr:1", "Prénom", ttl=120) is True
    client.setex.assert_awaited_once_with("trans:en:fr:1", 120, '"Prénom"')


async def test_set_failure_returns_false() -> None:
    client = AsyncMock()
    client.setex.side_effect = redis.RedisError("boom")
    assert await _service(client).set("k", "v") is False


async def test_unconnected_service_is_unavailable() -> None:
    cache = CacheService()
    assert not cache.is_available()
    assert await cache.get("k") is None
    assert await cache.set("k", "v") is False
