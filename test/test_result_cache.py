import pytest

from storage.result_cache import (
    InMemoryResultCache,
    RedisResultCache,
    analysis_cache_key,
    build_result_cache,
    suggestions_cache_key,
)
from task_manager.models import TaskAnalysis


def test_keys_do_not_collide_on_concatenation():
    assert analysis_cache_key("Fix", "Bug") != analysis_cache_key("Fi", "xBug")
    assert analysis_cache_key("Fix", "Bug") == analysis_cache_key("Fix", "Bug")
    assert analysis_cache_key("Fix", "Bug").startswith("task_analysis:")


def test_suggestion_keys_are_scoped_by_user():
    key = suggestions_cache_key("u1", "planning")
    assert key.startswith("task_suggestions:u1:")
    assert key != suggestions_cache_key("u2", "planning")


@pytest.mark.asyncio
async def test_entry_expires_after_ttl(cache, clock):
    await cache.setex("k", 60, "v")
    assert await cache.get("k") == "v"
    clock.now += 59
    assert await cache.get("k") == "v"
    clock.now += 1
    assert await cache.get("k") is None
    assert len(cache) == 0


@pytest.mark.asyncio
async def test_analysis_round_trip_is_byte_identical(cache):
    analysis = TaskAnalysis(priority=7.5, tags=["ops"], confidence_score=80)
    stored = analysis.to_json()
    await cache.setex("a", 3600, stored)
    loaded = TaskAnalysis.model_validate_json(await cache.get("a"))
    assert loaded.to_json() == stored


class FakeRedis:
    def __init__(self):
        self.data = {}
        self.closed = False

    async def get(self, key):
        return self.data.get(key)

    async def setex(self, key, ttl, value):
        self.data[key] = value

    async def ping(self):
        return True

    async def aclose(self):
        self.closed = True


@pytest.mark.asyncio
async def test_redis_cache_delegates_to_client():
    client = FakeRedis()
    cache = RedisResultCache(client)
    await cache.setex("k", 10, "v")
    assert await cache.get("k") == "v"
    assert await cache.ping() is True
    await cache.close()
    assert client.closed
    assert cache.backend == "redis"


def test_build_result_cache_without_url():
    assert isinstance(build_result_cache(""), InMemoryResultCache)


@pytest.mark.asyncio
async def test_expired_entries_are_dropped_on_write(cache, clock):
    for i in range(1000):
        await cache.setex(f"k{i}", 1, "v")
    assert len(cache) == 1000
    clock.now += 10000
    await cache.setex("new", 60, "v")
    assert len(cache) == 1
    assert await cache.get("new") == "v"


@pytest.mark.asyncio
async def test_live_entries_survive_write(cache, clock):
    await cache.setex("long", 600, "a")
    await cache.setex("short", 1, "b")
    clock.now += 5
    await cache.setex("other", 60, "c")
    assert len(cache) == 2
    assert await cache.get("long") == "a"
