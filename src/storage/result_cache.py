"""
Result cache for model-derived analyses.

The cache is only an optimization: entries expire passively after their TTL
and nothing ever invalidates them explicitly.
"""

from __future__ import annotations

import hashlib
import json
import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

ANALYSIS_PREFIX = "task_analysis"
SUGGESTIONS_PREFIX = "task_suggestions"


def _digest(*parts: str) -> str:
    # Hash a JSON array so ("Fix", "Bug") and ("Fi", "xBug") never collide
    encoded = json.dumps(list(parts), ensure_ascii=False).encode("utf-8")
    return hashlib.sha256(encoded).hexdigest()


def analysis_cache_key(title: str, description: str) -> str:
    return f"{ANALYSIS_PREFIX}:{_digest(title, description)}"


def suggestions_cache_key(user_id: str, context: str) -> str:
    return f"{SUGGESTIONS_PREFIX}:{user_id}:{_digest(context)}"


class ResultCache(ABC):
    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    @abstractmethod
    async def setex(self, key: str, ttl_seconds: int, value: str) -> None:
        raise NotImplementedError

    async def close(self) -> None:
        return None

    @property
    def backend(self) -> str:
        return type(self).__name__


class InMemoryResultCache(ResultCache):
    """Process-local TTL cache, used when no Redis URL is configured."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: Dict[str, Tuple[float, str]] = {}

    async def get(self, key: str) -> Optional[str]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    async def setex(self, key: str, ttl_seconds: int, value: str) -> None:
        now = self._clock()
        # drop expired entries on write
        self._entries = {k: e for k, e in self._entries.items() if e[0] > now}
        self._entries[key] = (now + ttl_seconds, value)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def backend(self) -> str:
        return "memory"


class RedisResultCache(ResultCache):
    def __init__(self, client):
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisResultCache":
        import redis.asyncio as redis

        logger.info("Connecting result cache to Redis")
        return cls(redis.from_url(url, decode_responses=True))

    async def get(self, key: str) -> Optional[str]:
        return await self._client.get(key)

    async def setex(self, key: str, ttl_seconds: int, value: str) -> None:
        await self._client.setex(key, ttl_seconds, value)

    async def ping(self) -> bool:
        return bool(await self._client.ping())

    async def close(self) -> None:
        await self._client.aclose()

    @property
    def backend(self) -> str:
        return "redis"


def build_result_cache(redis_url: str) -> ResultCache:
    if redis_url:
        return RedisResultCache.from_url(redis_url)
    logger.warning("REDIS_URL not set, using in-memory result cache")
    return InMemoryResultCache()
