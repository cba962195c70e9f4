import logging
import os
import time
from typing import Optional

from fastapi import APIRouter, Depends, Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from api import state
from api.dependencies import get_result_cache
from storage.result_cache import RedisResultCache, ResultCache

router = APIRouter()
logger = logging.getLogger(__name__)

_STARTED_AT = time.monotonic()


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint for container orchestration."""
    return {
        "status": "healthy",
        "uptime_s": round(time.monotonic() - _STARTED_AT, 1),
        "environment": os.getenv("APP_ENV", "development"),
    }


@router.get("/ready")
async def readiness(
    result_cache: Optional[ResultCache] = Depends(get_result_cache),
) -> dict:
    services = {
        "cache": "unavailable",
        "ai": "initialized" if state.ai_service is not None and state.ai_service.available else "disabled",
    }
    status = "ready"

    if result_cache is None:
        status = "starting"
    elif isinstance(result_cache, RedisResultCache):
        try:
            services["cache"] = "connected" if await result_cache.ping() else "unavailable"
        except Exception as e:
            logger.warning(f"Redis ping failed: {e}")
        if services["cache"] != "connected":
            # the cache is optional for correctness
            status = "degraded"
    else:
        services["cache"] = result_cache.backend

    return {"status": status, "services": services}


@router.get("/metrics")
async def metrics() -> Response:
    """
    Prometheus scrape endpoint.
    """
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
