from typing import Optional

from fastapi import HTTPException

from analysis.ai_service import AIService
from api import state
from storage.result_cache import ResultCache


def get_ai_service() -> AIService:
    if state.ai_service is None:
        raise HTTPException(status_code=503, detail="Service is starting up")
    return state.ai_service


def get_result_cache() -> Optional[ResultCache]:
    return state.result_cache
