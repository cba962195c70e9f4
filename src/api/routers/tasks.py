import logging
import time
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from analysis.ai_service import AIService
from api.dependencies import get_ai_service
from llm.errors import AIServiceError
from task_manager.metrics import REQUESTS_TOTAL, REQUEST_LATENCY_SECONDS
from task_manager.models import ProductivityInsight, TaskAnalysis, TaskDraft

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


class AnalyzeTaskIn(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field("", max_length=5000)
    context: Optional[Dict[str, Any]] = None


class SuggestionsIn(BaseModel):
    user_id: str = Field(..., min_length=1)
    context: str = ""
    limit: int = Field(5, ge=1, le=20)


class InsightsIn(BaseModel):
    user_data: Dict[str, Any] = Field(default_factory=dict)


class VoiceIn(BaseModel):
    transcription: str = Field(..., min_length=1)


def _observe(endpoint: str, status: str, start: float) -> None:
    # Prometheus counters (best-effort)
    try:
        REQUESTS_TOTAL.labels(endpoint=endpoint, status=status).inc()
        REQUEST_LATENCY_SECONDS.labels(endpoint=endpoint).observe(time.time() - start)
    except Exception:
        pass


@router.post("/tasks/analyze", response_model=TaskAnalysis, response_model_by_alias=True)
async def analyze_task(
    payload: AnalyzeTaskIn, service: AIService = Depends(get_ai_service)
) -> TaskAnalysis:
    start = time.time()
    logger.info(f"Analyzing task: {payload.title[:50]}")
    analysis = await service.analyze_task(payload.title, payload.description, payload.context)
    _observe("/api/tasks/analyze", "ok", start)
    return analysis


@router.post("/tasks/suggestions")
async def task_suggestions(
    payload: SuggestionsIn, service: AIService = Depends(get_ai_service)
) -> dict:
    start = time.time()
    suggestions: List[str] = await service.generate_task_suggestions(
        payload.user_id, payload.context, payload.limit
    )
    _observe("/api/tasks/suggestions", "ok", start)
    return {"suggestions": suggestions, "total": len(suggestions)}


@router.post("/insights")
async def productivity_insights(
    payload: InsightsIn, service: AIService = Depends(get_ai_service)
) -> dict:
    start = time.time()
    insights: List[ProductivityInsight] = await service.generate_productivity_insights(
        payload.user_data
    )
    _observe("/api/insights", "ok", start)
    return {"insights": [i.model_dump(by_alias=True) for i in insights]}


@router.post("/tasks/voice", response_model=TaskDraft, response_model_by_alias=True)
async def voice_to_task(
    payload: VoiceIn, service: AIService = Depends(get_ai_service)
) -> TaskDraft:
    start = time.time()
    try:
        draft = await service.parse_voice_to_task(payload.transcription)
    except AIServiceError as e:
        _observe("/api/tasks/voice", "error", start)
        raise HTTPException(status_code=e.status_code, detail=str(e))
    _observe("/api/tasks/voice", "ok", start)
    return draft
