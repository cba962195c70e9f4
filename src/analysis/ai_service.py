"""
Task-analysis pipeline and the other model-backed operations.

analyze_task runs:

    cache check -> prompt -> remote call -> parse -> validate -> cache write

and any failure after the cache check drops to the keyword heuristics. The
LLM client and result cache are injected, so tests can substitute doubles.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Mapping, Optional

from pydantic import ValidationError

from analysis.heuristics import default_insights, default_suggestions, fallback_analysis
from analysis.sentiment import classify_sentiment
from analysis.validation import (
    validate_bool,
    validate_choice,
    validate_date,
    validate_list,
    validate_range,
    validate_text,
)
from llm.errors import ServiceUnavailableError, VoiceProcessingError
from llm.llm_client import LLMClient
from llm.prompts import (
    ANALYSIS_SYSTEM_PROMPT,
    JSON_ONLY_SYSTEM_PROMPT,
    build_analysis_prompt,
    build_insights_prompt,
    build_suggestions_prompt,
    build_voice_prompt,
)
from llm.response_parser import extract_json
from llm.schemas import RawInsight, RawTaskAnalysis, RawVoiceTask
from storage.result_cache import ResultCache, analysis_cache_key, suggestions_cache_key
from task_manager.metrics import ANALYSIS_TOTAL
from task_manager.models import ProductivityInsight, TaskAnalysis, TaskDraft

logger = logging.getLogger(__name__)

ANALYSIS_TTL_S = 3600
SUGGESTIONS_TTL_S = 1800
MAX_INSIGHTS = 5
MAX_SUGGESTIONS = 20


def score_confidence(raw: RawTaskAnalysis) -> int:
    """Trust estimate for a model reply, based on which fields it filled in."""
    score = 85
    if not raw.priority:
        score -= 10
    if not raw.estimated_hours:
        score -= 10
    if not isinstance(raw.tags, list) or not raw.tags:
        score -= 5
    if not isinstance(raw.suggested_subtasks, list):
        score -= 5
    return max(min(score, 99), 60)


def build_task_analysis(raw: RawTaskAnalysis, description: str) -> TaskAnalysis:
    return TaskAnalysis(
        priority=validate_range(raw.priority, 1, 10, 5),
        estimated_hours=validate_range(raw.estimated_hours, 0.5, 40, 2),
        complexity=validate_choice(raw.complexity, ("low", "medium", "high"), "medium"),
        sentiment=classify_sentiment(description),
        tags=validate_list(raw.tags, 8),
        deadline_urgency=validate_range(raw.deadline_urgency, 1, 10, 5),
        suggested_subtasks=validate_list(raw.suggested_subtasks, 5),
        optimal_time_slot=validate_choice(
            raw.optimal_time_slot, ("morning", "afternoon", "evening", "flexible"), "flexible"
        ),
        confidence_score=score_confidence(raw),
    )


def build_insight(raw: RawInsight) -> Optional[ProductivityInsight]:
    title = validate_text(raw.title, "")
    if not title:
        return None
    return ProductivityInsight(
        type=validate_choice(
            raw.type, ("pattern", "recommendation", "warning", "achievement"), "recommendation"
        ),
        title=title,
        description=validate_text(raw.description, ""),
        impact=validate_choice(raw.impact, ("high", "medium", "low"), "medium"),
        actionable=validate_bool(raw.actionable, True),
        suggestions=validate_list(raw.suggestions, 5),
    )


def build_task_draft(raw: RawVoiceTask, transcription: str) -> TaskDraft:
    tags = validate_list(raw.tags, 5) if isinstance(raw.tags, list) else ["voice"]
    return TaskDraft(
        title=validate_text(raw.title, "Voice Task", max_length=100),
        description=validate_text(raw.description, transcription),
        priority=validate_range(raw.priority, 1, 10, 5),
        estimated_hours=validate_range(raw.estimated_hours, 0.5, 20, 1),
        due_date=validate_date(raw.due_date),
        tags=tags,
        category=validate_choice(
            raw.category, ("work", "personal", "learning", "health", "other"), "other"
        ),
    )


def _record(source: str) -> None:
    try:
        ANALYSIS_TOTAL.labels(source=source).inc()
    except Exception:
        pass


class AIService:
    """Model-backed task enrichment with heuristic fallbacks."""

    def __init__(
        self,
        llm_client: LLMClient,
        cache: ResultCache,
        analysis_ttl_s: int = ANALYSIS_TTL_S,
        suggestions_ttl_s: int = SUGGESTIONS_TTL_S,
    ):
        self.llm = llm_client
        self.cache = cache
        self.analysis_ttl_s = analysis_ttl_s
        self.suggestions_ttl_s = suggestions_ttl_s

    @property
    def available(self) -> bool:
        return self.llm.available

    # cache helpers: a broken cache degrades to "miss" / "not stored"

    async def _cache_get(self, key: str) -> Optional[str]:
        try:
            return await self.cache.get(key)
        except Exception as e:
            logger.warning(f"Cache read failed for {key}: {e}")
            return None

    async def _cache_set(self, key: str, ttl_seconds: int, value: str) -> None:
        try:
            await self.cache.setex(key, ttl_seconds, value)
        except Exception as e:
            logger.warning(f"Cache write failed for {key}: {e}")

    async def analyze_task(
        self, title: str, description: str, context: Optional[Mapping[str, Any]] = None
    ) -> TaskAnalysis:
        """Analyze a task. Never raises: failures produce the heuristic analysis."""
        key = analysis_cache_key(title, description)
        cached = await self._cache_get(key)
        if cached:
            try:
                analysis = TaskAnalysis.model_validate_json(cached)
            except ValidationError as e:
                logger.warning(f"Ignoring unreadable cached analysis: {e}")
            else:
                logger.info("Using cached task analysis")
                _record("cache")
                return analysis

        try:
            prompt = build_analysis_prompt(title, description, context)
            reply = await self.llm.complete(
                ANALYSIS_SYSTEM_PROMPT,
                prompt,
                temperature=0.3,
                max_tokens=800,
                top_p=0.9,
            )
            raw = RawTaskAnalysis.model_validate(extract_json(reply, kind="object"))
            analysis = build_task_analysis(raw, description)
        except Exception as e:
            logger.warning(f"AI task analysis failed, using fallback: {e}")
            _record("fallback")
            return fallback_analysis(title, description)

        await self._cache_set(key, self.analysis_ttl_s, analysis.to_json())
        logger.info(f"AI task analysis completed with {analysis.confidence_score}% confidence")
        _record("model")
        return analysis

    async def generate_task_suggestions(
        self, user_id: str, context: str, limit: int = 5
    ) -> List[str]:
        limit = max(limit, 0)
        key = suggestions_cache_key(user_id, context)
        cached = await self._cache_get(key)
        if cached:
            try:
                stored = validate_list(json.loads(cached), MAX_SUGGESTIONS)
            except ValueError as e:
                logger.warning(f"Ignoring unreadable cached suggestions: {e}")
            else:
                # a shorter cached list cannot satisfy a larger limit
                if len(stored) >= limit:
                    return stored[:limit]

        try:
            reply = await self.llm.complete(
                JSON_ONLY_SYSTEM_PROMPT,
                build_suggestions_prompt(context, limit),
                temperature=0.7,
                max_tokens=400,
            )
            suggestions = validate_list(extract_json(reply, kind="array"), MAX_SUGGESTIONS)
        except Exception as e:
            logger.error(f"Task suggestion generation failed: {e}")
            return default_suggestions()[:limit]

        if not suggestions:
            return default_suggestions()[:limit]

        await self._cache_set(key, self.suggestions_ttl_s, json.dumps(suggestions))
        return suggestions[:limit]

    async def generate_productivity_insights(
        self, user_data: Mapping[str, Any]
    ) -> List[ProductivityInsight]:
        try:
            reply = await self.llm.complete(
                JSON_ONLY_SYSTEM_PROMPT,
                build_insights_prompt(user_data),
                temperature=0.4,
                max_tokens=1000,
            )
            entries = extract_json(reply, kind="array")
            insights = []
            for entry in entries:
                if not isinstance(entry, dict):
                    continue
                insight = build_insight(RawInsight.model_validate(entry))
                if insight is not None:
                    insights.append(insight)
        except Exception as e:
            logger.error(f"Productivity insights generation failed: {e}")
            return default_insights()

        return insights[:MAX_INSIGHTS] or default_insights()

    async def parse_voice_to_task(self, transcription: str) -> TaskDraft:
        """Turn a transcription into a TaskDraft.

        Unlike the other operations this one has no offline fallback, so it
        raises ServiceUnavailableError when no model is configured and
        VoiceProcessingError for any other failure.
        """
        if not self.available:
            raise ServiceUnavailableError("AI service not available")

        try:
            reply = await self.llm.complete(
                JSON_ONLY_SYSTEM_PROMPT,
                build_voice_prompt(transcription),
                temperature=0.3,
                max_tokens=500,
            )
            raw = RawVoiceTask.model_validate(extract_json(reply, kind="object"))
            return build_task_draft(raw, transcription)
        except Exception as e:
            logger.error(f"Voice to task conversion failed: {e}")
            raise VoiceProcessingError("Failed to process voice input") from e
