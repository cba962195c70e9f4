from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


Complexity = Literal["low", "medium", "high"]
Sentiment = Literal["positive", "negative", "neutral"]
TimeSlot = Literal["morning", "afternoon", "evening", "flexible"]
InsightType = Literal["pattern", "recommendation", "warning", "achievement"]
Impact = Literal["high", "medium", "low"]
TaskCategory = Literal["work", "personal", "learning", "health", "other"]


class _CamelModel(BaseModel):
    # API payloads and cache entries use the camelCase field names
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class TaskAnalysis(_CamelModel):
    priority: float = Field(5, ge=1, le=10)
    estimated_hours: float = Field(2, ge=0.5, le=40, alias="estimatedHours")
    complexity: Complexity = "medium"
    sentiment: Sentiment = "neutral"
    tags: List[str] = Field(default_factory=list, max_length=8)
    deadline_urgency: float = Field(5, ge=1, le=10, alias="deadlineUrgency")
    suggested_subtasks: List[str] = Field(
        default_factory=list, max_length=5, alias="suggestedSubtasks"
    )
    optimal_time_slot: TimeSlot = Field("flexible", alias="optimalTimeSlot")
    confidence_score: int = Field(70, ge=60, le=99, alias="confidenceScore")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class ProductivityInsight(_CamelModel):
    type: InsightType = "recommendation"
    title: str = Field(..., min_length=1)
    description: str = ""
    impact: Impact = "medium"
    actionable: bool = True
    suggestions: List[str] = Field(default_factory=list, max_length=5)


class TaskDraft(_CamelModel):
    """Structured task produced from a voice transcription."""

    title: str = Field("Voice Task", min_length=1, max_length=100)
    description: str = ""
    priority: float = Field(5, ge=1, le=10)
    estimated_hours: float = Field(1, ge=0.5, le=20, alias="estimatedHours")
    due_date: Optional[str] = Field(None, alias="dueDate")
    tags: List[str] = Field(default_factory=lambda: ["voice"], max_length=5)
    category: TaskCategory = "other"

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("title must not be blank")
        return v2
