from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class _RawReply(BaseModel):
    """Partial record decoded from a model reply.

    Every field is untrusted: values keep whatever type the model produced and
    are only made safe by analysis.validation.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RawTaskAnalysis(_RawReply):
    priority: Optional[Any] = None
    estimated_hours: Optional[Any] = Field(None, alias="estimatedHours")
    complexity: Optional[Any] = None
    tags: Optional[Any] = None
    deadline_urgency: Optional[Any] = Field(None, alias="deadlineUrgency")
    suggested_subtasks: Optional[Any] = Field(None, alias="suggestedSubtasks")
    optimal_time_slot: Optional[Any] = Field(None, alias="optimalTimeSlot")


class RawInsight(_RawReply):
    type: Optional[Any] = None
    title: Optional[Any] = None
    description: Optional[Any] = None
    impact: Optional[Any] = None
    actionable: Optional[Any] = None
    suggestions: Optional[Any] = None


class RawVoiceTask(_RawReply):
    title: Optional[Any] = None
    description: Optional[Any] = None
    priority: Optional[Any] = None
    estimated_hours: Optional[Any] = Field(None, alias="estimatedHours")
    due_date: Optional[Any] = Field(None, alias="dueDate")
    tags: Optional[Any] = None
    category: Optional[Any] = None
