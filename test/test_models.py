import pytest
from pydantic import ValidationError

from task_manager.models import ProductivityInsight, TaskAnalysis, TaskDraft


def test_task_analysis_defaults():
    a = TaskAnalysis()
    assert a.priority == 5
    assert a.estimated_hours == 2
    assert a.complexity == "medium"
    assert a.optimal_time_slot == "flexible"
    assert a.tags == []


def test_task_analysis_json_uses_camel_case():
    data = TaskAnalysis(estimated_hours=1.5).model_dump(by_alias=True)
    assert {"estimatedHours", "deadlineUrgency", "suggestedSubtasks",
            "optimalTimeSlot", "confidenceScore"} <= set(data)


def test_task_analysis_is_immutable():
    a = TaskAnalysis()
    with pytest.raises(ValidationError):
        a.priority = 9


def test_task_draft_defaults():
    d = TaskDraft()
    assert d.title == "Voice Task"
    assert d.tags == ["voice"]
    assert d.due_date is None


def test_insight_requires_title():
    with pytest.raises(ValidationError):
        ProductivityInsight(title="")
