import pytest
from task_manager.models import TaskAnalysis, TaskDraft

def test_analysis_priority_out_of_range():
    with pytest.raises(Exception):
        TaskAnalysis(priority=11)

def test_analysis_too_many_tags():
    with pytest.raises(Exception):
        TaskAnalysis(tags=[str(i) for i in range(9)])

def test_analysis_confidence_below_floor():
    with pytest.raises(Exception):
        TaskAnalysis(confidence_score=59)

def test_analysis_unknown_time_slot():
    with pytest.raises(Exception):
        TaskAnalysis(optimal_time_slot="night")

def test_draft_blank_title():
    with pytest.raises(Exception):
        TaskDraft(title="   ")
