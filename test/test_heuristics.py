import pytest

from analysis.heuristics import (
    default_insights,
    default_suggestions,
    extract_keywords,
    fallback_analysis,
)


@pytest.mark.parametrize(
    "title, description, priority, hours, complexity, urgency",
    [
        ("Fix URGENT login", "users locked out", 8, 2, "medium", 9),
        ("Urgent refactor", "payment module", 8, 6, "high", 9),
        ("Refactor payments", "split module", 6, 6, "high", 5),
        ("Water the plants", "balcony", 4, 2, "medium", 5),
    ],
)
def test_fallback_decision_table(title, description, priority, hours, complexity, urgency):
    analysis = fallback_analysis(title, description)
    assert analysis.priority == priority
    assert analysis.estimated_hours == hours
    assert analysis.complexity == complexity
    assert analysis.deadline_urgency == urgency
    assert analysis.sentiment == "neutral"
    assert analysis.confidence_score == 70
    assert analysis.suggested_subtasks == []
    assert analysis.optimal_time_slot == "flexible"


def test_keywords_match_inside_words():
    # substring matching: "redesign" contains "design"
    assert fallback_analysis("Redesign homepage", "").complexity == "high"


def test_extract_keywords_filters_and_dedupes():
    text = "update the database schema and update that database migration with care"
    assert extract_keywords(text) == ["update", "database", "schema", "that", "migration"]


def test_extract_keywords_skips_stop_words_and_short_tokens():
    assert extract_keywords("have been with them over very much") == []
    assert extract_keywords("fix a bug now") == []


def test_defaults():
    assert len(default_suggestions()) == 5
    insights = default_insights()
    assert insights[0].type == "recommendation"
    assert insights[0].actionable is True
