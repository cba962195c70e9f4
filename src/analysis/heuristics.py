"""
Offline keyword-based analysis used whenever the remote model is unavailable
or its reply cannot be used.
"""

from __future__ import annotations

from typing import List

from task_manager.models import ProductivityInsight, TaskAnalysis

URGENT_KEYWORDS = ("urgent", "asap", "immediately", "critical", "emergency", "deadline")
COMPLEX_KEYWORDS = ("refactor", "architecture", "design", "research", "analysis", "integration")

FALLBACK_CONFIDENCE = 70
MAX_FALLBACK_TAGS = 5

STOP_WORDS = frozenset(
    """
    the and but for are you all can had her was one our out day get has him
    his how its may new now old see two way who boy did man use what with have
    from they know want been good much some time very when come here just like
    long make many over such take than them well were
    """.split()
)


def extract_keywords(text: str, limit: int = MAX_FALLBACK_TAGS) -> List[str]:
    seen: List[str] = []
    for word in text.lower().split():
        if len(word) > 3 and word not in STOP_WORDS and word not in seen:
            seen.append(word)
    return seen[:limit]


def fallback_analysis(title: str, description: str) -> TaskAnalysis:
    text = f"{title} {description}".lower()
    is_urgent = any(keyword in text for keyword in URGENT_KEYWORDS)
    is_complex = any(keyword in text for keyword in COMPLEX_KEYWORDS)

    if is_urgent:
        priority = 8
    elif is_complex:
        priority = 6
    else:
        priority = 4

    return TaskAnalysis(
        priority=priority,
        estimated_hours=6 if is_complex else 2,
        complexity="high" if is_complex else "medium",
        sentiment="neutral",
        tags=extract_keywords(text),
        deadline_urgency=9 if is_urgent else 5,
        suggested_subtasks=[],
        optimal_time_slot="flexible",
        confidence_score=FALLBACK_CONFIDENCE,
    )


def default_suggestions() -> List[str]:
    return [
        "Review and update project documentation",
        "Schedule weekly team check-in meeting",
        "Conduct code review for recent changes",
        "Plan next sprint activities and priorities",
        "Update task dependencies and blockers",
    ]


def default_insights() -> List[ProductivityInsight]:
    return [
        ProductivityInsight(
            type="recommendation",
            title="Focus Time Optimization",
            description="Consider blocking dedicated focus time for complex tasks",
            impact="medium",
            actionable=True,
            suggestions=["Block 2-hour focus sessions", "Turn off notifications during deep work"],
        )
    ]
