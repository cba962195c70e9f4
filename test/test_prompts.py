from llm.prompts import (
    build_analysis_prompt,
    build_insights_prompt,
    build_suggestions_prompt,
    build_voice_prompt,
)


def test_analysis_prompt_names_every_field_with_bounds():
    prompt = build_analysis_prompt("Ship release", "Tag and publish v2")
    assert 'Title: "Ship release"' in prompt
    assert 'Description: "Tag and publish v2"' in prompt
    for fragment in (
        '"priority": <number 1-10',
        '"estimatedHours": <number 0.5-40',
        '"complexity": "low|medium|high"',
        '"deadlineUrgency": <number 1-10',
        '"tags"',
        "at most 8",
        '"suggestedSubtasks"',
        "at most 5",
        '"optimalTimeSlot": "morning|afternoon|evening|flexible"',
    ):
        assert fragment in prompt
    assert "single JSON object and nothing else" in prompt
    assert "Context:" not in prompt


def test_analysis_prompt_is_deterministic_for_context():
    a = build_analysis_prompt("T", "D", {"team": "core", "sprint": 4})
    b = build_analysis_prompt("T", "D", {"sprint": 4, "team": "core"})
    assert a == b
    assert 'Context: {"sprint": 4, "team": "core"}' in a


def test_other_prompts():
    assert "Generate 3 specific" in build_suggestions_prompt("planning week", 3)
    assert "JSON array" in build_insights_prompt({"completed": 12})
    assert '"Remind me to call Sam"' in build_voice_prompt("Remind me to call Sam")
