"""Prompt templates for the remote model.

Every builder is a pure function of its arguments so the same input always
renders the same prompt.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

ANALYSIS_SYSTEM_PROMPT = (
    "You are an expert productivity consultant and project manager with deep "
    "understanding of task complexity, time estimation, and workflow "
    "optimization. Analyze tasks comprehensively and provide actionable insights."
)

JSON_ONLY_SYSTEM_PROMPT = (
    "You are a productivity assistant. Always answer with valid JSON only, "
    "without markdown fences or commentary."
)


def _render_json(value: Any) -> str:
    return json.dumps(value, sort_keys=True, ensure_ascii=False, default=str)


def build_analysis_prompt(
    title: str, description: str, context: Optional[Mapping[str, Any]] = None
) -> str:
    context_line = f"Context: {_render_json(context)}\n" if context else ""
    return (
        "Analyze this task comprehensively:\n"
        "\n"
        f'Title: "{title}"\n'
        f'Description: "{description}"\n'
        f"{context_line}"
        "\n"
        "Respond with a single JSON object and nothing else, using exactly these fields:\n"
        "{\n"
        '  "priority": <number 1-10, business impact and urgency>,\n'
        '  "estimatedHours": <number 0.5-40, realistic hours needed>,\n'
        '  "complexity": "low|medium|high",\n'
        '  "deadlineUrgency": <number 1-10, how time-sensitive>,\n'
        '  "tags": ["relevant", "keywords", "at most 8"],\n'
        '  "suggestedSubtasks": ["subtask1", "subtask2", "at most 5"],\n'
        '  "optimalTimeSlot": "morning|afternoon|evening|flexible"\n'
        "}\n"
        "\n"
        "Consider: technical complexity, dependencies, business value, "
        "time sensitivity, required skills."
    )


def build_suggestions_prompt(context: str, limit: int) -> str:
    return (
        f'Based on this user context: "{context}"\n'
        f"Generate {limit} specific, actionable task suggestions that would be "
        "valuable and relevant.\n"
        "\n"
        "Return ONLY a JSON array of strings, no other text.\n"
        "Make them practical, immediately actionable, and varied in scope.\n"
        "Consider different areas: planning, execution, review, optimization, learning.\n"
        "\n"
        'Example format: ["Task 1", "Task 2", "Task 3"]'
    )


def build_insights_prompt(user_data: Mapping[str, Any]) -> str:
    rendered = json.dumps(user_data, sort_keys=True, indent=2, ensure_ascii=False, default=str)
    return (
        "Analyze this productivity data and generate actionable insights:\n"
        "\n"
        f"User Data: {rendered}\n"
        "\n"
        "Generate 3-5 insights as a JSON array of objects with this structure:\n"
        "{\n"
        '  "type": "pattern|recommendation|warning|achievement",\n'
        '  "title": "Brief title",\n'
        '  "description": "Detailed description",\n'
        '  "impact": "high|medium|low",\n'
        '  "actionable": true|false,\n'
        '  "suggestions": ["suggestion1", "suggestion2"]\n'
        "}\n"
        "\n"
        "Focus on patterns, inefficiencies, strengths, and specific recommendations.\n"
        "Return ONLY the JSON array."
    )


def build_voice_prompt(transcription: str) -> str:
    return (
        "Convert this voice transcription into a structured task:\n"
        f'"{transcription}"\n'
        "\n"
        "Extract and return JSON with:\n"
        "{\n"
        '  "title": "brief, actionable title (max 100 chars)",\n'
        '  "description": "detailed description based on transcription",\n'
        '  "priority": <number 1-10>,\n'
        '  "estimatedHours": <number 0.5-20>,\n'
        '  "dueDate": "YYYY-MM-DD or null if not mentioned",\n'
        '  "tags": ["tag1", "tag2"],\n'
        '  "category": "work|personal|learning|health|other"\n'
        "}\n"
        "\n"
        "If transcription is unclear, make reasonable assumptions.\n"
        "Return ONLY the JSON object."
    )
