from __future__ import annotations
import json
from typing import Optional

from llm.providers.base import LLMProvider


class MockProvider(LLMProvider):
    async def generate(
        self,
        *,
        system: str,
        user: str,
        temperature: float = 0.3,
        max_tokens: int = 800,
        top_p: Optional[float] = None,
    ) -> str:
        """
        Returns dummy JSON responses based on the prompt content.
        """
        lower_user = user.lower()

        # Task analysis request
        if "analyze this task" in lower_user:
            # Simple keyword matching for demo purposes
            priority = 8 if "urgent" in lower_user or "asap" in lower_user else 5
            slot = "morning" if "review" in lower_user or "write" in lower_user else "flexible"
            return "Here is the analysis:\n" + json.dumps({
                "priority": priority,
                "estimatedHours": 3,
                "complexity": "medium",
                "deadlineUrgency": priority,
                "tags": ["demo", "mock"],
                "suggestedSubtasks": ["Outline the work", "Do the work", "Review the result"],
                "optimalTimeSlot": slot,
            })

        if "task suggestions" in lower_user:
            return json.dumps([
                "Outline goals for the week",
                "Clear the oldest item in the inbox",
                "Block an hour for deep work",
            ])

        if "productivity data" in lower_user:
            return json.dumps([
                {
                    "type": "pattern",
                    "title": "Mornings are most productive",
                    "description": "Most completed tasks were finished before noon",
                    "impact": "medium",
                    "actionable": True,
                    "suggestions": ["Schedule complex work in the morning"],
                }
            ])

        if "voice transcription" in lower_user:
            return json.dumps({
                "title": "Call the dentist",
                "description": "Book a check-up appointment",
                "priority": 4,
                "estimatedHours": 0.5,
                "dueDate": None,
                "tags": ["health", "phone"],
                "category": "health",
            })

        # Default fallback
        return "{}"
