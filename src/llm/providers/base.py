from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional


class LLMProvider(ABC):
    @abstractmethod
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
        Must return the model output as TEXT (JSON is extracted and validated by the caller).
        Implementations own their timeout and retry budget.
        """
        raise NotImplementedError
