from __future__ import annotations
import os
from typing import Optional

import httpx
from .base import LLMProvider


class OllamaProvider(LLMProvider):
    def __init__(
        self,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.model = (model or os.getenv("OLLAMA_MODEL", "llama3.1")).strip()
        self.base_url = (base_url or os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")).strip()
        self.timeout_s = timeout_s
        self._transport = transport

    async def generate(
        self,
        *,
        system: str,
        user: str,
        temperature: float = 0.3,
        max_tokens: int = 800,
        top_p: Optional[float] = None,
    ) -> str:
        url = f"{self.base_url.rstrip('/')}/api/chat"
        options = {"temperature": temperature, "num_predict": max_tokens}
        if top_p is not None:
            options["top_p"] = top_p
        payload = {
            "model": self.model,
            "stream": False,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "options": options,
        }

        async with httpx.AsyncClient(timeout=self.timeout_s, transport=self._transport) as client:
            r = await client.post(url, json=payload)
            r.raise_for_status()
            data = r.json()

        return data["message"]["content"]
