from __future__ import annotations
import asyncio
import logging
import os
from typing import Optional

import httpx
from .base import LLMProvider

logger = logging.getLogger(__name__)

# Statuses worth another attempt: rate limiting and transient server errors
RETRYABLE_STATUS = {408, 409, 429, 500, 502, 503, 504}


class OpenAIProvider(LLMProvider):
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
        max_retries: int = 3,
        backoff_s: float = 0.5,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = (api_key or os.getenv("OPENAI_API_KEY", "")).strip()
        self.model = (model or os.getenv("OPENAI_MODEL", "gpt-4")).strip()
        self.base_url = (base_url or os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")).strip()
        self.timeout_s = timeout_s
        self.max_retries = max(max_retries, 0)
        self.backoff_s = backoff_s
        self._transport = transport

        if not self.api_key:
            raise RuntimeError("OPENAI_API_KEY is missing")

    async def generate(
        self,
        *,
        system: str,
        user: str,
        temperature: float = 0.3,
        max_tokens: int = 800,
        top_p: Optional[float] = None,
    ) -> str:
        url = f"{self.base_url.rstrip('/')}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if top_p is not None:
            payload["top_p"] = top_p

        last_error: Optional[Exception] = None
        for attempt in range(self.max_retries + 1):
            try:
                async with httpx.AsyncClient(timeout=self.timeout_s, transport=self._transport) as client:
                    r = await client.post(url, headers=headers, json=payload)
                    r.raise_for_status()
                    data = r.json()
                return data["choices"][0]["message"]["content"] or ""
            except httpx.HTTPStatusError as e:
                if e.response.status_code not in RETRYABLE_STATUS:
                    raise
                last_error = e
            except httpx.TransportError as e:
                last_error = e

            if attempt < self.max_retries:
                delay = self.backoff_s * (2 ** attempt)
                logger.warning(
                    f"OpenAI request failed ({last_error!r}), retry {attempt + 1}/{self.max_retries} in {delay:.1f}s"
                )
                await asyncio.sleep(delay)

        raise last_error
