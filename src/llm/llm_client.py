import logging
import time
from typing import Optional

from llm.errors import EmptyResponseError, RemoteCallError, RemoteUnavailableError
from llm.providers.base import LLMProvider
from task_manager.config import Settings
from task_manager.metrics import LLM_LATENCY_SECONDS

logger = logging.getLogger(__name__)


def build_provider(settings: Settings) -> Optional[LLMProvider]:
    """Create the configured provider, or None when AI features are disabled."""
    if settings.llm_provider == "mock":
        from llm.providers.mock_provider import MockProvider

        return MockProvider()

    if settings.llm_provider == "ollama":
        from llm.providers.ollama_provider import OllamaProvider

        return OllamaProvider(
            model=settings.ollama_model,
            base_url=settings.ollama_base_url,
            timeout_s=settings.llm_timeout_s,
        )

    if settings.llm_provider != "openai":
        logger.warning(f"Unknown LLM_PROVIDER '{settings.llm_provider}'. AI features will be disabled.")
        return None

    from llm.providers.openai_provider import OpenAIProvider

    try:
        return OpenAIProvider(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url,
            timeout_s=settings.llm_timeout_s,
            max_retries=settings.llm_max_retries,
        )
    except RuntimeError as e:
        logger.warning(f"{e}. AI features will be disabled.")
        return None


class LLMClient:
    """Single call boundary to the remote model.

    Every provider failure surfaces as one of the llm.errors types so callers
    can fall back uniformly; the original cause is kept as __cause__ and logged.
    """

    def __init__(self, provider: Optional[LLMProvider] = None):
        self.provider = provider

    @property
    def available(self) -> bool:
        return self.provider is not None

    async def complete(
        self,
        system: str,
        user: str,
        *,
        temperature: float = 0.3,
        max_tokens: int = 800,
        top_p: Optional[float] = None,
    ) -> str:
        if self.provider is None:
            raise RemoteUnavailableError("AI service not initialized")

        start = time.perf_counter()
        try:
            text = await self.provider.generate(
                system=system,
                user=user,
                temperature=temperature,
                max_tokens=max_tokens,
                top_p=top_p,
            )
        except Exception as e:
            logger.error(f"Remote completion failed: {e!r}")
            raise RemoteCallError(f"Remote completion failed: {e}") from e
        finally:
            try:
                LLM_LATENCY_SECONDS.observe(time.perf_counter() - start)
            except Exception:
                pass

        if not text or not text.strip():
            raise EmptyResponseError("Empty response from model")
        return text
