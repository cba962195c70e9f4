import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else default


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, read once from the environment at startup."""

    llm_provider: str = "openai"
    openai_api_key: str = ""
    openai_model: str = "gpt-4"
    openai_base_url: str = "https://api.openai.com/v1"
    ollama_model: str = "llama3.1"
    ollama_base_url: str = "http://localhost:11434"
    llm_timeout_s: float = 30.0
    llm_max_retries: int = 3

    redis_url: str = ""
    analysis_cache_ttl_s: int = 3600
    suggestions_cache_ttl_s: int = 1800

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            llm_provider=os.getenv("LLM_PROVIDER", "openai").strip().lower(),
            openai_api_key=os.getenv("OPENAI_API_KEY", "").strip(),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4").strip(),
            openai_base_url=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1").strip(),
            ollama_model=os.getenv("OLLAMA_MODEL", "llama3.1").strip(),
            ollama_base_url=os.getenv("OLLAMA_BASE_URL", "http://localhost:11434").strip(),
            llm_timeout_s=_env_float("LLM_TIMEOUT_S", 30.0),
            llm_max_retries=_env_int("LLM_MAX_RETRIES", 3),
            redis_url=os.getenv("REDIS_URL", "").strip(),
            analysis_cache_ttl_s=_env_int("ANALYSIS_CACHE_TTL_S", 3600),
            suggestions_cache_ttl_s=_env_int("SUGGESTIONS_CACHE_TTL_S", 1800),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        )
