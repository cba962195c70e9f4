import logging

from fastapi import FastAPI

from analysis.ai_service import AIService
from api import state
from api.routers import ops, tasks
from llm.llm_client import LLMClient, build_provider
from storage.result_cache import build_result_cache
from task_manager.config import Settings

_settings = Settings.from_env()

# Logging configuration
logging.basicConfig(
    level=getattr(logging, _settings.log_level, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(title="AI Task Manager API")
app.include_router(ops.router)
app.include_router(tasks.router)


@app.on_event("startup")
async def startup() -> None:
    settings = Settings.from_env()
    state.settings = settings
    state.result_cache = build_result_cache(settings.redis_url)
    state.llm_client = LLMClient(provider=build_provider(settings))
    state.ai_service = AIService(
        state.llm_client,
        state.result_cache,
        analysis_ttl_s=settings.analysis_cache_ttl_s,
        suggestions_ttl_s=settings.suggestions_cache_ttl_s,
    )
    logger.info(
        f"AI service ready (provider={settings.llm_provider}, "
        f"enabled={state.llm_client.available}, cache={state.result_cache.backend})"
    )


@app.on_event("shutdown")
async def shutdown() -> None:
    if state.result_cache is not None:
        try:
            await state.result_cache.close()
        except Exception as e:
            logger.error(f"Error closing result cache: {e}")
    state.ai_service = None
    state.llm_client = None
    state.result_cache = None
    logger.info("AI service stopped")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
