from typing import Optional

from analysis.ai_service import AIService
from llm.llm_client import LLMClient
from storage.result_cache import ResultCache
from task_manager.config import Settings

# Global instances initialized at startup
settings: Optional[Settings] = None
result_cache: Optional[ResultCache] = None
llm_client: Optional[LLMClient] = None
ai_service: Optional[AIService] = None
