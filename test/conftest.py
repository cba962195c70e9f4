import pytest

from analysis.ai_service import AIService
from llm.llm_client import LLMClient
from storage.result_cache import InMemoryResultCache


class FakeProvider:
    def __init__(self, response_text: str):
        self._response_text = response_text
        self.calls = []

    async def generate(self, *, system: str, user: str, **params) -> str:
        self.calls.append({"system": system, "user": user, **params})
        return self._response_text


class FailingProvider:
    def __init__(self, error: Exception):
        self._error = error
        self.calls = 0

    async def generate(self, *, system: str, user: str, **params) -> str:
        self.calls += 1
        raise self._error


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def fake_provider_factory():
    def _make(response_text: str):
        return FakeProvider(response_text)
    return _make


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return InMemoryResultCache(clock=clock)


@pytest.fixture
def service_factory(cache):
    def _make(provider=None):
        return AIService(LLMClient(provider=provider), cache)
    return _make


@pytest.fixture
def failing_provider_factory():
    def _make(error: Exception):
        return FailingProvider(error)
    return _make
