from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_roast_llm
from app.main import app
from app.models.llm_cloud import RoastLLM


class FakeMessages:
    def __init__(self, text="Line one.\nLine two.", error=None):
        self.text = text
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        content = [] if self.text is None else [SimpleNamespace(type="text", text=self.text)]
        return SimpleNamespace(content=content)


class FakeAnthropic:
    def __init__(self, **kwargs):
        self.messages = FakeMessages(**kwargs)
        self.closed = False

    async def close(self):
        self.closed = True


@pytest.fixture
def make_anthropic():
    return FakeAnthropic


@pytest.fixture
def fake_anthropic():
    return FakeAnthropic()


@pytest.fixture
def client_with():
    """Builds a TestClient whose roast endpoint talks to the given fake SDK client."""
    def _make(anthropic_client, raise_server_exceptions=True):
        llm = RoastLLM(anthropic_client, model="test-model", max_tokens=500)
        app.dependency_overrides[get_roast_llm] = lambda: llm
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(client_with, fake_anthropic):
    return client_with(fake_anthropic)
