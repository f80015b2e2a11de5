from types import SimpleNamespace
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from telugu_chat.core.services.relay_service import ChatRelay, RelayOptions
from telugu_chat.dependencies import get_chat_relay
from telugu_chat.main import app


@pytest.fixture
def anyio_backend():
    return "asyncio"


def make_completion(*contents):
    """Shape of an OpenAI chat completion with one choice per content."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    )


@pytest.fixture
def fake_openai():
    """Stand-in for AsyncOpenAI exposing chat.completions.create."""
    create = AsyncMock(return_value=make_completion("నమస్కారం! ఎలా ఉన్నారు?"))
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


@pytest.fixture
def live_relay(fake_openai):
    return ChatRelay(fake_openai, RelayOptions())


@pytest.fixture
def fallback_relay():
    return ChatRelay(None, RelayOptions())


@pytest.fixture
def api_client():
    """TestClient factory serving the app with the given relay."""

    def _make(relay):
        app.dependency_overrides[get_chat_relay] = lambda: relay
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def mock_http():
    """AsyncClient factory backed by a request handler instead of the network."""
    def _make(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://relay.test")

    return _make
