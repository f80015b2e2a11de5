from openai import AsyncOpenAI

from telugu_chat.config import Settings
from telugu_chat.dependencies import get_chat_relay
from telugu_chat.utils.openai_client import get_openai_client


def test_key_is_optional(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("APP_OPENAI_API_KEY", raising=False)

    settings = Settings(_env_file=None)

    assert settings.openai_api_key is None
    assert settings.api_prefix == "/api"
    assert settings.chat_max_tokens == 700


def test_key_read_from_plain_or_prefixed_env(monkeypatch):
    monkeypatch.delenv("APP_OPENAI_API_KEY", raising=False)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-plain")
    assert Settings(_env_file=None).openai_api_key == "sk-plain"

    monkeypatch.setenv("APP_OPENAI_API_KEY", "sk-prefixed")
    assert Settings(_env_file=None).openai_api_key == "sk-prefixed"


def test_openai_client_only_with_key():
    assert get_openai_client(None) is None
    assert get_openai_client("") is None

    client = get_openai_client("sk-test")
    assert isinstance(client, AsyncOpenAI)
    assert client.max_retries == 0
    assert get_openai_client("sk-test") is client


def test_relay_dependency_uses_settings(monkeypatch):
    monkeypatch.setattr("telugu_chat.dependencies.settings.openai_api_key", None)

    relay = get_chat_relay()

    assert relay.is_live is False
