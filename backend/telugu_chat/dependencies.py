from __future__ import annotations

from telugu_chat.config import settings
from telugu_chat.core.services.relay_service import ChatRelay, RelayOptions
from telugu_chat.utils.openai_client import get_openai_client


def get_chat_relay() -> ChatRelay:
    """Construct the chat relay from settings; no API key means fallback mode."""
    return ChatRelay(
        get_openai_client(settings.openai_api_key),
        RelayOptions.from_settings(settings),
    )
