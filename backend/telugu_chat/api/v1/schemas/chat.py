from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field

from telugu_chat.core.models.base import AppBaseModel
from telugu_chat.core.models.message import Message  # noqa: TCH001
from telugu_chat.core.services.relay_service import filter_history


class ChatRequest(AppBaseModel):
    """Conversation history sent by the client on every turn."""

    model_config = ConfigDict(extra="ignore")

    history: list[Any] | None = Field(
        default=None,
        description=(
            "Ordered turns as {role, content}. Entries without a known role or "
            "with blank content are dropped rather than rejected."
        ),
    )

    @classmethod
    def from_body(cls, body: Any) -> ChatRequest:
        """Build a request from a decoded JSON body; non-objects carry no history."""
        if not isinstance(body, dict):
            return cls()
        return cls.model_validate(body)

    def messages(self) -> list[Message]:
        return filter_history(self.history)


class ChatReply(AppBaseModel):
    """Assistant reply for the submitted history."""

    reply: str = Field(..., description="Assistant text")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "reply": "నమస్తే! మీకు ఎలా సహాయం చేయగలను?"
                }
            ]
        }
    }


class ChatError(AppBaseModel):
    """Failure body returned with status 500."""

    error: str = Field(..., min_length=1, description="Human-readable failure message")
