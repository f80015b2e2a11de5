from __future__ import annotations

from enum import Enum
from uuid import uuid4

from pydantic import ConfigDict, Field

from .base import AppBaseModel


class Role(str, Enum):
    """Author of a conversation turn."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Message(AppBaseModel):
    """A single conversation turn. Never mutated after creation."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    role: Role = Field(..., description="Who authored the turn")
    content: str = Field(..., description="Text of the turn")

    def to_wire(self) -> dict[str, str]:
        """Plain ``{role, content}`` mapping as sent to the relay and the provider."""
        return {"role": self.role.value, "content": self.content}


class TranscriptMessage(Message):
    """Message as held by a conversation client, keyed for re-rendering."""

    id: str = Field(default_factory=lambda: uuid4().hex, description="Presentation key")
