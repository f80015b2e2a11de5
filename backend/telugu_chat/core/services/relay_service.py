from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from telugu_chat.core.models.message import Message
from telugu_chat.core.prompts import FALLBACK_REPLY, SYSTEM_MESSAGE
from telugu_chat.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from openai import AsyncOpenAI  # type: ignore[import-not-found]

    from telugu_chat.config import Settings


logger = get_logger(__name__)


@dataclass(frozen=True)
class RelayOptions:
    """Sampling parameters sent with every completion request."""

    model: str = "gpt-4o-mini"
    temperature: float = 0.75
    top_p: float = 0.95
    max_tokens: int = 700

    @classmethod
    def from_settings(cls, settings: Settings) -> RelayOptions:
        return cls(
            model=settings.chat_model,
            temperature=settings.chat_temperature,
            top_p=settings.chat_top_p,
            max_tokens=settings.chat_max_tokens,
        )


def filter_history(entries: Iterable[Any] | None) -> list[Message]:
    """Keep entries with a known role and non-blank string content, in order.

    Anything else is dropped without failing the request. Content is kept
    as sent; only the blank check trims it.
    """
    history: list[Message] = []
    dropped = 0
    for entry in entries or []:
        try:
            message = Message.model_validate(entry)
        except ValidationError:
            dropped += 1
            continue
        if not message.content.strip():
            dropped += 1
            continue
        history.append(message)

    if dropped:
        logger.debug("Dropped %d invalid history entries", dropped, extra={"kept": len(history)})
    return history


class ChatRelay:
    """Forwards a conversation to the completion provider and returns one reply.

    Without a provider client the relay answers every call with
    ``FALLBACK_REPLY`` instead of failing.
    """

    def __init__(
        self,
        openai_client: AsyncOpenAI | None,
        options: RelayOptions | None = None,
    ) -> None:
        self._client = openai_client
        self._options = options or RelayOptions()

    @property
    def is_live(self) -> bool:
        return self._client is not None

    @property
    def options(self) -> RelayOptions:
        return self._options

    def build_messages(self, history: Sequence[Message]) -> list[dict[str, str]]:
        return [SYSTEM_MESSAGE.to_wire(), *(m.to_wire() for m in history)]

    async def reply(self, history: Sequence[Message]) -> str:
        """Return the assistant reply for ``history``.

        Provider errors propagate to the caller unchanged.
        """
        if self._client is None:
            logger.info("No provider configured, returning fallback reply")
            return FALLBACK_REPLY

        opts = self._options
        logger.info(
            "Requesting completion - model: %s, history turns: %d",
            opts.model,
            len(history),
        )
        completion = await self._client.chat.completions.create(
            model=opts.model,
            temperature=opts.temperature,
            top_p=opts.top_p,
            messages=self.build_messages(history),
            max_tokens=opts.max_tokens,
        )

        choices = getattr(completion, "choices", None) or []
        content = choices[0].message.content if choices and choices[0].message else None
        if not content:
            logger.warning("Provider returned no usable text, substituting fallback reply")
            return FALLBACK_REPLY
        return content
