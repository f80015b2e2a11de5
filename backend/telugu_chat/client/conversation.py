from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from telugu_chat.core.models.message import Role, TranscriptMessage
from telugu_chat.core.prompts import GREETING, SERVER_NO_ANSWER, UNEXPECTED_ERROR
from telugu_chat.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

logger = get_logger(__name__)

CHAT_PATH = "/api/chat"


class RelayError(Exception):
    """The relay answered without a usable reply."""


class ConversationState:
    """In-memory transcript plus the in-flight flag, observable by subscribers.

    Listeners receive the state after every change. A listener that raises
    is logged and skipped; it does not stop the others.
    """

    def __init__(self, messages: Sequence[TranscriptMessage] | None = None) -> None:
        self._messages: list[TranscriptMessage] = list(messages or [])
        self._is_sending = False
        self._listeners: list[Callable[[ConversationState], None]] = []

    @property
    def messages(self) -> tuple[TranscriptMessage, ...]:
        return tuple(self._messages)

    @property
    def is_sending(self) -> bool:
        return self._is_sending

    def subscribe(self, listener: Callable[[ConversationState], None]) -> Callable[[], None]:
        """Register ``listener``; returns a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def history(self) -> list[dict[str, str]]:
        return [m.to_wire() for m in self._messages]

    def append(self, role: Role, content: str) -> TranscriptMessage:
        message = TranscriptMessage(role=role, content=content)
        self._messages.append(message)
        self._emit()
        return message

    def set_sending(self, value: bool) -> None:
        if self._is_sending == value:
            return
        self._is_sending = value
        self._emit()

    def _emit(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Conversation listener failed")


class ConversationClient:
    """Talks to the chat relay one turn at a time.

    ``submit`` appends the user's turn before the request goes out and the
    assistant's turn (or an error text) once it returns. While a turn is in
    flight further submissions are ignored.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        *,
        http_client: httpx.AsyncClient | None = None,
        state: ConversationState | None = None,
        greeting: str | None = GREETING,
    ) -> None:
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(base_url=base_url)
        if state is None:
            state = ConversationState()
            if greeting:
                state.append(Role.ASSISTANT, greeting)
        self.state = state

    async def __aenter__(self) -> ConversationClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    def can_send(self, text: str | None) -> bool:
        return bool(text and text.strip()) and not self.state.is_sending

    async def submit(self, text: str | None) -> bool:
        """Send ``text`` as the next user turn. Returns False if it was ignored."""
        if not self.can_send(text):
            return False

        self.state.append(Role.USER, text.strip())
        # Raised before the first await so concurrent submits see it.
        self.state.set_sending(True)
        try:
            try:
                reply = await self._request_reply(self.state.history())
            except Exception as err:
                logger.warning("Chat turn failed: %s", err)
                reply = str(err).strip() or UNEXPECTED_ERROR
            self.state.append(Role.ASSISTANT, reply)
        finally:
            self.state.set_sending(False)
        return True

    async def _request_reply(self, history: list[dict[str, str]]) -> str:
        response = await self._http.post(CHAT_PATH, json={"history": history})

        if not response.is_success:
            raise RelayError(self._error_text(response) or SERVER_NO_ANSWER)

        data = response.json()
        reply = data.get("reply") if isinstance(data, dict) else None
        if not isinstance(reply, str):
            raise RelayError(UNEXPECTED_ERROR)
        return reply.strip()

    @staticmethod
    def _error_text(response: httpx.Response) -> str | None:
        try:
            payload = response.json()
        except ValueError:
            return None
        error = payload.get("error") if isinstance(payload, dict) else None
        return error if isinstance(error, str) and error else None
