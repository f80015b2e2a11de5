from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from telugu_chat.api.v1.schemas.chat import ChatError, ChatReply, ChatRequest
from telugu_chat.core.prompts import RELAY_FAILURE
from telugu_chat.core.services.relay_service import ChatRelay  # noqa: TCH001
from telugu_chat.dependencies import get_chat_relay
from telugu_chat.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=ChatReply,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ChatError}},
)
async def relay_chat(
    request: Request,
    relay: ChatRelay = Depends(get_chat_relay),
):
    """Relay the submitted history to the assistant and return its reply.

    The body is parsed here rather than by FastAPI so that malformed input
    surfaces as ``{error}`` with status 500 like any provider failure.
    """
    try:
        raw = await request.body()
        body = await request.json() if raw.strip() else None
        payload = ChatRequest.from_body(body)
        reply = await relay.reply(payload.messages())
    except Exception as err:
        logger.exception("Chat relay failed: %s", err)
        message = str(err).strip() or RELAY_FAILURE
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ChatError(error=message).model_dump(),
        )

    return ChatReply(reply=reply)
