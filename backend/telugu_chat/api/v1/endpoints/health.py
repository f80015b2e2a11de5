from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from telugu_chat import __version__
from telugu_chat.config import settings
from telugu_chat.core.services.relay_service import ChatRelay
from telugu_chat.dependencies import get_chat_relay

router = APIRouter()


@router.get("/")
async def health_check():
    """Health check endpoint."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "service": "telugu-chat-api",
            "version": __version__
        }
    )


@router.get("/ready")
async def readiness_check(relay: ChatRelay = Depends(get_chat_relay)):
    """Readiness check endpoint."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "ready",
            "ai_service": "available" if relay.is_live else "fallback",
            "model": relay.options.model,
            "api_prefix": settings.api_prefix
        }
    )
