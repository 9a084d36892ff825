"""routes/gemini.py – POST /api/gemini/chat"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_chat
from ..handlers.chat_handler import ChatHandler
from ..models import GeminiChatRequest, GeminiChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/gemini", tags=["AI"])

APOLOGY = "Maaf, saya sedang mengalami masalah. Silakan coba lagi nanti ya!"


@router.post("/chat", response_model=GeminiChatResponse)
async def chat(
    req: Optional[GeminiChatRequest] = None,
    handler: ChatHandler = Depends(get_chat),
):
    try:
        return await handler.handle(req or GeminiChatRequest())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Gemini API Error: %s", e)
        raise HTTPException(status_code=500, detail=APOLOGY)
