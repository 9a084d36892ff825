"""
handlers/chat_handler.py – ChatHandler class.
Tanggung jawab: orkestrasi MenuService + KantinService + Gemini untuk /api/gemini/chat.
"""
import logging

from ..core.gemini import GeminiService
from ..core.kantin import KantinService
from ..core.menu import MenuService
from ..core.menu_query import MenuQuery
from ..core.prompt import MAX_CONTEXT_MENUS, PromptBuilder
from ..models import GeminiChatRequest, GeminiChatResponse

logger = logging.getLogger(__name__)


class ChatHandler:
    """Asisten E-Kantin: jawab pertanyaan user dengan konteks menu & kantin."""

    def __init__(
        self,
        menu: MenuService,
        kantin: KantinService,
        gemini: GeminiService,
        prompts: PromptBuilder,
    ) -> None:
        self._menu = menu
        self._kantin = kantin
        self._gemini = gemini
        self._prompts = prompts

    async def handle(self, req: GeminiChatRequest) -> GeminiChatResponse:
        message = (req.message or "").strip()
        if not message:
            raise ValueError("Message is required")

        menus = await self._menu.list_menu(MenuQuery(active_kantin=True, limit=MAX_CONTEXT_MENUS))
        kantins = await self._kantin.list_active()
        logger.info("[Chat] '%s' (menu=%d, kantin=%d)", message[:40], len(menus), len(kantins))

        system = self._prompts.build_system(menus, kantins)
        reply = await self._gemini.ask(message, system=system)
        return GeminiChatResponse(response=reply)
