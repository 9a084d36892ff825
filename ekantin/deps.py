"""
deps.py – Dependency Injection: Container service, dibuat 1 kali per app.

Container disimpan di `app.state.container`; routes mengambil handler lewat Depends(get_*).
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from .config import Settings
from .core.clock import Clock, make_clock
from .core.email import BrevoMailer
from .core.gemini import GeminiService
from .core.kantin import KantinService
from .core.menu import MenuService
from .core.profile import ProfileService
from .core.prompt import PromptBuilder
from .core.sales import SalesService
from .db.session import Database
from .handlers.chat_handler import ChatHandler
from .handlers.diagnostics_handler import DiagnosticsHandler
from .handlers.kantin_handler import KantinHandler
from .handlers.menu_tools_handler import MenuToolsHandler


@dataclass
class Container:
    db:          Database
    sales:       SalesService
    profiles:    ProfileService
    menu_tools:  MenuToolsHandler
    kantin:      KantinHandler
    chat:        ChatHandler
    diagnostics: DiagnosticsHandler


def build_container(
    settings: Settings,
    db: Optional[Database] = None,
    clock: Optional[Clock] = None,
    mailer: Optional[BrevoMailer] = None,
    gemini: Optional[GeminiService] = None,
) -> Container:
    db     = db or Database.from_url(settings.database_url)
    clock  = clock or make_clock(settings.timezone)
    mailer = mailer or BrevoMailer(
        api_key=settings.brevo_api_key,
        sender_email=settings.brevo_sender_email,
        sender_name=settings.brevo_sender_name,
    )
    gemini = gemini or GeminiService(settings.gemini_api_key, settings.gemini_model)

    # ── Core services ──────────────────────────────────────────────────────────
    menu   = MenuService(db)
    kantin = KantinService(db, clock)

    return Container(
        db=db,
        sales=SalesService(db),
        profiles=ProfileService(db, clock),
        menu_tools=MenuToolsHandler(menu, clock),
        kantin=KantinHandler(kantin),
        chat=ChatHandler(menu, kantin, gemini, PromptBuilder()),
        diagnostics=DiagnosticsHandler(menu, kantin, mailer, gemini),
    )


# ── Getters (dipakai di routes via Depends) ────────────────────────────────────

def _container(request: Request) -> Container:
    return request.app.state.container

def get_sales(request: Request)       -> SalesService:       return _container(request).sales
def get_profiles(request: Request)    -> ProfileService:     return _container(request).profiles
def get_menu_tools(request: Request)  -> MenuToolsHandler:   return _container(request).menu_tools
def get_kantin(request: Request)      -> KantinHandler:      return _container(request).kantin
def get_chat(request: Request)        -> ChatHandler:        return _container(request).chat
def get_diagnostics(request: Request) -> DiagnosticsHandler: return _container(request).diagnostics
