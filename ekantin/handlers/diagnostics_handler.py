"""
handlers/diagnostics_handler.py – DiagnosticsHandler class.
Tanggung jawab: cek koneksi database, email (Brevo) dan Gemini.
"""
import logging

from sqlalchemy.exc import SQLAlchemyError

from ..core.email import BrevoMailer
from ..core.gemini import GeminiService
from ..core.kantin import KantinService
from ..core.menu import MenuService

logger = logging.getLogger(__name__)

TEST_SUBJECT = "Test Email dari E-Kantin"
TEST_HTML = "<h1>Test Email</h1><p>Jika kamu menerima email ini, konfigurasi Brevo sudah benar!</p>"


class DiagnosticCheckFailed(Exception):
    """Cek gagal; `payload` dikirim apa adanya dengan status 500."""

    def __init__(self, payload: dict) -> None:
        super().__init__(payload.get("error", "diagnostic failed"))
        self.payload = payload


class DiagnosticsHandler:

    def __init__(
        self,
        menu: MenuService,
        kantin: KantinService,
        mailer: BrevoMailer,
        gemini: GeminiService,
    ) -> None:
        self._menu = menu
        self._kantin = kantin
        self._mailer = mailer
        self._gemini = gemini

    async def test_db(self) -> dict:
        logger.info("[TestDB] Testing database connection...")
        try:
            kantin = await self._kantin.sample(limit=5)
        except SQLAlchemyError as e:
            logger.error("[TestDB] Kantin error: %s", e)
            raise DiagnosticCheckFailed({"success": False, "error": "Kantin query failed", "details": str(e)})
        try:
            menu = await self._menu.sample_available(limit=10)
        except SQLAlchemyError as e:
            logger.error("[TestDB] Menu error: %s", e)
            raise DiagnosticCheckFailed({"success": False, "error": "Menu query failed", "details": str(e)})

        logger.info("[TestDB] Success! Kantin: %d Menu: %d", len(kantin), len(menu))
        return {
            "success": True,
            "kantin": {"count": len(kantin), "data": kantin},
            "menu": {"count": len(menu), "data": menu},
        }

    async def test_email(self) -> dict:
        to = self._mailer.sender_email
        if not to:
            raise DiagnosticCheckFailed({"error": "BREVO_SENDER_EMAIL not set"})
        ok = await self._mailer.send(to=to, subject=TEST_SUBJECT, html=TEST_HTML)
        return {
            "success": ok,
            "message": "Email terkirim! Cek inbox." if ok else "Gagal kirim email. Cek log server untuk error.",
        }

    async def test_gemini(self) -> dict:
        logger.info("[TestGemini] Testing Gemini API...")
        try:
            text = await self._gemini.ping()
        except Exception as e:
            logger.error("[TestGemini] Error: %s", e)
            raise DiagnosticCheckFailed({"success": False, "error": str(e)})
        return {"success": True, "response": text, "model": self._gemini.model_name}
