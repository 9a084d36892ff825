"""
core/email.py – BrevoMailer class.
Tanggung jawab: kirim email transaksional lewat Brevo REST API (httpx).
"""
import logging
import re
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

BREVO_URL = "https://api.brevo.com/v3/smtp/email"
_TAG_RE = re.compile(r"<[^>]*>")


class BrevoMailer:
    """Wrapper Brevo: `send()` → True jika terkirim, False jika gagal (error di-log)."""

    def __init__(
        self,
        api_key: str,
        sender_email: str,
        sender_name: str = "E-Kantin",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ) -> None:
        self._api_key = api_key
        self._sender_email = sender_email
        self._sender_name = sender_name
        self._transport = transport
        self._timeout = timeout

    @property
    def sender_email(self) -> str:
        return self._sender_email

    @property
    def configured(self) -> bool:
        return bool(self._api_key and self._sender_email)

    async def send(self, to: str, subject: str, html: str, text: Optional[str] = None) -> bool:
        if not self.configured:
            logger.error("Brevo config missing: api_key=%s sender=%s",
                         bool(self._api_key), bool(self._sender_email))
            return False
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                resp = await client.post(
                    BREVO_URL,
                    headers={"accept": "application/json", "api-key": self._api_key},
                    json=self._payload(to, subject, html, text),
                )
        except httpx.HTTPError as e:
            logger.error("Brevo request error: %s", e)
            return False
        if resp.is_error:
            logger.error("Brevo API error %s: %s", resp.status_code, resp.text)
            return False
        logger.info("Email sent to %s", to)
        return True

    def _payload(self, to: str, subject: str, html: str, text: Optional[str]) -> dict:
        return {
            "sender": {"name": self._sender_name, "email": self._sender_email},
            "to": [{"email": to, "name": to.split("@")[0]}],
            "subject": subject,
            "htmlContent": html,
            "textContent": text or _TAG_RE.sub("", html),
        }
