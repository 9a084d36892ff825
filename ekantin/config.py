"""
config.py – Settings dari environment (.env dimuat oleh main.py).
"""
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    database_url:       str = "sqlite:///./ekantin.db"
    timezone:           str = "Asia/Jakarta"
    gemini_api_key:     str = ""
    gemini_model:       str = "gemini-2.0-flash"
    brevo_api_key:      str = ""
    brevo_sender_email: str = ""
    brevo_sender_name:  str = "E-Kantin"
    cors_origins:       tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            timezone=os.getenv("APP_TIMEZONE", cls.timezone),
            gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
            gemini_model=os.getenv("GEMINI_MODEL", cls.gemini_model),
            brevo_api_key=os.getenv("BREVO_API_KEY", ""),
            brevo_sender_email=os.getenv("BREVO_SENDER_EMAIL", ""),
            brevo_sender_name=os.getenv("BREVO_SENDER_NAME", cls.brevo_sender_name),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        )
