"""
core/periods.py – Jendela waktu untuk "menu baru".

today = tengah malam lokal hari ini, week = now - 7x24 jam, month = now - 30x24 jam
(durasi tetap, tidak mengikuti panjang bulan kalender).
"""
from datetime import datetime, timedelta
from typing import Literal

Period = Literal["today", "week", "month"]

DEFAULT_PERIOD: Period = "week"

PERIOD_LABELS: dict[str, str] = {
    "today": "hari ini",
    "week":  "minggu ini",
    "month": "bulan ini",
}

_DAY = timedelta(days=1)


def normalize_period(period: str | None) -> Period:
    return period if period in PERIOD_LABELS else DEFAULT_PERIOD  # type: ignore[return-value]


def window_start(period: str | None, now: datetime) -> datetime:
    """Batas awal jendela (inklusif) untuk `period` relatif terhadap `now`."""
    period = normalize_period(period)
    if period == "today":
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    if period == "month":
        return now - 30 * _DAY
    return now - 7 * _DAY


def days_since(created_at: datetime, now: datetime) -> int:
    """Jumlah hari penuh sejak `created_at` (floor). Naive dianggap zona waktu `now`."""
    if created_at.tzinfo is None and now.tzinfo is not None:
        created_at = created_at.replace(tzinfo=now.tzinfo)
    elif created_at.tzinfo is not None and now.tzinfo is None:
        created_at = created_at.replace(tzinfo=None)
    return (now - created_at) // _DAY
