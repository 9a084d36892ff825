"""core/clock.py – Sumber "sekarang" yang bisa di-inject (zona waktu kampus)."""
from datetime import datetime
from typing import Callable
from zoneinfo import ZoneInfo

Clock = Callable[[], datetime]


def make_clock(tz_name: str) -> Clock:
    tz = ZoneInfo(tz_name)
    return lambda: datetime.now(tz)
