"""
core/hours.py – Hitung status "buka sekarang" sebuah kantin.

Semua waktu dikonversi ke menit sejak tengah malam, batas buka & tutup inklusif.
Jam tutup < jam buka dianggap jadwal lewat tengah malam (mis. 18:00–02:00).
"""
from datetime import datetime, time
from typing import Optional, Union

TimeLike = Union[time, str, None]


def to_minutes(value: TimeLike) -> Optional[int]:
    """`time` atau "HH:MM[:SS]" → menit sejak 00:00. None/kosong → None."""
    if value is None or value == "":
        return None
    if isinstance(value, time):
        return value.hour * 60 + value.minute
    parts = str(value).split(":")
    if len(parts) < 2:
        raise ValueError(f"Format jam tidak valid: {value!r}")
    return int(parts[0]) * 60 + int(parts[1])


def format_time(value: TimeLike) -> Optional[str]:
    """Normalisasi ke "HH:MM:SS" (format yang dikirim database)."""
    if value is None or value == "":
        return None
    if isinstance(value, time):
        return value.strftime("%H:%M:%S")
    return str(value)


def is_open_now(jam_buka: TimeLike, jam_tutup: TimeLike, buka_tutup: bool, now: datetime) -> bool:
    """Flag tersimpan AND jam sekarang ada di dalam jendela [buka, tutup]."""
    buka, tutup = to_minutes(jam_buka), to_minutes(jam_tutup)
    if buka is None or tutup is None:
        return bool(buka_tutup)
    if not buka_tutup:
        return False
    current = now.hour * 60 + now.minute
    if buka <= tutup:
        return buka <= current <= tutup
    return current >= buka or current <= tutup
