"""
core/kantin.py – KantinService class.
Tanggung jawab: baca tabel `kantin` + hitung `is_open_now` per baris.
"""
import asyncio
import logging
from typing import Optional

from ..db.models import STATUS_KANTIN_AKTIF, Kantin
from ..db.session import Database
from ..models import KantinItem
from .clock import Clock
from .hours import format_time, is_open_now

logger = logging.getLogger(__name__)


class KantinService:
    """Info kantin aktif (jam buka/tutup, status buka sekarang)."""

    def __init__(self, db: Database, clock: Clock) -> None:
        self._db = db
        self._clock = clock

    async def get_info(self, kantin_id: Optional[str], kantin_name: Optional[str]) -> Optional[KantinItem]:
        """Satu kantin aktif berdasarkan id (prioritas) atau nama. None jika tidak ada."""
        if not kantin_id and not kantin_name:
            raise ValueError("kantin_id or kantin_name is required")
        return await asyncio.get_event_loop().run_in_executor(
            None, self._fetch_one, kantin_id, kantin_name
        )

    async def list_active(self, only_open: bool = False) -> list[KantinItem]:
        """Semua kantin aktif, urut nama."""
        return await asyncio.get_event_loop().run_in_executor(None, self._fetch_all, only_open)

    async def sample(self, limit: int = 5) -> list[dict]:
        """Baris mentah (id, nama, status) untuk diagnostik test-db."""
        return await asyncio.get_event_loop().run_in_executor(None, self._fetch_sample, limit)

    # ── Private: ORM helpers ───────────────────────────────────────────────────

    def _fetch_one(self, kantin_id: Optional[str], kantin_name: Optional[str]) -> Optional[KantinItem]:
        with self._db.session() as session:
            q = session.query(Kantin).filter(Kantin.status == STATUS_KANTIN_AKTIF)
            if kantin_id:
                q = q.filter(Kantin.id == kantin_id)
            else:
                q = q.filter(Kantin.nama_kantin.ilike(f"%{kantin_name.strip()}%"))
            row = q.order_by(Kantin.nama_kantin).first()
        return self._orm_to_item(row) if row is not None else None

    def _fetch_all(self, only_open: bool) -> list[KantinItem]:
        with self._db.session() as session:
            q = session.query(Kantin).filter(Kantin.status == STATUS_KANTIN_AKTIF)
            if only_open:
                q = q.filter(Kantin.buka_tutup.is_(True))
            rows = q.order_by(Kantin.nama_kantin.asc()).all()
        return [self._orm_to_item(r) for r in rows]

    def _fetch_sample(self, limit: int) -> list[dict]:
        with self._db.session() as session:
            rows = session.query(Kantin).limit(limit).all()
        return [{"id": r.id, "nama_kantin": r.nama_kantin, "status": r.status} for r in rows]

    # ── Private: Converters ────────────────────────────────────────────────────

    def _orm_to_item(self, row: Kantin) -> KantinItem:
        return KantinItem(
            id=row.id,
            nama_kantin=row.nama_kantin,
            jam_buka=format_time(row.jam_buka),
            jam_tutup=format_time(row.jam_tutup),
            buka_tutup=bool(row.buka_tutup),
            status=row.status,
            foto_profil=row.foto_profil,
            is_open_now=is_open_now(row.jam_buka, row.jam_tutup, bool(row.buka_tutup), self._clock()),
        )
