"""
core/menu.py – MenuService class.
Tanggung jawab: menjalankan MenuQuery terhadap view `v_menu_stats` (SQLAlchemy ORM).

Blocking call dibungkus run_in_executor supaya tidak memblok event loop.
"""
import asyncio
import logging
from typing import Optional

from ..db.models import Menu, MenuStats
from ..db.session import Database
from ..models import MenuItem
from .menu_query import MenuQuery

logger = logging.getLogger(__name__)


class MenuService:
    """Query menu: listing, ranking, pencarian, pembanding."""

    def __init__(self, db: Database) -> None:
        self._db = db

    # ── Public ─────────────────────────────────────────────────────────────────

    async def list_menu(self, query: MenuQuery) -> list[MenuItem]:
        """Jalankan `query` dan kembalikan maksimal `query.limit` item."""
        return await asyncio.get_event_loop().run_in_executor(None, self._fetch, query)

    async def first_match(self, name: str, kantin_name: Optional[str] = None) -> Optional[MenuItem]:
        """Menu tersedia pertama (kantin aktif) yang namanya mengandung `name`."""
        query = MenuQuery(name=name, kantin_name=kantin_name, active_kantin=True, limit=1)
        items = await self.list_menu(query)
        return items[0] if items else None

    async def sample_available(self, limit: int = 10) -> list[dict]:
        """Baris mentah dari tabel `menu` (dipakai diagnostik test-db)."""
        return await asyncio.get_event_loop().run_in_executor(None, self._fetch_sample, limit)

    # ── Private: ORM helpers ───────────────────────────────────────────────────

    def _fetch(self, query: MenuQuery) -> list[MenuItem]:
        with self._db.session() as session:
            rows = query.apply(session.query(MenuStats)).all()
        return [self._orm_to_item(r) for r in rows]

    def _fetch_sample(self, limit: int) -> list[dict]:
        with self._db.session() as session:
            rows = (
                session.query(Menu)
                .filter(Menu.tersedia.is_(True))
                .limit(limit)
                .all()
            )
        return [
            {
                "id": r.id,
                "nama_menu": r.nama_menu,
                "harga": r.harga,
                "kategori_menu": r.kategori_menu or [],
                "tersedia": r.tersedia,
            }
            for r in rows
        ]

    # ── Private: Converters ────────────────────────────────────────────────────

    @staticmethod
    def _orm_to_item(row: MenuStats) -> MenuItem:
        return MenuItem(
            id=row.id,
            kantin_id=row.kantin_id,
            nama_menu=row.nama_menu or "",
            deskripsi=row.deskripsi,
            harga=row.harga or 0,
            foto_menu=row.foto_menu,
            kategori_menu=row.kategori_menu or [],
            tersedia=bool(row.tersedia),
            created_at=row.created_at,
            nama_kantin=row.nama_kantin,
            kantin_status=row.kantin_status,
            avg_rating=float(row.avg_rating or 0),
            rating_count=row.rating_count or 0,
            total_sold=row.total_sold or 0,
        )
