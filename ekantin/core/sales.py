"""
core/sales.py – SalesService class.
Tanggung jawab: hitung jumlah terjual per menu dari `detail_pesanan`.

Hanya pesanan berstatus `selesai` yang dihitung. Dua query berurutan tanpa snapshot
transaksi: perubahan status di antara keduanya bisa terlewat.
"""
import asyncio
import logging

from ..db.models import STATUS_PESANAN_SELESAI, DetailPesanan, Pesanan
from ..db.session import Database

logger = logging.getLogger(__name__)


class SalesService:
    """Agregasi penjualan per menu id."""

    def __init__(self, db: Database) -> None:
        self._db = db

    async def sales_count(self, menu_ids: list[str] | None) -> dict[str, int]:
        """Map setiap id input → total `jumlah` dari pesanan selesai (default 0)."""
        if not menu_ids:
            raise ValueError("menuIds array is required")
        return await asyncio.get_event_loop().run_in_executor(None, self._aggregate, menu_ids)

    def _aggregate(self, menu_ids: list[str]) -> dict[str, int]:
        counts: dict[str, int] = {menu_id: 0 for menu_id in menu_ids}
        with self._db.session() as session:
            details = (
                session.query(DetailPesanan.menu_id, DetailPesanan.jumlah, DetailPesanan.pesanan_id)
                .filter(DetailPesanan.menu_id.in_(list(counts)))
                .all()
            )
            if not details:
                return counts

            pesanan_ids = {d.pesanan_id for d in details}
            selesai = {
                row.id
                for row in session.query(Pesanan.id)
                .filter(Pesanan.id.in_(pesanan_ids), Pesanan.status == STATUS_PESANAN_SELESAI)
                .all()
            }

        for d in details:
            if d.pesanan_id in selesai and d.menu_id in counts:
                counts[d.menu_id] += d.jumlah or 0
        logger.info("[sales_count] %d menu, %d pesanan selesai", len(counts), len(selesai))
        return counts
