"""
handlers/kantin_handler.py – KantinHandler class.
Tanggung jawab: endpoint get-kantin-info & list-all-kantin.
"""
import logging

from ..core.kantin import KantinService
from ..models import KantinInfoParams, KantinInfoResponse, KantinListResponse, ListAllKantinParams

logger = logging.getLogger(__name__)

NOT_FOUND_MSG = "Kantin tidak ditemukan"


class KantinHandler:

    def __init__(self, kantin: KantinService) -> None:
        self._kantin = kantin

    async def info(self, p: KantinInfoParams) -> KantinInfoResponse:
        """Tidak ditemukan bukan error: 200 dengan kantin=null + pesan."""
        kantin = await self._kantin.get_info(p.kantin_id, p.kantin_name)
        if kantin is None:
            logger.info("[get_kantin_info] not found: id=%s name=%r", p.kantin_id, p.kantin_name)
            return KantinInfoResponse(kantin=None, message=NOT_FOUND_MSG)
        return KantinInfoResponse(kantin=kantin)

    async def list_all(self, p: ListAllKantinParams) -> KantinListResponse:
        items = await self._kantin.list_active(p.only_open)
        return KantinListResponse(
            items=items,
            count=len(items),
            open_count=sum(1 for k in items if k.is_open_now),
        )
