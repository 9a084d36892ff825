"""routes/menu.py – POST /api/menu/sales-count"""
from typing import Optional

from fastapi import APIRouter, Depends

from ..core.sales import SalesService
from ..deps import get_sales
from ..errors import to_http_error
from ..models import SalesCountRequest, SalesCountResponse

router = APIRouter(prefix="/api/menu", tags=["Menu"])


@router.post("/sales-count", response_model=SalesCountResponse)
async def sales_count(
    req: Optional[SalesCountRequest] = None,
    sales: SalesService = Depends(get_sales),
):
    """Jumlah terjual per menu dari pesanan berstatus `selesai`."""
    try:
        counts = await sales.sales_count((req or SalesCountRequest()).menuIds)
        return SalesCountResponse(salesCounts=counts)
    except Exception as e:
        raise to_http_error("sales_count", e)
