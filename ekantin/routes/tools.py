"""routes/tools.py – Tool endpoints /api/tools/*.

  POST /search-menu          → cari menu (query + filter)
  POST /list-menu-by-kantin  → menu satu kantin
  POST /get-cheapest         → menu termurah
  POST /get-priciest         → menu termahal
  POST /get-popular-menu     → menu terlaris (total_sold > 0)
  POST /get-top-rated        → rating tertinggi
  POST /list-under-price     → harga <= max_price
  POST /get-new-menu         → menu baru per periode
  POST /compare-menu         → bandingkan 2-5 menu
  POST /get-kantin-info      → info satu kantin
  POST /list-all-kantin      → semua kantin aktif

Body boleh kosong: semua parameter punya default.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from ..deps import get_kantin, get_menu_tools
from ..errors import to_http_error
from ..handlers.kantin_handler import KantinHandler
from ..handlers.menu_tools_handler import MenuToolsHandler
from ..models import (
    CompareMenuParams,
    CompareMenuResponse,
    KantinInfoParams,
    KantinInfoResponse,
    KantinListResponse,
    KantinMenuResponse,
    ListAllKantinParams,
    ListMenuByKantinParams,
    MenuListResponse,
    NewMenuParams,
    NewMenuResponse,
    PopularMenuParams,
    PopularMenuResponse,
    PriceRankParams,
    SearchMenuParams,
    TopRatedParams,
    TypedMenuListResponse,
    UnderPriceParams,
    UnderPriceResponse,
)

router = APIRouter(prefix="/api/tools", tags=["Tools"])


# ── Menu ──────────────────────────────────────────────────────────────────────

@router.post("/search-menu", response_model=MenuListResponse)
async def search_menu(
    params: Optional[SearchMenuParams] = None,
    tools: MenuToolsHandler = Depends(get_menu_tools),
):
    try:
        return await tools.search(params or SearchMenuParams())
    except Exception as e:
        raise to_http_error("search_menu", e)


@router.post("/list-menu-by-kantin", response_model=KantinMenuResponse)
async def list_menu_by_kantin(
    params: Optional[ListMenuByKantinParams] = None,
    tools: MenuToolsHandler = Depends(get_menu_tools),
):
    try:
        return await tools.list_by_kantin(params or ListMenuByKantinParams())
    except Exception as e:
        raise to_http_error("list_menu_by_kantin", e)


@router.post("/get-cheapest", response_model=TypedMenuListResponse)
async def get_cheapest(
    params: Optional[PriceRankParams] = None,
    tools: MenuToolsHandler = Depends(get_menu_tools),
):
    try:
        return await tools.cheapest(params or PriceRankParams())
    except Exception as e:
        raise to_http_error("get_cheapest", e)


@router.post("/get-priciest", response_model=TypedMenuListResponse)
async def get_priciest(
    params: Optional[PriceRankParams] = None,
    tools: MenuToolsHandler = Depends(get_menu_tools),
):
    try:
        return await tools.priciest(params or PriceRankParams())
    except Exception as e:
        raise to_http_error("get_priciest", e)


@router.post("/get-popular-menu", response_model=PopularMenuResponse)
async def get_popular_menu(
    params: Optional[PopularMenuParams] = None,
    tools: MenuToolsHandler = Depends(get_menu_tools),
):
    try:
        return await tools.popular(params or PopularMenuParams())
    except Exception as e:
        raise to_http_error("get_popular_menu", e)


@router.post("/get-top-rated", response_model=TypedMenuListResponse)
async def get_top_rated(
    params: Optional[TopRatedParams] = None,
    tools: MenuToolsHandler = Depends(get_menu_tools),
):
    try:
        return await tools.top_rated(params or TopRatedParams())
    except Exception as e:
        raise to_http_error("get_top_rated", e)


@router.post("/list-under-price", response_model=UnderPriceResponse)
async def list_under_price(
    params: Optional[UnderPriceParams] = None,
    tools: MenuToolsHandler = Depends(get_menu_tools),
):
    """400 jika `max_price` tidak ada atau <= 0."""
    try:
        return await tools.under_price(params or UnderPriceParams())
    except Exception as e:
        raise to_http_error("list_under_price", e)


@router.post("/get-new-menu", response_model=NewMenuResponse)
async def get_new_menu(
    params: Optional[NewMenuParams] = None,
    tools: MenuToolsHandler = Depends(get_menu_tools),
):
    try:
        return await tools.new_menu(params or NewMenuParams())
    except Exception as e:
        raise to_http_error("get_new_menu", e)


@router.post("/compare-menu", response_model=CompareMenuResponse)
async def compare_menu(
    params: Optional[CompareMenuParams] = None,
    tools: MenuToolsHandler = Depends(get_menu_tools),
):
    try:
        return await tools.compare(params or CompareMenuParams())
    except Exception as e:
        raise to_http_error("compare_menu", e)


# ── Kantin ────────────────────────────────────────────────────────────────────

@router.post("/get-kantin-info", response_model=KantinInfoResponse)
async def get_kantin_info(
    params: Optional[KantinInfoParams] = None,
    kantin: KantinHandler = Depends(get_kantin),
):
    """Kantin tidak ditemukan → 200 `{kantin: null, message}`."""
    try:
        return await kantin.info(params or KantinInfoParams())
    except Exception as e:
        raise to_http_error("get_kantin_info", e)


@router.post("/list-all-kantin", response_model=KantinListResponse)
async def list_all_kantin(
    params: Optional[ListAllKantinParams] = None,
    kantin: KantinHandler = Depends(get_kantin),
):
    try:
        return await kantin.list_all(params or ListAllKantinParams())
    except Exception as e:
        raise to_http_error("list_all_kantin", e)
