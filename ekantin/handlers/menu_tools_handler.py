"""
handlers/menu_tools_handler.py – MenuToolsHandler class.
Tanggung jawab: parameter endpoint /api/tools/* → MenuQuery → response envelope.
"""
import logging
from functools import reduce
from typing import Optional, Union

from ..core.clock import Clock
from ..core.menu import MenuService
from ..core.menu_query import MenuQuery
from ..core.periods import PERIOD_LABELS, days_since, normalize_period, window_start
from ..models import (
    CompareMenuParams,
    CompareMenuResponse,
    ComparedMenu,
    Comparison,
    ComparisonAnalysis,
    KantinMenuResponse,
    KantinRef,
    ListMenuByKantinParams,
    MenuItem,
    MenuListResponse,
    NewMenuItem,
    NewMenuParams,
    NewMenuResponse,
    PopularMenuParams,
    PopularMenuResponse,
    PriceRankParams,
    RankedMenuItem,
    SearchMenuParams,
    TopRatedParams,
    TypedMenuListResponse,
    UnderPriceParams,
    UnderPriceResponse,
)

logger = logging.getLogger(__name__)

ScopedParams = Union[PriceRankParams, PopularMenuParams, TopRatedParams, UnderPriceParams]

MAX_COMPARE = 5


class MenuToolsHandler:
    """Satu method per tool listing/ranking menu."""

    def __init__(self, menu: MenuService, clock: Clock) -> None:
        self._menu = menu
        self._clock = clock

    # ── Pencarian & listing ────────────────────────────────────────────────────

    async def search(self, p: SearchMenuParams) -> MenuListResponse:
        items = await self._menu.list_menu(MenuQuery(
            kantin_id=p.kantin_id, text=p.query, kategori=p.kategori,
            max_price=p.max_price, min_rating=p.min_rating,
            only_available=p.only_available, sort=p.sort, limit=p.limit,
        ))
        logger.info("[search_menu] query=%r → %d items", p.query, len(items))
        return MenuListResponse(items=items, count=len(items))

    async def list_by_kantin(self, p: ListMenuByKantinParams) -> KantinMenuResponse:
        logger.info("[list_menu_by_kantin] kantin_id=%s kantin_name=%r sort=%s",
                    p.kantin_id, p.kantin_name, p.sort)
        items = await self._menu.list_menu(MenuQuery(
            kantin_id=p.kantin_id, kantin_name=p.kantin_name,
            only_available=p.only_available, sort=p.sort, limit=p.limit,
        ))
        logger.info("[list_menu_by_kantin] Found: %d items", len(items))
        return KantinMenuResponse(
            items=items,
            count=len(items),
            kantin=self._kantin_ref(items),
            search_term=p.kantin_name or p.kantin_id or None,
        )

    # ── Ranking harga ──────────────────────────────────────────────────────────

    async def cheapest(self, p: PriceRankParams) -> TypedMenuListResponse:
        items = await self._menu.list_menu(self._scoped(p, sort="price_asc", then_by=["best_seller_desc"]))
        return TypedMenuListResponse(items=items, count=len(items), type="cheapest")

    async def priciest(self, p: PriceRankParams) -> TypedMenuListResponse:
        items = await self._menu.list_menu(self._scoped(p, sort="price_desc", then_by=["best_seller_desc"]))
        return TypedMenuListResponse(items=items, count=len(items), type="priciest")

    async def under_price(self, p: UnderPriceParams) -> UnderPriceResponse:
        if not p.max_price or p.max_price <= 0:
            raise ValueError("max_price is required and must be positive")
        query = self._scoped(p, sort="price_asc", then_by=["best_seller_desc"])
        query.max_price = p.max_price
        items = await self._menu.list_menu(query)
        return UnderPriceResponse(items=items, count=len(items), max_price=p.max_price)

    # ── Popularitas & rating ───────────────────────────────────────────────────

    async def popular(self, p: PopularMenuParams) -> PopularMenuResponse:
        query = self._scoped(p, sort="best_seller_desc", then_by=["rating_desc"])
        query.active_kantin = True
        query.require_sold = True
        items = await self._menu.list_menu(query)

        ranked = [RankedMenuItem(**item.model_dump(), ranking=i) for i, item in enumerate(items, start=1)]
        is_global = not query.is_scoped
        kantin = None if is_global else self._kantin_ref(ranked)
        logger.info("[get_popular_menu] Found: %d items (%s)", len(ranked),
                    "global" if is_global else (kantin.nama_kantin if kantin else "-"))
        return PopularMenuResponse(
            items=ranked,
            count=len(ranked),
            is_global=is_global,
            kantin=kantin,
            note="Belum ada data penjualan" if not ranked else "Diurutkan berdasarkan jumlah terjual",
        )

    async def top_rated(self, p: TopRatedParams) -> TypedMenuListResponse:
        query = self._scoped(p, sort="rating_desc", then_by=["reviews_desc"])
        query.require_rated = True
        query.min_reviews = p.min_reviews
        items = await self._menu.list_menu(query)
        return TypedMenuListResponse(items=items, count=len(items), type="top_rated")

    # ── Menu baru ──────────────────────────────────────────────────────────────

    async def new_menu(self, p: NewMenuParams) -> NewMenuResponse:
        now = self._clock()
        period = normalize_period(p.period)
        start = window_start(period, now)
        logger.info("[get_new_menu] period=%s kantin=%r start=%s", period, p.kantin_name, start.isoformat())

        rows = await self._menu.list_menu(MenuQuery(
            kantin_name=p.kantin_name, created_since=start, active_kantin=True,
            sort="created_desc", limit=p.limit,
        ))
        items = [
            NewMenuItem(**m.model_dump(), is_new=True,
                        days_ago=days_since(m.created_at, now) if m.created_at else 0)
            for m in rows
        ]
        label = PERIOD_LABELS[period]
        message = (
            f"Ada {len(items)} menu baru {label}! 🆕" if items
            else f"Belum ada menu baru {label}. Coba cek lagi nanti ya! 😊"
        )
        return NewMenuResponse(
            items=items,
            count=len(items),
            period=period,
            period_label=label,
            start_date=start.isoformat(),
            message=message,
        )

    # ── Pembanding ─────────────────────────────────────────────────────────────

    async def compare(self, p: CompareMenuParams) -> CompareMenuResponse:
        names = [n.strip() for n in (p.menu_names or []) if n and n.strip()]
        if len(names) < 2:
            raise ValueError("Minimal 2 menu untuk dibandingkan")
        logger.info("[compare_menu] Comparing: %s", names[:MAX_COMPARE])

        found: list[MenuItem] = []
        for name in names[:MAX_COMPARE]:
            item = await self._menu.first_match(name, p.kantin_name)
            if item is not None:
                found.append(item)

        if len(found) < 2:
            return CompareMenuResponse(
                items=found,
                count=len(found),
                comparison=None,
                message="Tidak cukup menu ditemukan untuk dibandingkan. Pastikan nama menu benar.",
            )
        return CompareMenuResponse(
            items=found,
            count=len(found),
            comparison=self._build_comparison(found),
            message=f"Berhasil membandingkan {len(found)} menu",
        )

    # ── Private helpers ────────────────────────────────────────────────────────

    @staticmethod
    def _scoped(p: ScopedParams, sort: str, then_by: list[str]) -> MenuQuery:
        return MenuQuery(
            kantin_id=p.kantin_id, kantin_name=p.kantin_name, kategori=p.kategori,
            sort=sort, then_by=then_by, limit=p.limit,
        )

    @staticmethod
    def _kantin_ref(items: list[MenuItem]) -> Optional[KantinRef]:
        if not items:
            return None
        return KantinRef(kantin_id=items[0].kantin_id, nama_kantin=items[0].nama_kantin)

    @staticmethod
    def _build_comparison(found: list[MenuItem]) -> Comparison:
        def pick(better):
            return reduce(lambda a, b: a if better(a, b) else b, found).nama_menu

        analysis = ComparisonAnalysis(
            cheapest=pick(lambda a, b: a.harga < b.harga),
            most_expensive=pick(lambda a, b: a.harga > b.harga),
            highest_rated=pick(lambda a, b: a.avg_rating > b.avg_rating),
            best_seller=pick(lambda a, b: a.total_sold > b.total_sold),
            price_diff=abs(found[0].harga - found[1].harga),
        )
        menus = [
            ComparedMenu(**m.model_dump(include=set(ComparedMenu.model_fields)))
            for m in found
        ]
        return Comparison(menus=menus, analysis=analysis)
