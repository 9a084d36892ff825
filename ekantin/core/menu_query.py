"""
core/menu_query.py – MenuQuery: parameter filter/sort/limit → query ORM pada `v_menu_stats`.

Value object murni: dibangun dari parameter endpoint, lalu `apply()` ke Query SQLAlchemy.
Dipakai bersama oleh semua endpoint listing/ranking menu.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Query

from ..db.models import STATUS_KANTIN_AKTIF, MenuStats
from .categories import category_filters

DEFAULT_SORT = "best_seller_desc"

SORT_COLUMNS = {
    "rating_desc":      MenuStats.avg_rating.desc(),
    "price_asc":        MenuStats.harga.asc(),
    "price_desc":       MenuStats.harga.desc(),
    "best_seller_desc": MenuStats.total_sold.desc(),
    "reviews_desc":     MenuStats.rating_count.desc(),
    "created_desc":     MenuStats.created_at.desc(),
}


@dataclass
class MenuQuery:
    kantin_id:      Optional[str]      = None
    kantin_name:    Optional[str]      = None
    kategori:       Optional[str]      = None
    text:           Optional[str]      = None
    name:           Optional[str]      = None
    max_price:      Optional[float]    = None
    min_rating:     Optional[float]    = None
    min_reviews:    Optional[int]      = None
    created_since:  Optional[datetime] = None
    only_available: bool               = True
    active_kantin:  bool               = False
    require_sold:   bool               = False
    require_rated:  bool               = False
    sort:           str                = DEFAULT_SORT
    then_by:        list[str]          = field(default_factory=list)
    limit:          int                = 10

    @property
    def is_scoped(self) -> bool:
        """True jika query dibatasi ke satu kantin (id atau nama)."""
        return bool(self.kantin_id or self.kantin_name)

    def order_keys(self) -> list[str]:
        primary = self.sort if self.sort in SORT_COLUMNS else DEFAULT_SORT
        keys = [primary]
        for key in self.then_by:
            if key in SORT_COLUMNS and key not in keys:
                keys.append(key)
        return keys

    def apply(self, q: Query) -> Query:
        q = q.filter(*self._predicates())
        q = q.order_by(*(SORT_COLUMNS[k] for k in self.order_keys()))
        return q.limit(self.limit)

    def _predicates(self) -> list:
        preds = []
        if self.kantin_id:
            preds.append(MenuStats.kantin_id == self.kantin_id)
        elif self.kantin_name:
            preds.append(MenuStats.nama_kantin.ilike(f"%{self.kantin_name.strip()}%"))
        if self.only_available:
            preds.append(MenuStats.tersedia.is_(True))
        if self.active_kantin:
            preds.append(MenuStats.kantin_status == STATUS_KANTIN_AKTIF)
        if self.text:
            like = f"%{self.text.strip()}%"
            preds.append(MenuStats.nama_menu.ilike(like) | MenuStats.deskripsi.ilike(like))
        if self.name:
            preds.append(MenuStats.nama_menu.ilike(f"%{self.name.strip()}%"))
        preds.extend(category_filters(MenuStats.kategori_menu, self.kategori))
        if self.max_price:
            preds.append(MenuStats.harga <= self.max_price)
        if self.min_rating:
            preds.append(MenuStats.avg_rating >= self.min_rating)
        if self.min_reviews is not None:
            preds.append(MenuStats.rating_count >= self.min_reviews)
        if self.require_sold:
            preds.append(MenuStats.total_sold > 0)
        if self.require_rated:
            preds.append(MenuStats.avg_rating > 0)
        if self.created_since is not None:
            preds.append(MenuStats.created_at >= self.created_since)
        return preds
