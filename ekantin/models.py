"""
models.py – Pydantic schemas untuk request/response.

Setiap endpoint punya struktur parameter sendiri dengan default eksplisit.
Field yang tidak dikenal ditolak (400) di boundary.
"""
from datetime import datetime
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

SortKey = str   # rating_desc | price_asc | price_desc | best_seller_desc


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v


def _menu_id(v: Any) -> str:
    # id dari client dipakai apa adanya sebagai key hasil; null ikut key JSON "null"
    if v is None:
        return "null"
    if isinstance(v, bool):
        return str(v).lower()
    return str(v)


# String kosong / spasi saja dianggap tidak diisi
OptionalName = Annotated[Optional[str], BeforeValidator(_blank_to_none)]
MenuId = Annotated[str, BeforeValidator(_menu_id)]


# ── Request Models ─────────────────────────────────────────────────────────────

class _Params(BaseModel):
    model_config = ConfigDict(extra="forbid")


class KantinScope(_Params):
    kantin_id:   OptionalName = Field(default=None, description="ID kantin (prioritas di atas nama)")
    kantin_name: OptionalName = Field(default=None, description="Nama kantin, cocok sebagian, case-insensitive")


class SalesCountRequest(_Params):
    menuIds: Optional[List[MenuId]] = Field(default=None, description="Daftar ID menu")


class SearchMenuParams(_Params):
    query:          Optional[str]   = Field(default=None, description="Cari di nama_menu & deskripsi")
    kantin_id:      OptionalName    = None
    kategori:       Optional[str]   = Field(default=None, description="makan_pagi | makan_siang | snack | minuman | makanan")
    max_price:      Optional[float] = Field(default=None, description="Harga maksimum (Rp)")
    min_rating:     Optional[float] = Field(default=None, description="Rating minimum")
    only_available: bool            = True
    sort:           SortKey         = "best_seller_desc"
    limit:          int             = Field(default=10, ge=1, le=50)


class ListMenuByKantinParams(KantinScope):
    only_available: bool    = True
    sort:           SortKey = "best_seller_desc"
    limit:          int     = Field(default=10, ge=1, le=50)


class PriceRankParams(KantinScope):
    kategori: Optional[str] = None
    limit:    int           = Field(default=5, ge=1, le=50)


class PopularMenuParams(KantinScope):
    kategori: Optional[str] = None
    limit:    int           = Field(default=5, ge=1, le=50)


class TopRatedParams(KantinScope):
    kategori:    Optional[str] = None
    min_reviews: int           = Field(default=1, ge=0, description="Jumlah review minimum")
    limit:       int           = Field(default=10, ge=1, le=50)


class UnderPriceParams(KantinScope):
    max_price: Optional[float] = Field(default=None, description="Wajib, > 0")
    kategori:  Optional[str]   = None
    limit:     int             = Field(default=10, ge=1, le=50)


class NewMenuParams(_Params):
    period:      str           = Field(default="week", description="today | week | month")
    kantin_name: OptionalName  = None
    limit:       int           = Field(default=10, ge=1, le=50)


class KantinInfoParams(KantinScope):
    pass


class ListAllKantinParams(_Params):
    only_open: bool = False


class CompareMenuParams(_Params):
    menu_names:  Optional[List[str]] = Field(default=None, description="Minimal 2 nama menu")
    kantin_name: OptionalName        = None


class UserProfileRequest(_Params):
    id:         Optional[str] = None
    email:      Optional[str] = None
    full_name:  Optional[str] = None
    avatar_url: Optional[str] = None


class GeminiChatRequest(_Params):
    message: Optional[str] = Field(default=None, max_length=2000)


# ── Response Models ────────────────────────────────────────────────────────────

class MenuItem(BaseModel):
    """Satu baris `v_menu_stats`."""
    model_config = ConfigDict(from_attributes=True)

    id:            str
    kantin_id:     str
    nama_menu:     str
    deskripsi:     Optional[str] = None
    harga:         int = 0
    foto_menu:     Optional[str] = None
    kategori_menu: List[str] = Field(default_factory=list)
    tersedia:      bool = True
    created_at:    Optional[datetime] = None
    nama_kantin:   Optional[str] = None
    kantin_status: Optional[str] = None
    avg_rating:    float = 0
    rating_count:  int = 0
    total_sold:    int = 0


class RankedMenuItem(MenuItem):
    ranking: int = Field(description="Peringkat (1-based)")


class NewMenuItem(MenuItem):
    is_new:   bool = True
    days_ago: int


class KantinRef(BaseModel):
    kantin_id:   str
    nama_kantin: Optional[str] = None


class KantinItem(BaseModel):
    id:          str
    nama_kantin: str
    jam_buka:    Optional[str] = None
    jam_tutup:   Optional[str] = None
    buka_tutup:  bool = False
    status:      str
    foto_profil: Optional[str] = None
    is_open_now: bool = False


class MenuListResponse(BaseModel):
    items: List[MenuItem]
    count: int


class TypedMenuListResponse(MenuListResponse):
    type: str


class KantinMenuResponse(MenuListResponse):
    kantin:      Optional[KantinRef] = None
    search_term: Optional[str] = None


class PopularMenuResponse(BaseModel):
    items:     List[RankedMenuItem]
    count:     int
    type:      str = "popular"
    is_global: bool
    kantin:    Optional[KantinRef] = None
    note:      str


class UnderPriceResponse(MenuListResponse):
    max_price: float


class NewMenuResponse(BaseModel):
    items:        List[NewMenuItem]
    count:        int
    period:       str
    period_label: str
    start_date:   str
    message:      str


class KantinInfoResponse(BaseModel):
    kantin:  Optional[KantinItem] = None
    message: Optional[str] = None


class KantinListResponse(BaseModel):
    items:      List[KantinItem]
    count:      int
    open_count: int


class SalesCountResponse(BaseModel):
    salesCounts: dict[str, int]


class ComparedMenu(BaseModel):
    id:            str
    nama_menu:     str
    harga:         int
    avg_rating:    float
    rating_count:  int
    total_sold:    int
    nama_kantin:   Optional[str] = None
    kategori_menu: List[str] = Field(default_factory=list)
    foto_menu:     Optional[str] = None
    deskripsi:     Optional[str] = None


class ComparisonAnalysis(BaseModel):
    cheapest:       str
    most_expensive: str
    highest_rated:  str
    best_seller:    str
    price_diff:     int


class Comparison(BaseModel):
    menus:    List[ComparedMenu]
    analysis: ComparisonAnalysis


class CompareMenuResponse(MenuListResponse):
    comparison: Optional[Comparison] = None
    message:    str


class SuccessResponse(BaseModel):
    success: bool


class GeminiChatResponse(BaseModel):
    response: str

