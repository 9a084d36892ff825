"""
core/categories.py – Kebijakan mapping kategori.

Token dari client (makan_pagi, makan_siang, snack, minuman, makanan) → filter keanggotaan
pada kolom `kategori_menu` (list string yang disimpan sebagai JSON).

`makanan` BUKAN gabungan Makan Pagi + Makan Siang: artinya "tidak mengandung Minuman".
"""
from typing import Optional

from sqlalchemy import String, cast, or_
from sqlalchemy.sql.elements import ColumnElement

MINUMAN = "Minuman"
MAKANAN = "makanan"

KATEGORI_MAP: dict[str, list[str]] = {
    "makan_pagi":  ["Makan Pagi"],
    "makan_siang": ["Makan Siang"],
    "snack":       ["Snack"],
    "minuman":     [MINUMAN],
}


def category_contains(column, label: str) -> ColumnElement:
    """Predicate "list kategori mengandung `label`".

    Bekerja di atas representasi teks JSON (`["Makan Pagi", "Snack"]`) sehingga tidak
    bergantung pada operator array milik dialect tertentu.
    """
    return cast(column, String).like(f'%"{label}"%')


def category_excludes(column, label: str) -> ColumnElement:
    """Predicate "list kategori TIDAK mengandung `label`" (NULL dianggap tidak mengandung)."""
    return or_(column.is_(None), ~category_contains(column, label))


def category_filters(column, kategori: Optional[str]) -> list[ColumnElement]:
    """Resolve token kategori menjadi daftar predicate (kosong = tanpa filter)."""
    if not kategori:
        return []
    if kategori == MAKANAN:
        return [category_excludes(column, MINUMAN)]
    return [category_contains(column, label) for label in KATEGORI_MAP.get(kategori, [])]

