"""
core/prompt.py – PromptBuilder class.
Tanggung jawab: menyusun system prompt + konteks menu/kantin untuk Gemini.
"""
from ..models import KantinItem, MenuItem

MAX_CONTEXT_MENUS = 30

_RULES = """Aturan:
1. Jawab dengan bahasa Indonesia yang ramah dan natural
2. Jika ditanya tentang menu, berikan rekomendasi berdasarkan data yang ada
3. Jika ditanya budget, cari menu yang sesuai dengan budget tersebut
4. Jika ditanya "best seller" atau "populer", berdasarkan total_sold
5. Jika ditanya "termurah", berdasarkan harga terendah
6. Jika tidak ada menu yang cocok, berikan alternatif atau saran
7. Selalu akhiri dengan tawaran bantuan tambahan
8. Jangan terlalu formal, gunakan bahasa sehari-hari yang sopan"""


class PromptBuilder:
    """Membangun prompt untuk asisten E-Kantin."""

    def build_system(self, menus: list[MenuItem], kantins: list[KantinItem]) -> str:
        return (
            "Kamu adalah AI Assistant untuk aplikasi E-Kantin. "
            "Kamu harus ramah, membantu, dan berbicara seperti pelayan yang profesional.\n\n"
            "Context Data:\n"
            f"DAFTAR MENU:\n{self.build_menu_context(menus)}\n\n"
            f"DAFTAR KANTIN:\n{self.build_kantin_context(kantins)}\n\n"
            f"{_RULES}"
        )

    # ── Context ────────────────────────────────────────────────────────────────

    def build_menu_context(self, menus: list[MenuItem]) -> str:
        if not menus:
            return "Tidak ada menu tersedia"
        return "\n".join(self._format_menu(m) for m in menus[:MAX_CONTEXT_MENUS])

    def build_kantin_context(self, kantins: list[KantinItem]) -> str:
        if not kantins:
            return "Tidak ada kantin tersedia"
        return "\n".join(self._format_kantin(k) for k in kantins)

    def _format_menu(self, m: MenuItem) -> str:
        kategori = ", ".join(m.kategori_menu) or "Tidak ada kategori"
        return (
            f"• {m.nama_menu} - Rp{m.harga} - {m.deskripsi or 'Tidak ada deskripsi'}"
            f" - Kantin: {m.nama_kantin or 'Unknown'} - Kategori: {kategori}"
            f" - Terjual: {m.total_sold}"
        )

    def _format_kantin(self, k: KantinItem) -> str:
        status = "Buka" if k.is_open_now else "Tutup"
        return f"• {k.nama_kantin} - Status: {status} - Jam: {k.jam_buka or '-'} - {k.jam_tutup or '-'}"
