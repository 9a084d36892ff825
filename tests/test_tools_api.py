"""
tests/test_tools_api.py – Integration tests /api/tools/* lewat FastAPI TestClient.
Skenario: status + envelope + filter/sort per endpoint.
"""
import pytest


def ids(body: dict) -> list[str]:
    return [item["id"] for item in body["items"]]


# ── /search-menu ──────────────────────────────────────────────────────────────

class TestSearchMenu:
    def test_default_is_best_seller(self, client):
        r = client.post("/api/tools/search-menu", json={})
        assert r.status_code == 200
        body = r.json()
        assert ids(body) == ["m2", "m1", "m7", "m3", "m6", "m8", "m4"]
        assert body["count"] == len(body["items"])

    def test_empty_body_uses_defaults(self, client):
        r = client.post("/api/tools/search-menu")
        assert r.status_code == 200
        assert r.json()["count"] == 7

    def test_filters_combined(self, client):
        r = client.post("/api/tools/search-menu", json={
            "kantin_id": "k2", "kategori": "makanan", "max_price": 10000, "sort": "price_desc", "limit": 2,
        })
        body = r.json()
        assert ids(body) == ["m3", "m4"]
        assert all(i["kantin_id"] == "k2" and "Minuman" not in i["kategori_menu"] for i in body["items"])

    def test_rating_sort(self, client):
        r = client.post("/api/tools/search-menu", json={"min_rating": 4.0, "sort": "rating_desc"})
        assert ids(r.json()) == ["m3", "m1", "m6", "m2"]


# ── /list-menu-by-kantin ──────────────────────────────────────────────────────

class TestListMenuByKantin:
    def test_by_name(self, client):
        r = client.post("/api/tools/list-menu-by-kantin", json={"kantin_name": "bu sri"})
        assert r.status_code == 200
        body = r.json()
        assert body["kantin"] == {"kantin_id": "k1", "nama_kantin": "Kantin Bu Sri"}
        assert body["search_term"] == "bu sri"
        assert ids(body) == ["m2", "m1"]

    def test_include_unavailable(self, client):
        r = client.post("/api/tools/list-menu-by-kantin", json={"kantin_id": "k1", "only_available": False})
        assert ids(r.json()) == ["m2", "m5", "m1"]

    def test_unknown_kantin(self, client):
        r = client.post("/api/tools/list-menu-by-kantin", json={"kantin_name": "tidak ada"})
        body = r.json()
        assert r.status_code == 200
        assert body["kantin"] is None
        assert body["count"] == 0


# ── /get-cheapest & /get-priciest ─────────────────────────────────────────────

class TestPriceRanking:
    def test_cheapest(self, client):
        body = client.post("/api/tools/get-cheapest", json={}).json()
        assert body["type"] == "cheapest"
        assert ids(body) == ["m8", "m2", "m4", "m7", "m3"]

    def test_cheapest_makanan(self, client):
        body = client.post("/api/tools/get-cheapest", json={"kategori": "makanan"}).json()
        assert ids(body) == ["m8", "m4", "m7", "m3", "m1"]

    def test_priciest(self, client):
        body = client.post("/api/tools/get-priciest", json={"limit": 3}).json()
        assert body["type"] == "priciest"
        assert ids(body) == ["m1", "m6", "m3"]


# ── /get-popular-menu ─────────────────────────────────────────────────────────

class TestPopularMenu:
    def test_global_ranking(self, client):
        body = client.post("/api/tools/get-popular-menu").json()
        assert ids(body) == ["m2", "m1", "m3", "m6", "m8"]
        assert [i["ranking"] for i in body["items"]] == [1, 2, 3, 4, 5]
        assert body["is_global"] is True
        assert body["kantin"] is None
        assert body["type"] == "popular"
        assert body["note"] == "Diurutkan berdasarkan jumlah terjual"

    def test_requires_sales_and_active_kantin(self, client):
        body = client.post("/api/tools/get-popular-menu", json={"limit": 50}).json()
        assert "m4" not in ids(body)   # total_sold = 0
        assert "m7" not in ids(body)   # kantin nonaktif
        assert all(i["total_sold"] > 0 for i in body["items"])

    def test_scoped_to_kantin(self, client):
        body = client.post("/api/tools/get-popular-menu", json={"kantin_id": "k2"}).json()
        assert ids(body) == ["m3", "m6", "m8"]
        assert body["is_global"] is False
        assert body["kantin"]["nama_kantin"] == "Kantin Pak Budi"

    def test_blank_kantin_name_is_global(self, client):
        body = client.post("/api/tools/get-popular-menu", json={"kantin_name": "   "}).json()
        assert body["is_global"] is True
        assert body["kantin"] is None
        assert ids(body) == ["m2", "m1", "m3", "m6", "m8"]

    def test_no_sales(self, client):
        body = client.post("/api/tools/get-popular-menu", json={"kantin_id": "k1", "kategori": "makan_pagi"}).json()
        assert body["count"] == 0
        assert body["note"] == "Belum ada data penjualan"


# ── /get-top-rated ────────────────────────────────────────────────────────────

class TestTopRated:
    def test_default(self, client):
        body = client.post("/api/tools/get-top-rated", json={}).json()
        assert body["type"] == "top_rated"
        assert ids(body) == ["m3", "m1", "m6", "m2", "m7"]
        assert all(i["avg_rating"] > 0 for i in body["items"])

    def test_min_reviews(self, client):
        body = client.post("/api/tools/get-top-rated", json={"min_reviews": 5}).json()
        assert ids(body) == ["m1", "m2"]


# ── /list-under-price ─────────────────────────────────────────────────────────

class TestListUnderPrice:
    @pytest.mark.parametrize("payload", [{}, {"max_price": 0}, {"max_price": -5}])
    def test_missing_or_non_positive(self, client, payload):
        r = client.post("/api/tools/list-under-price", json=payload)
        assert r.status_code == 400
        assert r.json() == {"error": "max_price is required and must be positive"}

    def test_under_price(self, client):
        body = client.post("/api/tools/list-under-price", json={"max_price": 10000}).json()
        assert ids(body) == ["m8", "m2", "m4", "m7", "m3"]
        assert body["max_price"] == 10000
        assert all(i["harga"] <= 10000 for i in body["items"])


# ── /get-new-menu ─────────────────────────────────────────────────────────────

class TestNewMenu:
    def test_today_window(self, client):
        body = client.post("/api/tools/get-new-menu", json={"period": "today"}).json()
        # Risol dibuat 00:01 hari ini masuk, Jus Alpukat 23:59 kemarin tidak
        assert ids(body) == ["m4"]
        assert body["items"][0]["is_new"] is True
        assert body["items"][0]["days_ago"] == 0
        assert body["period_label"] == "hari ini"
        assert body["message"] == "Ada 1 menu baru hari ini! 🆕"
        assert body["start_date"].startswith("2026-10-19T00:00:00")

    def test_week_default(self, client):
        body = client.post("/api/tools/get-new-menu").json()
        assert body["period"] == "week"
        assert ids(body) == ["m4", "m6"]   # m7 kantin nonaktif

    def test_month(self, client):
        body = client.post("/api/tools/get-new-menu", json={"period": "month"}).json()
        assert ids(body) == ["m4", "m6", "m8"]
        assert body["items"][2]["days_ago"] == 14

    def test_none_found(self, client):
        body = client.post("/api/tools/get-new-menu", json={"period": "month", "kantin_name": "bu sri"}).json()
        assert body["count"] == 0
        assert body["message"] == "Belum ada menu baru bulan ini. Coba cek lagi nanti ya! 😊"


# ── /compare-menu ─────────────────────────────────────────────────────────────

class TestCompareMenu:
    def test_compare_two(self, client):
        r = client.post("/api/tools/compare-menu", json={"menu_names": ["Nasi Goreng", "es teh"]})
        assert r.status_code == 200
        analysis = r.json()["comparison"]["analysis"]
        assert analysis == {
            "cheapest": "Es Teh Manis",
            "most_expensive": "Nasi Goreng",
            "highest_rated": "Nasi Goreng",
            "best_seller": "Es Teh Manis",
            "price_diff": 12000,
        }

    def test_needs_two_names(self, client):
        r = client.post("/api/tools/compare-menu", json={"menu_names": ["Nasi Goreng"]})
        assert r.status_code == 400
        assert r.json()["error"] == "Minimal 2 menu untuk dibandingkan"

    def test_not_enough_found(self, client):
        body = client.post("/api/tools/compare-menu", json={"menu_names": ["Nasi Goreng", "Pizza"]}).json()
        assert body["comparison"] is None
        assert body["count"] == 1


# ── /get-kantin-info & /list-all-kantin ───────────────────────────────────────

class TestKantinInfo:
    def test_by_id(self, client):
        body = client.post("/api/tools/get-kantin-info", json={"kantin_id": "k1"}).json()
        kantin = body["kantin"]
        assert kantin["nama_kantin"] == "Kantin Bu Sri"
        assert kantin["jam_buka"] == "08:00:00"
        assert kantin["is_open_now"] is True

    def test_overnight_kantin_closed_at_noon(self, client):
        body = client.post("/api/tools/get-kantin-info", json={"kantin_name": "malam"}).json()
        assert body["kantin"]["id"] == "k4"
        assert body["kantin"]["is_open_now"] is False

    @pytest.mark.parametrize("payload", [{"kantin_id": "zzz"}, {"kantin_name": "Kantin Tutup"}])
    def test_not_found_is_200(self, client, payload):
        r = client.post("/api/tools/get-kantin-info", json=payload)
        assert r.status_code == 200
        assert r.json()["kantin"] is None
        assert r.json()["message"] == "Kantin tidak ditemukan"

    @pytest.mark.parametrize("payload", [{}, {"kantin_name": "   "}, {"kantin_id": "", "kantin_name": " "}])
    def test_requires_id_or_name(self, client, payload):
        r = client.post("/api/tools/get-kantin-info", json=payload)
        assert r.status_code == 400
        assert r.json() == {"error": "kantin_id or kantin_name is required"}


class TestListAllKantin:
    def test_all_active(self, client):
        body = client.post("/api/tools/list-all-kantin").json()
        assert [k["nama_kantin"] for k in body["items"]] == [
            "Kantin Bu Sri", "Kantin Libur", "Kantin Malam", "Kantin Pak Budi",
        ]
        assert body["count"] == 4
        assert body["open_count"] == 1

    def test_only_open_flag(self, client):
        body = client.post("/api/tools/list-all-kantin", json={"only_open": True}).json()
        assert body["count"] == 3
        assert all(k["buka_tutup"] for k in body["items"])
