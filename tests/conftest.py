"""tests/conftest.py – shared fixtures: SQLite in-memory + data kantin/menu contoh."""
from datetime import datetime, time
from unittest.mock import AsyncMock, MagicMock
from zoneinfo import ZoneInfo

import pytest
from fastapi.testclient import TestClient

from ekantin.config import Settings
from ekantin.db.models import Base, DetailPesanan, Kantin, MenuStats, Menu, Pesanan
from ekantin.db.session import Database

TZ = ZoneInfo("Asia/Jakarta")
NOW = datetime(2026, 10, 19, 12, 0, tzinfo=TZ)


def local(*args) -> datetime:
    """Waktu naive (seperti yang dikembalikan SQLite) di zona waktu kampus."""
    return datetime(*args)


def make_menu(**kw) -> MenuStats:
    defaults = dict(
        kantin_id="k1", nama_kantin="Kantin Bu Sri", kantin_status="aktif",
        deskripsi="", harga=10000, foto_menu=None, kategori_menu=["Makan Siang"],
        tersedia=True, created_at=local(2026, 9, 1, 8, 0),
        avg_rating=0.0, rating_count=0, total_sold=0,
    )
    defaults.update(kw)
    return MenuStats(**defaults)


MENUS = [
    make_menu(id="m1", nama_menu="Nasi Goreng", deskripsi="Nasi goreng telur", harga=15000,
              kategori_menu=["Makan Siang"], avg_rating=4.5, rating_count=10, total_sold=50),
    make_menu(id="m2", nama_menu="Es Teh Manis", deskripsi="Teh dingin", harga=3000,
              kategori_menu=["Minuman"], avg_rating=4.0, rating_count=5, total_sold=120),
    make_menu(id="m3", nama_menu="Bubur Ayam", kantin_id="k2", nama_kantin="Kantin Pak Budi", harga=10000,
              kategori_menu=["Makan Pagi"], avg_rating=4.8, rating_count=3, total_sold=20),
    make_menu(id="m4", nama_menu="Risol Mayo", kantin_id="k2", nama_kantin="Kantin Pak Budi", harga=5000,
              kategori_menu=["Snack"], total_sold=0, created_at=local(2026, 10, 19, 0, 1)),
    make_menu(id="m5", nama_menu="Mie Ayam", harga=12000, kategori_menu=["Makan Siang"],
              tersedia=False, avg_rating=4.9, rating_count=8, total_sold=70),
    make_menu(id="m6", nama_menu="Jus Alpukat", kantin_id="k2", nama_kantin="Kantin Pak Budi", harga=12000,
              kategori_menu=["Minuman", "Snack"], avg_rating=4.2, rating_count=2, total_sold=15,
              created_at=local(2026, 10, 18, 23, 59)),
    make_menu(id="m7", nama_menu="Soto Ayam", kantin_id="k3", nama_kantin="Kantin Tutup",
              kantin_status="nonaktif", harga=8000, avg_rating=3.5, rating_count=1, total_sold=30,
              created_at=local(2026, 10, 17, 9, 0)),
    make_menu(id="m8", nama_menu="Tahu Isi", kantin_id="k2", nama_kantin="Kantin Pak Budi", harga=2000,
              kategori_menu=None, total_sold=5, created_at=local(2026, 10, 5, 10, 0)),
]

KANTINS = [
    Kantin(id="k1", nama_kantin="Kantin Bu Sri", jam_buka=time(8, 0), jam_tutup=time(17, 0),
           buka_tutup=True, status="aktif"),
    Kantin(id="k2", nama_kantin="Kantin Pak Budi", jam_buka=time(6, 0), jam_tutup=time(10, 0),
           buka_tutup=True, status="aktif"),
    Kantin(id="k3", nama_kantin="Kantin Tutup", jam_buka=time(8, 0), jam_tutup=time(17, 0),
           buka_tutup=True, status="nonaktif"),
    Kantin(id="k4", nama_kantin="Kantin Malam", jam_buka=time(18, 0), jam_tutup=time(2, 0),
           buka_tutup=True, status="aktif"),
    Kantin(id="k5", nama_kantin="Kantin Libur", jam_buka=time(8, 0), jam_tutup=time(17, 0),
           buka_tutup=False, status="aktif"),
]


def _seed(db: Database) -> None:
    with db.session() as session:
        for obj in [*KANTINS, *MENUS]:
            session.merge(obj)
        session.add_all([
            Menu(id="m1", kantin_id="k1", nama_menu="Nasi Goreng", harga=15000,
                 kategori_menu=["Makan Siang"], tersedia=True),
            Menu(id="m5", kantin_id="k1", nama_menu="Mie Ayam", harga=12000,
                 kategori_menu=["Makan Siang"], tersedia=False),
            Pesanan(id="p1", status="selesai"),
            Pesanan(id="p2", status="selesai"),
            Pesanan(id="p3", status="menunggu"),
            DetailPesanan(id="d1", pesanan_id="p1", menu_id="m1", jumlah=2),
            DetailPesanan(id="d2", pesanan_id="p2", menu_id="m1", jumlah=3),
            DetailPesanan(id="d3", pesanan_id="p3", menu_id="m1", jumlah=10),
            DetailPesanan(id="d4", pesanan_id="p1", menu_id="m2", jumlah=None),
            DetailPesanan(id="d5", pesanan_id="p2", menu_id="m2", jumlah=4),
            DetailPesanan(id="d6", pesanan_id="p1", menu_id="m9", jumlah=7),
        ])


@pytest.fixture
def db() -> Database:
    database = Database.from_url("sqlite://")
    Base.metadata.create_all(database.engine)
    _seed(database)
    yield database
    database.dispose()


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def mock_gemini():
    m = MagicMock()
    m.model_name = "gemini-2.0-flash"
    m.ask  = AsyncMock(return_value="Coba Nasi Goreng, cuma Rp15.000!")
    m.ping = AsyncMock(return_value="Nasi goreng adalah nasi yang digoreng.")
    return m


@pytest.fixture
def mock_mailer():
    m = MagicMock()
    m.sender_email = "admin@ekantin.test"
    m.send = AsyncMock(return_value=True)
    return m


@pytest.fixture
def client(db, clock, mock_gemini, mock_mailer) -> TestClient:
    from ekantin.deps import build_container
    from ekantin.main import create_app

    settings = Settings(database_url="sqlite://")
    container = build_container(settings, db=db, clock=clock, mailer=mock_mailer, gemini=mock_gemini)
    return TestClient(create_app(settings, container))
