"""
ekantin/db/models.py – SQLAlchemy ORM model untuk tabel & view E-Kantin.

Schema dikelola di database (Supabase/Postgres), bukan di sini.
`v_menu_stats` adalah view read-only; dipetakan seperti tabel supaya bisa di-query via ORM.
"""
from sqlalchemy import JSON, Boolean, Column, DateTime, Float, Integer, String, Time
from sqlalchemy.orm import DeclarativeBase

STATUS_KANTIN_AKTIF = "aktif"
STATUS_PESANAN_SELESAI = "selesai"


class Base(DeclarativeBase):
    pass


class Kantin(Base):
    __tablename__ = "kantin"

    id          = Column(String,  primary_key=True)
    nama_kantin = Column(String,  nullable=False)
    jam_buka    = Column(Time,    nullable=True)
    jam_tutup   = Column(Time,    nullable=True)
    buka_tutup  = Column(Boolean, nullable=False, default=False)
    status      = Column(String,  nullable=False, default=STATUS_KANTIN_AKTIF)
    foto_profil = Column(String,  nullable=True)

    def __repr__(self) -> str:
        return f"<Kantin id={self.id} nama_kantin={self.nama_kantin!r}>"


class Menu(Base):
    __tablename__ = "menu"

    id            = Column(String,  primary_key=True)
    kantin_id     = Column(String,  nullable=False)
    nama_menu     = Column(String,  nullable=False)
    deskripsi     = Column(String,  nullable=True)
    harga         = Column(Integer, nullable=False, default=0)
    foto_menu     = Column(String,  nullable=True)
    kategori_menu = Column(JSON,    nullable=True)
    tersedia      = Column(Boolean, nullable=False, default=True)
    created_at    = Column(DateTime(timezone=True), nullable=True)


class MenuStats(Base):
    """Baris dari view `v_menu_stats`: menu + statistik agregat."""
    __tablename__ = "v_menu_stats"

    id            = Column(String,  primary_key=True)
    kantin_id     = Column(String,  nullable=False)
    nama_menu     = Column(String,  nullable=False)
    deskripsi     = Column(String,  nullable=True)
    harga         = Column(Integer, nullable=False, default=0)
    foto_menu     = Column(String,  nullable=True)
    kategori_menu = Column(JSON,    nullable=True)
    tersedia      = Column(Boolean, nullable=False, default=True)
    created_at    = Column(DateTime(timezone=True), nullable=True)
    nama_kantin   = Column(String,  nullable=True)
    kantin_status = Column(String,  nullable=True)
    avg_rating    = Column(Float,   nullable=True, default=0)
    rating_count  = Column(Integer, nullable=True, default=0)
    total_sold    = Column(Integer, nullable=True, default=0)

    def __repr__(self) -> str:
        return f"<MenuStats id={self.id} nama_menu={self.nama_menu!r}>"


class Pesanan(Base):
    __tablename__ = "pesanan"

    id     = Column(String, primary_key=True)
    status = Column(String, nullable=False)


class DetailPesanan(Base):
    __tablename__ = "detail_pesanan"

    id         = Column(String,  primary_key=True)
    pesanan_id = Column(String,  nullable=False)
    menu_id    = Column(String,  nullable=False)
    jumlah     = Column(Integer, nullable=True)


class UserProfile(Base):
    __tablename__ = "user_profiles"

    id         = Column(String, primary_key=True)
    email      = Column(String, nullable=True, default="")
    full_name  = Column(String, nullable=True, default="")
    avatar_url = Column(String, nullable=True, default="")
    updated_at = Column(DateTime(timezone=True), nullable=True)
