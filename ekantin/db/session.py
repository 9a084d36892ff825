"""
ekantin/db/session.py – Database: engine + session factory.

Dibuat sekali saat app start, lalu di-inject ke setiap service (tidak ada singleton global).
SQLite in-memory memakai StaticPool supaya semua session melihat data yang sama.
"""
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


class Database:
    """Pembungkus Engine + sessionmaker."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._factory = sessionmaker(bind=engine, expire_on_commit=False)

    @classmethod
    def from_url(cls, url: str, echo: bool = False) -> "Database":
        if url.startswith("sqlite"):
            kwargs: dict = {"connect_args": {"check_same_thread": False}}
            if ":memory:" in url or url == "sqlite://":
                kwargs["poolclass"] = StaticPool
        else:
            kwargs = {"pool_pre_ping": True}
        return cls(create_engine(url, echo=echo, **kwargs))

    @property
    def engine(self) -> Engine:
        return self._engine

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Context manager yang mengembalikan Session, auto commit/rollback/close."""
        session: Session = self._factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        self._engine.dispose()
