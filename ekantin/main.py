"""
main.py – FastAPI app entry point (wire-up saja).
Hanya menghubungkan routes, error handler dan container. Tidak ada business logic.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .deps import Container, build_container
from .errors import install_error_handlers
from .routes import gemini, menu, system, tools, user

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 E-Kantin API ready.")
    yield
    app.state.container.db.dispose()
    logger.info("Shutdown.")


def create_app(settings: Optional[Settings] = None, container: Optional[Container] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="E-Kantin API",
        description="Backend kantin kampus: menu, kantin, statistik penjualan, profil user.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.container = container or build_container(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    app.include_router(system.router)
    app.include_router(tools.router)
    app.include_router(menu.router)
    app.include_router(user.router)
    app.include_router(gemini.router)
    return app


app = create_app()
