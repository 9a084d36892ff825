"""
errors.py – Envelope error seragam: {"error": "<pesan>"}.

  ValueError            → 400, pesan dari service
  SQLAlchemyError       → 500, pesan dari database
  JSON body rusak / lain → 500, "Internal server error"
  Schema body salah      → 400, pesan per field
"""
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"


def to_http_error(tag: str, exc: Exception) -> HTTPException:
    """Petakan exception dari handler/service ke HTTPException (dengan logging)."""
    if isinstance(exc, HTTPException):
        return exc
    if isinstance(exc, ValueError) and not isinstance(exc, ValidationError):
        logger.warning("[%s] Bad request: %s", tag, exc)
        return HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, SQLAlchemyError):
        logger.error("[%s] Error: %s", tag, exc)
        return HTTPException(status_code=500, detail=str(getattr(exc, "orig", None) or exc))
    logger.exception("[%s] Unexpected error", tag)
    return HTTPException(status_code=500, detail=INTERNAL_ERROR)


def _describe(err: dict) -> str:
    loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
    return f"{loc}: {err.get('msg')}" if loc else str(err.get("msg"))


def install_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error(_: Request, exc: StarletteHTTPException):
        body = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def validation_error(_: Request, exc: RequestValidationError):
        errors = exc.errors()
        if any(e.get("type") == "json_invalid" for e in errors):
            logger.error("Malformed JSON body: %s", errors)
            return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})
        return JSONResponse(status_code=400, content={"error": "; ".join(_describe(e) for e in errors)})
