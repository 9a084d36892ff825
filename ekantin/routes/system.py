"""routes/system.py – /health + diagnostik (GET /api/test-db, /api/test-email, /api/test-gemini)"""
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_diagnostics
from ..handlers.diagnostics_handler import DiagnosticCheckFailed, DiagnosticsHandler

router = APIRouter(tags=["System"])


@router.get("/health")
async def health():
    return {"status": "ok", "time": datetime.now().isoformat()}


@router.get("/api/test-db")
async def test_db(diag: DiagnosticsHandler = Depends(get_diagnostics)):
    try:
        return await diag.test_db()
    except DiagnosticCheckFailed as e:
        raise HTTPException(status_code=500, detail=e.payload)
    except Exception as e:
        raise HTTPException(status_code=500, detail={"success": False, "error": str(e)})


@router.get("/api/test-email")
async def test_email(diag: DiagnosticsHandler = Depends(get_diagnostics)):
    try:
        return await diag.test_email()
    except DiagnosticCheckFailed as e:
        raise HTTPException(status_code=500, detail=e.payload)


@router.get("/api/test-gemini")
async def test_gemini(diag: DiagnosticsHandler = Depends(get_diagnostics)):
    try:
        return await diag.test_gemini()
    except DiagnosticCheckFailed as e:
        raise HTTPException(status_code=500, detail=e.payload)
