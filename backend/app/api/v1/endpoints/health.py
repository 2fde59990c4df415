from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.config import settings
from app.core.repositories.implementations.supabase.memo_repository import (
    SupabaseMemoRepository,
)
from app.db.base import get_supabase_client, is_supabase_configured
from app.utils.openai_client import is_model_configured

router = APIRouter()


@router.get("/")
async def health_check():
    """Health check endpoint."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "service": "memo-notes-api",
            "version": "0.1.0"
        }
    )


@router.get("/ready")
async def readiness_check():
    """Readiness check endpoint."""
    db_status = "connected"
    if not is_supabase_configured():
        db_status = "not configured"
    else:
        try:
            await SupabaseMemoRepository(get_supabase_client()).has_any()
        except Exception as e:
            db_status = f"error: {str(e)}"

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "ready",
            "database": db_status,
            "ai_service": "available" if is_model_configured() else "not configured",
            "cors_origins": settings.cors_origins,
            "api_prefix": settings.api_prefix
        }
    )
