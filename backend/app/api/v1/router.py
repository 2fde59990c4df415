from __future__ import annotations

from fastapi import APIRouter

from .endpoints import ai, health, memos, taxonomy

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(ai.router, tags=["ai"])
api_router.include_router(memos.router, prefix="/memos", tags=["memos"])
api_router.include_router(taxonomy.router, prefix="/metadata", tags=["metadata"])
