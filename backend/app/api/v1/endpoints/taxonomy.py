from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends

from app.core.models.memo import MemoCategory
from app.core.schemas.taxonomy import MemoTaxonomy
from app.core.services.taxonomy_service import build_memo_taxonomy
from app.dependencies import get_memo_store

if TYPE_CHECKING:
    from app.core.services.memo_store import MemoStore


router = APIRouter()


@router.get("/taxonomy", response_model=MemoTaxonomy)
async def get_taxonomy(store: MemoStore = Depends(get_memo_store)) -> MemoTaxonomy:
    """Return the tag vocabulary of the cached memos and the supported categories."""
    return build_memo_taxonomy(store.all_memos)


@router.get("/categories", response_model=list[str])
async def list_categories() -> list[str]:
    """Return all supported categories for client-side filtering."""
    return [c.value for c in MemoCategory]
