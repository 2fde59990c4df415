from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.v1.schemas.memo import (
    MemoCreate,
    MemoListResponse,
    MemoRead,
    MemoUpdate,
)
from app.core.models.memo import ALL_CATEGORIES
from app.core.schemas.memo_view import MemoStats
from app.dependencies import get_memo_store

if TYPE_CHECKING:
    from app.core.services.memo_store import MemoStore

router = APIRouter()


@router.get("/", response_model=MemoListResponse)
async def list_memos(
    q: str = "",
    category: str = ALL_CATEGORIES,
    store: MemoStore = Depends(get_memo_store),
):
    """Apply the search query and category filter, then return the filtered view."""
    store.search(q)
    store.filter_by_category(category)
    return MemoListResponse(
        memos=[MemoRead.model_validate(m) for m in store.filtered],
        stats=store.stats,
        search_query=store.search_query,
        selected_category=store.selected_category,
        loading=store.loading,
    )


@router.get("/all", response_model=list[MemoRead])
async def list_all_memos(store: MemoStore = Depends(get_memo_store)):
    return [MemoRead.model_validate(m) for m in store.all_memos]


@router.get("/stats", response_model=MemoStats)
async def memo_stats(store: MemoStore = Depends(get_memo_store)):
    return store.stats


@router.post("/refresh", response_model=list[MemoRead])
async def refresh_memos(store: MemoStore = Depends(get_memo_store)):
    """Re-run the local cache migration and reload every memo from the store."""
    await store.refresh()
    return [MemoRead.model_validate(m) for m in store.all_memos]


@router.post("/", response_model=MemoRead, status_code=status.HTTP_201_CREATED)
async def create_memo(
    payload: MemoCreate,
    store: MemoStore = Depends(get_memo_store),
):
    memo = await store.create(payload)
    return MemoRead.model_validate(memo)


@router.get("/{memo_id}", response_model=MemoRead)
async def get_memo(
    memo_id: str,
    store: MemoStore = Depends(get_memo_store),
):
    memo = store.get_by_id(memo_id)
    if not memo:
        raise HTTPException(status_code=404, detail="Memo not found")
    return MemoRead.model_validate(memo)


@router.patch("/{memo_id}", response_model=MemoRead)
async def update_memo(
    memo_id: str,
    payload: MemoUpdate,
    store: MemoStore = Depends(get_memo_store),
):
    memo = await store.update(memo_id, payload)
    if not memo:
        raise HTTPException(status_code=404, detail="Memo not found")
    return MemoRead.model_validate(memo)


@router.delete("/{memo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_memo(
    memo_id: str,
    store: MemoStore = Depends(get_memo_store),
):
    await store.delete(memo_id)
    return None


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
async def clear_memos(store: MemoStore = Depends(get_memo_store)):
    """Delete every memo and reset the search query and category filter."""
    await store.clear_all()
    return None
