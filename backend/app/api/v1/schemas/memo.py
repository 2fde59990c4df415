from __future__ import annotations

from datetime import datetime  # noqa: TCH003

from pydantic import Field

from app.core.models.base import AppBaseModel
from app.core.models.memo import MemoCategory  # noqa: TCH001
from app.core.schemas.memo_view import MemoStats  # noqa: TCH001


class MemoCreate(AppBaseModel):
    """User-editable memo fields."""

    title: str = Field(default="", description="Memo title")
    content: str = Field(default="", description="Memo body")
    category: MemoCategory = Field(default=MemoCategory.OTHER, description="Memo category")
    tags: list[str] = Field(default_factory=list, description="Tags for categorization")


class MemoUpdate(AppBaseModel):
    title: str | None = None
    content: str | None = None
    category: MemoCategory | None = None
    tags: list[str] | None = None


class MemoRead(AppBaseModel):
    id: str
    title: str
    content: str
    category: MemoCategory
    tags: list[str]
    ai_summary: str | None
    created_at: datetime
    updated_at: datetime


class MemoListResponse(AppBaseModel):
    """Filtered view of the memo store together with its view state."""

    memos: list[MemoRead]
    stats: MemoStats
    search_query: str
    selected_category: str
    loading: bool
