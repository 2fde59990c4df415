from __future__ import annotations

from pydantic import Field

from app.core.models.base import AppBaseModel


class MemoStats(AppBaseModel):
    """Counts derived from the memo store.

    - total: every cached memo
    - by_category: cached memos per category value
    - filtered: memos in the current filtered view
    """

    total: int = 0
    by_category: dict[str, int] = Field(default_factory=dict)
    filtered: int = 0
