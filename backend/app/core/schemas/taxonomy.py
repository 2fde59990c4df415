from __future__ import annotations

from pydantic import Field

from app.core.models.base import AppBaseModel


class MemoTaxonomy(AppBaseModel):
    """Aggregated vocabulary across the cached memos.

    - tag_vocab: unique, lower-cased tags observed across all memos
    - categories: every supported category value
    """

    tag_vocab: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
