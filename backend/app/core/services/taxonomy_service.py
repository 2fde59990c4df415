from __future__ import annotations

from typing import TYPE_CHECKING

from app.core.models.memo import MemoCategory
from app.core.schemas.taxonomy import MemoTaxonomy

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.core.models.memo import Memo


def build_memo_taxonomy(memos: Iterable[Memo]) -> MemoTaxonomy:
    """Aggregate unique tags across memos, normalized to lowercase."""
    tag_set: set[str] = set()
    for memo in memos:
        for tag in memo.tags:
            normalized = tag.strip().lower()
            if normalized:
                tag_set.add(normalized)

    return MemoTaxonomy(
        tag_vocab=sorted(tag_set),
        categories=[c.value for c in MemoCategory],
    )
