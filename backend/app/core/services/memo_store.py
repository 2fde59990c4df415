from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from app.core.exceptions import MemoNotFoundError
from app.core.models.base import utc_now
from app.core.models.memo import ALL_CATEGORIES, Memo, MemoCategory
from app.core.schemas.memo_view import MemoStats
from app.core.services.migration_service import migrate_local_cache_to_remote
from app.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.api.v1.schemas.memo import MemoCreate, MemoUpdate
    from app.core.repositories.implementations.local.memo_cache import LocalMemoCache
    from app.core.repositories.memo_repository import MemoRepository

logger = get_logger(__name__)

EDITABLE_FIELDS = ("title", "content", "category", "tags")


def matches_category(memo: Memo, category: str) -> bool:
    if category == ALL_CATEGORIES:
        return True
    return memo.category.value == category


def matches_query(memo: Memo, query: str) -> bool:
    """Case-insensitive substring match on title, content or any tag.

    A query that is blank after trimming matches everything.
    """
    if not query.strip():
        return True
    needle = query.lower()
    return (
        needle in memo.title.lower()
        or needle in memo.content.lower()
        or any(needle in tag.lower() for tag in memo.tags)
    )


def filter_memos(memos: Sequence[Memo], category: str = ALL_CATEGORIES, query: str = "") -> list[Memo]:
    """Apply the category filter, then the search filter, keeping order."""
    filtered = [m for m in memos if matches_category(m, category)]
    return [m for m in filtered if matches_query(m, query)]


class MemoStore:
    """In-memory view of the memos held in the remote store.

    The remote store is the source of truth: every successful write replaces
    the cached entry with the canonical record the store returns, and a
    failed write leaves the cache untouched and re-raises.
    """

    def __init__(self, repo: MemoRepository, cache: LocalMemoCache) -> None:
        self._repo = repo
        self._local_cache = cache
        self._memos: list[Memo] = []
        self.loading = True
        self.search_query = ""
        self.selected_category = ALL_CATEGORIES

    @property
    def all_memos(self) -> list[Memo]:
        return list(self._memos)

    async def load(self) -> None:
        """Run the one-shot migration, then fetch every memo newest first.

        Fetch failures empty the cache and are logged, never raised.
        """
        self.loading = True
        try:
            await migrate_local_cache_to_remote(self._repo, self._local_cache)
            self._memos = list(await self._repo.list())
        except Exception as err:
            logger.error("Failed to load memos: %s", err)
            self._memos = []
        finally:
            self.loading = False

    async def refresh(self) -> None:
        await self.load()

    async def create(self, data: MemoCreate) -> Memo:
        now = utc_now()
        memo = Memo(
            title=data.title,
            content=data.content,
            category=data.category,
            tags=list(data.tags or []),
            created_at=now,
            updated_at=now,
        )
        try:
            created = await self._repo.create(memo)
        except Exception as err:
            logger.error("Error creating memo: %s", err)
            raise

        self._memos.insert(0, created)
        return created

    async def update(self, memo_id: str, data: MemoUpdate) -> Memo | None:
        """Merge editable fields into a cached memo and write them through.

        Returns None without touching the remote store when the id is not in
        the cache, even if the remote store holds it.
        """
        existing = self.get_by_id(memo_id)
        if existing is None:
            logger.debug("Update skipped, memo %s is not cached", memo_id)
            return None

        changes = {
            k: v for k, v in data.model_dump(exclude_unset=True).items()
            if k in EDITABLE_FIELDS and v is not None
        }
        # updated_at never moves backwards, even if the clock does
        changes["updated_at"] = max(utc_now(), existing.updated_at)
        merged = existing.model_copy(update=changes)
        payload = merged.model_dump(mode="json", include={*EDITABLE_FIELDS, "updated_at"})

        try:
            updated = await self._repo.update_fields(memo_id, payload)
        except Exception as err:
            logger.error("Error updating memo %s: %s", memo_id, err)
            raise
        if updated is None:
            raise MemoNotFoundError(memo_id)

        self._memos = [updated if m.id == memo_id else m for m in self._memos]
        return updated

    async def delete(self, memo_id: str) -> None:
        try:
            await self._repo.delete(memo_id)
        except Exception as err:
            logger.error("Error deleting memo %s: %s", memo_id, err)
            raise

        self._memos = [m for m in self._memos if m.id != memo_id]

    async def clear_all(self) -> None:
        try:
            removed = await self._repo.delete_all()
        except Exception as err:
            logger.error("Error clearing memos: %s", err)
            raise

        logger.info("Cleared %d memos", removed)
        self._memos = []
        self.search_query = ""
        self.selected_category = ALL_CATEGORIES

    def search(self, query: str) -> None:
        self.search_query = query

    def filter_by_category(self, category: str | MemoCategory) -> None:
        self.selected_category = category.value if isinstance(category, MemoCategory) else category

    def get_by_id(self, memo_id: str) -> Memo | None:
        return next((m for m in self._memos if m.id == memo_id), None)

    @property
    def filtered(self) -> list[Memo]:
        return filter_memos(self._memos, self.selected_category, self.search_query)

    @property
    def stats(self) -> MemoStats:
        by_category = Counter(m.category.value for m in self._memos)
        return MemoStats(
            total=len(self._memos),
            by_category=dict(by_category),
            filtered=len(self.filtered),
        )
