from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.config import settings
from app.core.models.memo import Memo
from app.core.repositories.memo_repository import MemoRepository
from app.utils.logging import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from supabase import Client


# No real memo carries this id, so "id != NIL_MEMO_ID" matches every row.
NIL_MEMO_ID = "00000000-0000-0000-0000-000000000000"

MEMO_COLUMNS = frozenset(Memo.model_fields)


def row_to_memo(row: dict[str, Any]) -> Memo:
    """Map a snake_case `memos` row onto the application `Memo`.

    Columns the model does not know are dropped, a null `tags` becomes an
    empty list and a null or empty `ai_summary` becomes None.
    """
    normalized = {k: v for k, v in row.items() if k in MEMO_COLUMNS}
    if normalized.get("tags") is None:
        normalized["tags"] = []
    if not normalized.get("ai_summary"):
        normalized["ai_summary"] = None
    return Memo.model_validate(normalized)


def memo_to_row(memo: Memo) -> dict[str, Any]:
    """Map a `Memo` onto a JSON-serializable `memos` row."""
    # mode="json" renders datetimes as ISO-8601 and enums as their values,
    # which is what PostgREST expects.
    data = memo.model_dump(mode="json", by_alias=False)
    if data.get("tags") is None:
        data["tags"] = []
    data["ai_summary"] = memo.ai_summary or None
    return data


class SupabaseMemoRepository(MemoRepository):
    """Supabase implementation of the MemoRepository.

    Uses Supabase's PostgREST client for CRUD against the `memos` table
    (id, title, content, category, tags, ai_summary, created_at, updated_at).
    PostgREST errors surface as `postgrest.exceptions.APIError`.
    """

    def __init__(self, client: Client, table_name: str | None = None) -> None:
        self._client: Client = client
        self._table_name = table_name or settings.memos_table

    def _table(self):
        return self._client.table(self._table_name)

    async def create(self, memo: Memo) -> Memo:
        row = memo_to_row(memo)
        resp = await self._run(lambda: self._table().insert(row).execute())
        data = self._first(resp.data)
        if not data:
            raise RuntimeError(f"Insert of memo {memo.id} returned no row")
        return row_to_memo(data)

    async def get(self, memo_id: str) -> Memo | None:
        resp = await self._run(
            lambda: self._table()
            .select("*")
            .eq("id", memo_id)
            .limit(1)
            .execute()
        )
        items = resp.data or []
        if not items:
            return None
        return row_to_memo(items[0])

    async def list(self) -> Sequence[Memo]:
        resp = await self._run(
            lambda: self._table()
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )
        items = resp.data or []
        return [row_to_memo(i) for i in items]

    async def update_fields(self, memo_id: str, changes: dict[str, Any]) -> Memo | None:
        # id and created_at are immutable once assigned
        sanitized: dict[str, Any] = {
            k: v for k, v in (changes or {}).items() if k in MEMO_COLUMNS and k not in {"id", "created_at"}
        }
        if not sanitized:
            return await self.get(memo_id)

        resp = await self._run(
            lambda: self._table()
            .update(sanitized)
            .eq("id", memo_id)
            .execute()
        )
        items = resp.data or []
        if not items:
            return None
        return row_to_memo(items[0])

    async def delete(self, memo_id: str) -> bool:
        resp = await self._run(
            lambda: self._table()
            .delete()
            .eq("id", memo_id)
            .execute()
        )
        items = resp.data or []
        return len(items) > 0

    async def delete_all(self) -> int:
        # PostgREST refuses an unfiltered DELETE
        resp = await self._run(
            lambda: self._table()
            .delete()
            .neq("id", NIL_MEMO_ID)
            .execute()
        )
        return len(resp.data or [])

    async def has_any(self) -> bool:
        resp = await self._run(
            lambda: self._table()
            .select("id")
            .limit(1)
            .execute()
        )
        return bool(resp.data)

    async def insert_many(self, memos: Sequence[Memo]) -> int:
        rows = [memo_to_row(m) for m in memos]
        if not rows:
            return 0
        resp = await self._run(lambda: self._table().insert(rows).execute())
        return len(resp.data or [])

    @staticmethod
    async def _run(func: Callable[[], Any]) -> Any:
        import asyncio
        return await asyncio.to_thread(func)

    @staticmethod
    def _first(data: Any) -> dict[str, Any]:
        if isinstance(data, list) and data:
            return data[0]
        if isinstance(data, dict):
            return data
        return {}
