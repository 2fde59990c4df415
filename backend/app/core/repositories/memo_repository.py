from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.core.models.memo import Memo


class MemoRepository(ABC):
    """Abstract repository interface for memos.

    Contract used by services and dependency injection. Implementations
    perform I/O and therefore expose async methods. Store failures are
    raised to the caller; implementations never swallow them.
    """

    @abstractmethod
    async def create(self, memo: Memo) -> Memo:  # pragma: no cover - interface only
        """Persist a new memo and return the canonical stored record."""

    @abstractmethod
    async def get(self, memo_id: str) -> Memo | None:  # pragma: no cover
        """Fetch a memo by id or return None if not found."""

    @abstractmethod
    async def list(self) -> Sequence[Memo]:  # pragma: no cover
        """Return every memo ordered by creation time descending."""

    @abstractmethod
    async def update_fields(self, memo_id: str, changes: dict[str, Any]) -> Memo | None:  # pragma: no cover
        """Partially update columns and return the updated record, or None if no row matched."""

    @abstractmethod
    async def delete(self, memo_id: str) -> bool:  # pragma: no cover
        """Delete a memo by id. Return True if a row was removed."""

    @abstractmethod
    async def delete_all(self) -> int:  # pragma: no cover
        """Delete every memo and return the number of removed rows."""

    @abstractmethod
    async def has_any(self) -> bool:  # pragma: no cover
        """Return True when at least one memo exists."""

    @abstractmethod
    async def insert_many(self, memos: Sequence[Memo]) -> int:  # pragma: no cover
        """Insert all memos in a single request; all-or-nothing."""
