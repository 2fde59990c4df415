from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from app.core.models.memo import Memo
from app.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)


class LocalMemoCache:
    """JSON file holding memos in the application (camelCase) shape.

    This is the storage the app used before the remote store; it is only
    read by the migration and cleared once its contents have been copied.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get_memos(self) -> list[Memo]:
        """Return cached memos; unreadable or malformed files read as empty."""
        if not self._path.exists():
            return []
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as err:
            logger.error("Failed to read local memo cache %s: %s", self._path, err)
            return []

        if not isinstance(raw, list):
            logger.warning("Local memo cache %s is not a JSON array, ignoring", self._path)
            return []

        memos: list[Memo] = []
        for entry in raw:
            try:
                memos.append(Memo.model_validate(entry))
            except ValidationError as err:
                logger.warning("Skipping malformed cached memo: %s", err.errors()[:1])
        return memos

    def save_memos(self, memos: Sequence[Memo]) -> None:
        payload = [m.model_dump(mode="json", by_alias=True) for m in memos]
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")

    def clear_memos(self) -> None:
        self._path.unlink(missing_ok=True)
