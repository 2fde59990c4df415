from __future__ import annotations

from app.core.models.base import AppBaseModel


class SummaryResult(AppBaseModel):
    """Generated summary plus the outcome of persisting it.

    Generation and persistence fail independently: `summary` is always set,
    `saved` is True only when a row was updated, and `save_error` explains
    any other outcome.
    """

    summary: str
    saved: bool = False
    save_error: str | None = None
