from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import HTTPException, status

from app.config import settings
from app.core.repositories.implementations.local.memo_cache import LocalMemoCache
from app.core.repositories.implementations.supabase.memo_repository import (
    SupabaseMemoRepository,
)
from app.core.services.memo_store import MemoStore
from app.db.base import get_supabase_client, is_supabase_configured
from app.utils.logging import get_logger
from app.utils.openai_client import get_openai_client

logger = get_logger(__name__)

if TYPE_CHECKING:
    from openai import AsyncOpenAI

    from app.core.repositories.memo_repository import MemoRepository


def get_local_memo_cache() -> LocalMemoCache:
    return LocalMemoCache(settings.local_cache_path)


def get_optional_memo_repository() -> MemoRepository | None:
    """Return the Supabase repository, or None when credentials are missing."""
    if not is_supabase_configured():
        return None
    return SupabaseMemoRepository(get_supabase_client())


@lru_cache(maxsize=1)
def _shared_memo_store() -> MemoStore:
    repo = get_optional_memo_repository()
    if repo is None:
        raise RuntimeError("supabase_url and supabase_anon_key are required for the memo store")
    return MemoStore(repo, get_local_memo_cache())


def get_memo_store() -> MemoStore:
    """Return the process-wide memo store.

    The application is single-user, so one view state is shared by every
    request, the same way a single browser tab would hold it.
    """
    if not is_supabase_configured():
        logger.error("Supabase environment variables are not configured")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Supabase credentials are not configured",
        )
    return _shared_memo_store()


def get_model_client() -> AsyncOpenAI | None:
    """Return the OpenAI client, or None when the API key is missing."""
    return get_openai_client()


def get_optional_memo_store() -> MemoStore | None:
    """Return the memo store when the remote store is configured."""
    if not is_supabase_configured():
        return None
    return _shared_memo_store()
