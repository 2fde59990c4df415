from __future__ import annotations

from functools import lru_cache

from supabase import Client, create_client
from supabase.lib.client_options import ClientOptions

from app.config import settings
from app.utils.logging import get_logger

logger = get_logger(__name__)


def is_supabase_configured() -> bool:
    return bool(settings.supabase_url and settings.supabase_anon_key)


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """Return a cached Supabase client using the anon key.

    The application is single-user, so one client is shared by the memo
    store, the migration and the summary writer.
    """
    logger.debug("Initializing Supabase client")
    if not is_supabase_configured():
        raise RuntimeError("supabase_url and supabase_anon_key are required for the Supabase client")
    return create_client(
        settings.supabase_url,
        settings.supabase_anon_key,
        options=ClientOptions(auto_refresh_token=False, persist_session=False),
    )
