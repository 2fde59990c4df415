from __future__ import annotations

from typing import TYPE_CHECKING

from app.utils.logging import get_logger

if TYPE_CHECKING:
    from app.core.repositories.implementations.local.memo_cache import LocalMemoCache
    from app.core.repositories.memo_repository import MemoRepository

logger = get_logger(__name__)


async def migrate_local_cache_to_remote(repo: MemoRepository, cache: LocalMemoCache) -> bool:
    """Copy locally cached memos into the remote store once.

    The remote store being empty is what marks the migration as pending, so
    this is safe to call on every load: it is a no-op as soon as the remote
    store holds a row. Two processes starting against an empty store at the
    same moment can both copy; nothing here prevents that.

    Returns True only when memos were copied; a local cache that cannot be
    cleared afterwards is logged and left behind.
    Never raises.
    """
    try:
        has_remote_data = await repo.has_any()
    except Exception as err:
        logger.error("Error checking remote store before migration: %s", err)
        return False

    if has_remote_data:
        logger.info("Remote store already has data, skipping migration")
        return False

    local_memos = cache.get_memos()
    if not local_memos:
        logger.info("No local data to migrate")
        return False

    try:
        await repo.insert_many(local_memos)
    except Exception as err:
        # Cache stays intact so the next load can retry.
        logger.error("Error migrating %d memos to remote store: %s", len(local_memos), err)
        return False

    try:
        cache.clear_memos()
    except OSError as err:
        # The remote copy already succeeded; the next load skips the stale
        # cache because the remote store is no longer empty.
        logger.error("Migrated memos but failed to clear local cache %s: %s", cache.path, err)
    logger.info("Successfully migrated %d memos to remote store", len(local_memos))
    return True
