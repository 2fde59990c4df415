from __future__ import annotations

from typing import TYPE_CHECKING

from postgrest.exceptions import APIError

from app.config import settings
from app.core.exceptions import describe_api_error
from app.core.schemas.summary import SummaryResult
from app.utils.logging import get_logger

if TYPE_CHECKING:
    from openai import AsyncOpenAI

    from app.core.repositories.memo_repository import MemoRepository

logger = get_logger(__name__)

MISSING_MEMO_ID = "memoId was not provided, summary was not saved"
MISSING_STORE_CREDENTIALS = "Supabase credentials are not configured"
MEMO_NOT_FOUND = "Memo not found"


def build_summary_prompt(content: str, title: str | None = None) -> str:
    title_line = f"Title: {title}\n" if title else ""
    return (
        "Summarize the following memo clearly and concisely. "
        "Keep only the key points in 2-3 sentences.\n\n"
        f"{title_line}Content:\n{content}\n\n"
        "Summary:"
    )


async def generate_summary(client: AsyncOpenAI, *, content: str, title: str | None = None) -> str:
    response = await client.responses.create(
        model=settings.summary_model,
        input=build_summary_prompt(content, title),
        reasoning={"effort": settings.model_reasoning},
    )
    return response.output_text or ""


async def save_summary(repo: MemoRepository | None, memo_id: str, summary: str) -> str | None:
    """Persist a summary on a memo row; return None on success or the reason it failed."""
    if repo is None:
        logger.error("Supabase environment variables are not configured")
        return MISSING_STORE_CREDENTIALS

    logger.info("Saving summary for memo %s", memo_id)
    try:
        updated = await repo.update_fields(memo_id, {"ai_summary": summary})
    except APIError as err:
        logger.error("Failed to save summary for memo %s", memo_id, extra=describe_api_error(err))
        return f"Database save failed: {err.message}"
    except Exception as err:
        logger.error("Error saving summary for memo %s: %s", memo_id, err)
        return f"Error while saving to database: {err}"

    if updated is None:
        logger.warning("No rows were updated, memo %s might not exist", memo_id)
        return MEMO_NOT_FOUND

    logger.info("Summary saved for memo %s", memo_id)
    return None


async def summarize_memo(
    client: AsyncOpenAI,
    repo: MemoRepository | None,
    *,
    content: str,
    title: str | None = None,
    memo_id: str | None = None,
) -> SummaryResult:
    """Generate a summary and, when a memo id is given, store it on that memo.

    Model failures propagate; persistence failures are reported in the result.
    """
    summary = await generate_summary(client, content=content, title=title)

    if not memo_id:
        logger.warning("memoId not provided, summary will not be saved")
        return SummaryResult(summary=summary, saved=False, save_error=MISSING_MEMO_ID)

    save_error = await save_summary(repo, memo_id, summary)
    return SummaryResult(summary=summary, saved=save_error is None, save_error=save_error)
