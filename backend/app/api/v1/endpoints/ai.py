from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.v1.schemas.ai import (
    SummarizeRequest,
    TagSuggestionRequest,
    TagSuggestionResponse,
)
from app.core.schemas.summary import SummaryResult
from app.core.services.summary_service import summarize_memo
from app.core.services.tag_service import suggest_tags
from app.dependencies import (
    get_model_client,
    get_optional_memo_repository,
    get_optional_memo_store,
)
from app.utils.logging import get_logger

if TYPE_CHECKING:
    from openai import AsyncOpenAI

    from app.core.repositories.memo_repository import MemoRepository
    from app.core.services.memo_store import MemoStore

logger = get_logger(__name__)

router = APIRouter()

MISSING_API_KEY = "APP_OPENAI_API_KEY is not configured"


@router.post("/generate-tags", response_model=TagSuggestionResponse)
async def generate_tags(
    payload: TagSuggestionRequest,
    client: AsyncOpenAI | None = Depends(get_model_client),
):
    """Suggest up to five single-word tags for a memo."""
    if not (payload.title or "").strip() or not (payload.content or "").strip():
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Title and content are required"},
        )
    if client is None:
        logger.error("Tag generation requested without a model API key")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": MISSING_API_KEY},
        )

    try:
        tags = await suggest_tags(client, title=payload.title, content=payload.content)
    except Exception as err:
        logger.error("Tag generation failed: %s", err, extra={"error_type": type(err).__name__})
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to generate tags"},
        )
    return TagSuggestionResponse(tags=tags)


@router.post("/memos/summarize", response_model=SummaryResult, response_model_exclude_none=True)
async def summarize(
    payload: SummarizeRequest,
    client: AsyncOpenAI | None = Depends(get_model_client),
    repo: MemoRepository | None = Depends(get_optional_memo_repository),
    store: MemoStore | None = Depends(get_optional_memo_store),
):
    """Summarize a memo and store the summary on it when `memoId` is given.

    A summary that could not be saved is still returned with status 200;
    `saved` and `saveError` describe the persistence outcome.
    """
    if not (payload.content or "").strip():
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Content is required"},
        )
    if client is None:
        logger.error("Summary requested without a model API key")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": MISSING_API_KEY, "message": MISSING_API_KEY},
        )

    try:
        result = await summarize_memo(
            client,
            repo,
            content=payload.content,
            title=payload.title,
            memo_id=payload.memo_id,
        )
    except Exception as err:
        logger.error("Error generating summary: %s", err, extra={"error_type": type(err).__name__})
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to generate summary", "message": str(err) or "Unknown error"},
        )

    if result.saved and store is not None:
        await store.refresh()
    return result
