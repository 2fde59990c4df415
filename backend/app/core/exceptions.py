from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import status
from fastapi.responses import JSONResponse
from postgrest.exceptions import APIError

from app.utils.logging import get_logger

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = get_logger(__name__)


class MemoNotFoundError(LookupError):
    """The remote store has no row for the requested memo."""

    def __init__(self, memo_id: str) -> None:
        super().__init__(f"Memo {memo_id} not found")
        self.memo_id = memo_id


def describe_api_error(err: APIError) -> dict[str, str | None]:
    """Diagnostic fields PostgREST attaches to a failed request."""
    return {
        "error_message": err.message,
        "error_details": err.details,
        "error_hint": err.hint,
        "error_code": err.code,
    }


def register_exception_handlers(app: FastAPI) -> None:
    """Convert store failures raised by memo operations into JSON responses."""

    @app.exception_handler(APIError)
    async def store_error_handler(request: Request, exc: APIError) -> JSONResponse:
        logger.error(
            "Remote store request failed",
            extra={"path": request.url.path, **describe_api_error(exc)},
        )
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"error": "Database request failed", "message": exc.message or "Unknown error"},
        )

    @app.exception_handler(MemoNotFoundError)
    async def memo_not_found_handler(request: Request, exc: MemoNotFoundError) -> JSONResponse:
        logger.warning("Memo not found in remote store", extra={"memo_id": exc.memo_id})
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Memo not found"},
        )
