from __future__ import annotations

from pydantic import ConfigDict, Field

from app.core.models.base import AppBaseModel


class TagSuggestionRequest(AppBaseModel):
    model_config = ConfigDict(extra="ignore")

    # Both are required; presence is checked by the endpoint so a missing
    # field yields {"error": ...} rather than a validation payload.
    title: str | None = Field(default=None, description="Memo title")
    content: str | None = Field(default=None, description="Memo body")


class TagSuggestionResponse(AppBaseModel):
    tags: list[str] = Field(default_factory=list, max_length=5)


class SummarizeRequest(AppBaseModel):
    model_config = ConfigDict(extra="ignore")

    content: str | None = Field(default=None, description="Memo body to summarize")
    title: str | None = None
    memo_id: str | None = Field(default=None, description="Memo to store the summary on")
