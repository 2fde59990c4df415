from __future__ import annotations

from enum import Enum
from uuid import uuid4

from pydantic import Field, field_validator

from .base import TimestampedModel

ALL_CATEGORIES = "all"


class MemoCategory(str, Enum):
    """Fixed set of memo categories."""

    PERSONAL = "personal"
    WORK = "work"
    STUDY = "study"
    IDEA = "idea"
    OTHER = "other"


class Memo(TimestampedModel):
    """Memo domain model in the application shape."""

    id: str = Field(default_factory=lambda: str(uuid4()), min_length=1, description="Unique memo identifier")

    title: str = Field(default="", description="Memo title")
    content: str = Field(default="", description="Memo body, markdown allowed")

    category: MemoCategory = Field(default=MemoCategory.OTHER, description="Memo category")
    # Duplicates are allowed; only generated tag lists are bounded.
    tags: list[str] = Field(default_factory=list, description="Free-form tags")

    ai_summary: str | None = Field(default=None, description="Generated summary, None when absent")

    @field_validator("tags", mode="before")
    @classmethod
    def coerce_missing_tags(cls, v):
        return [] if v is None else v

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": str(uuid4()),
                    "title": "Trip",
                    "content": "Planning a trip to Seoul next month to see palaces and try street food",
                    "category": "personal",
                    "tags": ["travel", "seoul", "food"],
                    "aiSummary": None,
                }
            ]
        }
    }
