from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any

from app.config import settings
from app.utils.logging import get_logger

if TYPE_CHECKING:
    from openai import AsyncOpenAI

logger = get_logger(__name__)

MAX_TAGS = 5
PROMPT_CONTENT_LIMIT = 1000

_ARRAY_PATTERN = re.compile(r"\[.*\]", re.DOTALL)
_EDGE_QUOTES = re.compile(r"^[\"'\[\]]|[\"'\[\]]$")


def build_tag_prompt(title: str, content: str) -> str:
    return (
        "Analyze the title and content of the following memo and suggest fitting tags.\n"
        "Suggest single words only. Do not include the # symbol. Suggest 3 to 5 tags.\n"
        "Reply with a JSON array of strings only, without any explanation.\n\n"
        f"Title: {title}\n"
        f"Content: {content[:PROMPT_CONTENT_LIMIT]}\n\n"
        'Response format: ["tag1", "tag2", "tag3"]'
    )


def _decode_tags(text: str) -> list[Any]:
    match = _ARRAY_PATTERN.search(text)
    if match:
        parsed = json.loads(match.group(0))
        return parsed if isinstance(parsed, list) else []
    # Not an array: treat the reply as comma separated words
    pieces = (_EDGE_QUOTES.sub("", piece.strip()) for piece in text.split(","))
    return [p for p in pieces if p]


def parse_tags(text: str) -> list[str]:
    """Extract at most five clean tags from a free-text model reply.

    The first bracketed array in the reply is decoded as JSON; failing that,
    the reply is split on commas. A reply that cannot be decoded yields no
    tags rather than an error.
    """
    try:
        raw = _decode_tags(text.strip())
    except ValueError as err:
        logger.warning("Failed to parse tags: %s, reply: %r", err, text[:200])
        raw = []

    tags: list[str] = []
    for item in raw:
        if not isinstance(item, str):
            continue
        tag = item.strip().lstrip("#").strip()
        if tag:
            tags.append(tag)
    return tags[:MAX_TAGS]


async def suggest_tags(client: AsyncOpenAI, *, title: str, content: str) -> list[str]:
    """Ask the model for tags describing a memo. Model failures propagate."""
    logger.info("Requesting tag suggestions - title: %s, content length: %d", title, len(content))

    response = await client.responses.create(
        model=settings.tag_model,
        input=build_tag_prompt(title, content),
        reasoning={"effort": settings.model_reasoning},
    )
    reply = (response.output_text or "").strip()
    logger.debug("Tag reply: %s", reply[:200])

    tags = parse_tags(reply)
    logger.info("Suggested %d tags", len(tags))
    return tags
