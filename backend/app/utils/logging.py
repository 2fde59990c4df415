from __future__ import annotations

import logging
import sys

from app.config import settings

# HTTP clients used by supabase and openai log every request at INFO
_CLIENT_LOGGERS = ("httpx", "httpcore", "hpack", "openai")


def setup_logging() -> None:
    """Setup basic logging for the application."""

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout
    )

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)

    client_level = logging.DEBUG if settings.debug else max(level, logging.WARNING)
    for name in _CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(client_level)

    logging.info("Logging configured successfully", extra={"level": settings.log_level})


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
