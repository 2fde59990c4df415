from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="APP_",
        extra="ignore",
        case_sensitive=False,
    )

    # Application
    debug: bool = False
    log_level: str = "INFO"
    load_on_startup: bool = True

    # API
    api_prefix: str = "/api/v1"
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:8000",
    ]

    cors_origin_regex: str | None = None
    trusted_hosts: list[str] = ["*"]
    root_path: str = ""

    # Supabase (optional so a missing value surfaces as a request-time error)
    supabase_url: str | None = None
    supabase_anon_key: str | None = None
    memos_table: str = "memos"

    # Superseded on-disk storage, read once by the migration
    local_cache_path: str = ".memos-cache.json"

    # OpenAI
    openai_api_key: str | None = None
    tag_model: str = "gpt-5-nano"
    summary_model: str = "gpt-5-mini"
    model_reasoning: str = "low"


settings = Settings()
