from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from navmap.exceptions import ConfigError


class AppConfig(BaseModel):
    """Application-specific configuration values."""

    name: str = "Navmap"
    env: str = "development"
    debug: bool = True
    port: int = 8000
    log_level: str = "INFO"
    # Transport settings for FastMCP: "stdio" (default), "http", or "sse"
    transport: Literal["stdio", "http", "sse"] = "stdio"
    host: str = "127.0.0.1"


class ParserConfig(BaseModel):
    """Navigation inference configuration values."""

    # Vertical distance (PDF units) within which text fragments share a row
    row_tolerance: float = 5.0
    cell_separator: str = " | "
    logo_text: str = "LOGO"
    max_document_bytes: int = 20 * 1024 * 1024


class FetchConfig(BaseModel):
    """Remote document fetch configuration values."""

    timeout: float = 20.0
    user_agent: str = "navmap-document-fetcher/0.1"
    verify_ssl: bool = True


class Settings(BaseSettings):
    """Top-level settings loaded from environment variables and .env only."""

    model_config = SettingsConfigDict(
        env_prefix="NAVMAP_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    app: AppConfig = AppConfig()
    parser: ParserConfig = ParserConfig()
    fetch: FetchConfig = FetchConfig()


def load_settings() -> Settings:
    """Load settings from environment variables and .env only.

    Raises `ConfigError` when a value cannot be coerced to its declared type.
    """
    try:
        return Settings()  # type: ignore[call-arg]
    except ValidationError as exc:
        raise ConfigError(f"Invalid Navmap settings: {exc}") from exc
