"""Configuration Management."""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _default_api_key() -> str:
    return os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or ""


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="FORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Credentials
    api_key: str = Field(default_factory=_default_api_key, description="Gemini API key")
    credentials_file: Path = Field(
        default_factory=lambda: Path.home() / ".config" / "component-forge" / "credentials.json",
        description="Where an interactively entered API key is persisted",
    )

    # Component generation model
    model_name: str = Field(default="gemini-2.0-flash", description="Generation model name")
    temperature: float = Field(default=0.7, ge=0.0, le=2.0, description="Sampling temperature")
    max_tokens: int = Field(default=4096, gt=0, description="Max output tokens")

    # Description formatting model
    format_model_name: str = Field(default="gemini-2.0-flash-lite", description="Formatter model name")
    format_temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    format_max_tokens: int = Field(default=1000, gt=0)

    # Workspace
    workspace_root: Path = Field(default_factory=Path.cwd, description="Workspace root folder")

    # Server
    host: str = Field(default="127.0.0.1", description="Panel server host")
    port: int = Field(default=8765, gt=0, lt=65536, description="Panel server port")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
