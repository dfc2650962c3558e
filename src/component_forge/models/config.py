"""
Model configuration with strong typing.
Centralized settings for the Gemini API.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..core.config import Settings


class GeminiModelName(str, Enum):
    """Known Gemini model variants."""

    FLASH = "gemini-2.0-flash"  # Component generation (vision capable)
    FLASH_LITE = "gemini-2.0-flash-lite"  # Cheap text rewriting
    PRO = "gemini-1.5-pro"  # More capable, higher cost


class GeminiConfig(BaseModel):
    """Type-safe Gemini API configuration."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    model_name: str = Field(default=GeminiModelName.FLASH.value)
    api_key: str | None = Field(default=None)

    # Generation parameters
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_tokens: int = Field(default=4096, ge=1, le=8192)

    @classmethod
    def for_generation(cls, settings: Settings, api_key: str | None = None) -> "GeminiConfig":
        """Component generation constants from settings."""
        return cls(
            model_name=settings.model_name,
            api_key=api_key,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
        )

    @classmethod
    def for_formatting(cls, settings: Settings, api_key: str | None = None) -> "GeminiConfig":
        """Description formatter constants from settings."""
        return cls(
            model_name=settings.format_model_name,
            api_key=api_key,
            temperature=settings.format_temperature,
            max_tokens=settings.format_max_tokens,
        )
