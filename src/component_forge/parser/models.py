"""Parsed generation data models."""

from pydantic import BaseModel, ConfigDict, Field


class GenerationResult(BaseModel):
    """Component extracted from a model reply."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    component_name: str = Field(..., min_length=1, alias="componentName")
    component_code: str = Field(..., min_length=1, alias="componentCode")
    full_response: str = Field(default="", alias="fullResponse")

    def to_panel(self) -> dict[str, str]:
        """Wire form used by the panel (camelCase keys)."""
        return self.model_dump(by_alias=True)
