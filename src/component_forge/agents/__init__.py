"""Generation agents."""

from .generator import (
    ComponentGenerator,
    ComponentService,
    DescriptionFormatter,
    GenerationOutcome,
)
from .prompts import COMPONENT_SYSTEM_PROMPT, FORMAT_SYSTEM_PROMPT, PromptBuilder

__all__ = [
    "ComponentGenerator",
    "ComponentService",
    "DescriptionFormatter",
    "GenerationOutcome",
    "COMPONENT_SYSTEM_PROMPT",
    "FORMAT_SYSTEM_PROMPT",
    "PromptBuilder",
]
