"""Model reply parsing."""

from .models import GenerationResult
from .response import (
    DEFAULT_STEPS,
    FALLBACK_COMPONENT_NAME,
    ParseState,
    ResponseParser,
    parse_response,
)

__all__ = [
    "GenerationResult",
    "DEFAULT_STEPS",
    "FALLBACK_COMPONENT_NAME",
    "ParseState",
    "ResponseParser",
    "parse_response",
]
