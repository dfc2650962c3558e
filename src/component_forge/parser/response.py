"""
Response Parser
Turns free-form model replies into a component name and source file.

Parsing is an ordered pipeline of small steps. Each step reads and updates a
shared ``ParseState``; none of them raise on missing content, every gap
degrades to a fallback value instead.
"""

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..core import get_logger
from .models import GenerationResult

logger = get_logger(__name__)


FALLBACK_COMPONENT_NAME = "GeneratedComponent"
CODE_LANGUAGES = ("tsx", "typescript", "ts", "jsx", "javascript", "js")

NAME_MARKER = re.compile(r"COMPONENT_NAME:\s*([A-Z][A-Za-z0-9]*)")
NAME_LINE = re.compile(r"^[^\n]*COMPONENT_NAME:[^\n]*(?:\n|$)", re.MULTILINE)
DESCRIPTION_NAME = re.compile(
    r"\b(?:create|generate|make|build)\s+(?:(?:a|an|the)\s+)?(?!(?:a|an|the)\b)([A-Za-z][A-Za-z0-9]*)\s+component\b",
    re.IGNORECASE,
)
FENCED_BLOCK = re.compile(
    r"```(?:" + "|".join(CODE_LANGUAGES) + r")\b[^\n]*\n?(.*?)```",
    re.DOTALL | re.IGNORECASE,
)
STRAY_FENCE = re.compile(r"```[A-Za-z]*[ \t]*\n?")
DEFAULT_EXPORT = re.compile(r"\bexport\s+default\b")
USAGE_COMMENT = re.compile(r"/\*.*?USAGE.*?\*/|//[^\n]*USAGE", re.DOTALL)
REACT_IMPORT = re.compile(r"^\s*import\s+React\b", re.MULTILINE)


@dataclass
class ParseState:
    """Mutable state threaded through the parsing steps."""

    raw: str
    description: str | None = None
    text: str = ""
    name: str | None = None
    code: str = ""


ParseStep = Callable[[ParseState], None]


def _named_export(name: str) -> re.Pattern[str]:
    return re.compile(rf"\bexport\s+(?:const|function|class)\s+{re.escape(name)}\b")


def _definition(name: str) -> re.Pattern[str]:
    return re.compile(rf"\b(?:function|const|let|var|class)\s+{re.escape(name)}\b")


def _props_type(name: str) -> re.Pattern[str]:
    return re.compile(rf"\b(?:interface|type)\s+{re.escape(name)}Props\b")


def name_from_description(description: str | None) -> str | None:
    """Infer a PascalCase name from phrases like "create a card component"."""
    if not description:
        return None
    match = DESCRIPTION_NAME.search(description)
    if not match:
        return None
    word = match.group(1)
    return word[0].upper() + word[1:]


# ============================================================================
# Steps
# ============================================================================

def extract_name(state: ParseState) -> None:
    """Marker line first, then the originating description, then the fallback."""
    match = NAME_MARKER.search(state.raw)
    if match:
        state.name = match.group(1)
        return

    inferred = name_from_description(state.description)
    if inferred:
        logger.debug("name_from_description", name=inferred)
        state.name = inferred
        return

    logger.debug("name_fallback", name=FALLBACK_COMPONENT_NAME)
    state.name = FALLBACK_COMPONENT_NAME


def strip_name_line(state: ParseState) -> None:
    state.text = NAME_LINE.sub("", state.text or state.raw, count=1)


def extract_code_block(state: ParseState) -> None:
    """First fenced block in a recognised language, else the whole text."""
    match = FENCED_BLOCK.search(state.text)
    if match:
        state.code = match.group(1).strip()
    else:
        logger.debug("no_code_block")
        state.code = state.text.strip()


def strip_fences(state: ParseState) -> None:
    state.code = STRAY_FENCE.sub("", state.code).strip()


def ensure_default_export(state: ParseState) -> None:
    """Add ``export default`` when only a named export exists."""
    name = state.name or FALLBACK_COMPONENT_NAME
    if _named_export(name).search(state.code) and not DEFAULT_EXPORT.search(state.code):
        state.code = f"{state.code}\n\nexport default {name};\n"


def synthesize_implementation(state: ParseState) -> None:
    """Append a placeholder component when the reply only declared types."""
    name = state.name or FALLBACK_COMPONENT_NAME
    if _definition(name).search(state.code):
        return

    logger.info("implementation_synthesized", name=name)
    blocks = [state.code] if state.code else []
    if not REACT_IMPORT.search(state.code):
        blocks.append("import React from 'react';")
    if not _props_type(name).search(state.code):
        blocks.append(
            f"export interface {name}Props {{\n"
            "  title?: string;\n"
            "  description?: string;\n"
            "  ctaText?: string;\n"
            "  ctaLink?: string;\n"
            "}"
        )
    blocks.append(_placeholder_component(name))
    if not DEFAULT_EXPORT.search(state.code):
        blocks.append(f"export default {name};")
    state.code = "\n\n".join(blocks) + "\n"


def _placeholder_component(name: str) -> str:
    return (
        f"export const {name}: React.FC<{name}Props> = ({{\n"
        "  title,\n"
        "  description,\n"
        "  ctaText,\n"
        "  ctaLink,\n"
        "}) => {\n"
        "  return (\n"
        '    <div className="rounded-lg shadow-md p-6 bg-white">\n'
        '      {title && <h2 className="text-xl font-bold mb-2">{title}</h2>}\n'
        '      {description && <p className="text-gray-700 mb-4">{description}</p>}\n'
        "      {ctaText && ctaLink && (\n"
        "        <a\n"
        "          href={ctaLink}\n"
        '          className="inline-block px-4 py-2 bg-blue-600 text-white rounded hover:bg-blue-700 transition-colors"\n'
        "        >\n"
        "          {ctaText}\n"
        "        </a>\n"
        "      )}\n"
        "    </div>\n"
        "  );\n"
        "};"
    )


def usage_header(name: str) -> str:
    """Generated usage comment for components that came without one."""
    return (
        "/*\n"
        f" * {name} - Component generated from user description\n"
        " *\n"
        " * USAGE:\n"
        f" * import {{ {name} }} from '@/components/{name}';\n"
        " *\n"
        f" * <{name} prop1=\"value\" prop2={{value}} />\n"
        " *\n"
        " * PROPS:\n"
        f" * Check the {name}Props interface below for available props\n"
        " *\n"
        " * CUSTOMIZATION:\n"
        " * - Modify the component props interface to add or remove properties\n"
        " * - Adjust the Tailwind CSS classes to change the styling\n"
        " * - Add additional functionality as needed\n"
        " */\n"
    )


def ensure_usage_header(state: ParseState) -> None:
    if USAGE_COMMENT.search(state.code):
        return
    state.code = usage_header(state.name or FALLBACK_COMPONENT_NAME) + state.code


DEFAULT_STEPS: tuple[ParseStep, ...] = (
    extract_name,
    strip_name_line,
    extract_code_block,
    strip_fences,
    ensure_default_export,
    synthesize_implementation,
    ensure_usage_header,
)


# ============================================================================
# Parser
# ============================================================================

class ResponseParser:
    """Runs the parsing pipeline over a raw model reply."""

    def __init__(
        self,
        description: str | None = None,
        steps: Sequence[ParseStep] = DEFAULT_STEPS,
    ) -> None:
        self.description = description
        self.steps = tuple(steps)

    def parse(self, raw: str) -> GenerationResult:
        """
        Parse a model reply.

        Args:
            raw: Reply text exactly as returned by the model

        Returns:
            Component name, component code and the untouched reply
        """
        state = ParseState(raw=raw, description=self.description, text=raw)
        for step in self.steps:
            step(state)

        name = state.name or FALLBACK_COMPONENT_NAME
        code = state.code or raw or usage_header(name)
        logger.info("component_parsed", name=name, code_length=len(code))
        return GenerationResult(component_name=name, component_code=code, full_response=raw)


def parse_response(raw: str, description: str | None = None) -> GenerationResult:
    """Convenience function for one-off parsing."""
    return ResponseParser(description=description).parse(raw)
