"""
Sample values for props.

``HeuristicSampler`` maps each ``PropTag`` to a name-keyword heuristic. The
values are for display in stories and mocks only. Callers depend on the
``SampleStrategy`` protocol, so a sampler backed by a real type parser can be
dropped in without touching them.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from .props import PropDescriptor, PropTag, union_members


PLACEHOLDER_IMAGE = "https://via.placeholder.com/400x300"
SAMPLE_DESCRIPTION = (
    "This is a sample description for the component. "
    "It provides context about what this component does."
)

QUOTED = re.compile(r"""^(['"`])(.*)\1$""")


@dataclass(frozen=True)
class RawExpression:
    """TypeScript source emitted verbatim (functions, identifiers)."""

    source: str


class SampleStrategy(Protocol):
    """Produces a representative value for one prop, or None to omit it."""

    def sample(self, prop: PropDescriptor, component_name: str) -> Any: ...


def _has(name: str, *keywords: str) -> bool:
    lowered = name.lower()
    return any(k in lowered for k in keywords)


def _literal(member: str) -> str | None:
    match = QUOTED.match(member)
    return match.group(2) if match else None


class HeuristicSampler:
    """Keyword heuristics keyed on prop tag."""

    def __init__(self) -> None:
        self._samplers: dict[PropTag, Callable[[PropDescriptor, str], Any]] = {
            PropTag.STRING: self._string,
            PropTag.NUMBER: self._number,
            PropTag.BOOLEAN: self._boolean,
            PropTag.ARRAY: self._array,
            PropTag.FUNCTION: self._function,
            PropTag.UNION: self._union,
        }

    def register(self, tag: PropTag, sampler: Callable[[PropDescriptor, str], Any]) -> None:
        """Replace the heuristic for one tag."""
        self._samplers[tag] = sampler

    def sample(self, prop: PropDescriptor, component_name: str) -> Any:
        if prop.tag is None:
            return None
        return self._samplers[prop.tag](prop, component_name)

    @staticmethod
    def _string(prop: PropDescriptor, component_name: str) -> str:
        name = prop.name
        if _has(name, "image", "img", "src", "avatar", "photo", "thumbnail"):
            return PLACEHOLDER_IMAGE
        if _has(name, "url", "link", "href"):
            return "https://example.com"
        if _has(name, "title", "heading"):
            return f"{component_name} Title"
        if _has(name, "button", "cta", "action", "label"):
            return "Click Me"
        if _has(name, "description", "content", "text", "body", "summary"):
            return SAMPLE_DESCRIPTION
        if _has(name, "email"):
            return "user@example.com"
        if _has(name, "name", "author"):
            return "Sample Name"
        return f"Sample {name}"

    @staticmethod
    def _number(prop: PropDescriptor, component_name: str) -> int | float:
        lowered = prop.name.lower()
        if lowered.endswith("id"):
            return 1
        if _has(lowered, "count", "quantity", "total"):
            return 5
        if _has(lowered, "price", "cost", "amount"):
            return 99.99
        return 42

    @staticmethod
    def _boolean(prop: PropDescriptor, component_name: str) -> bool:
        return True

    def _array(self, prop: PropDescriptor, component_name: str) -> list[Any]:
        element = prop.type_text.strip()
        element = element[:-2] if element.endswith("[]") else re.sub(r"^(?:Readonly)?Array<(.*)>$", r"\1", element)
        if element.strip() == "number":
            return [1, 2, 3]
        if element.strip() != "string" and _has(prop.name, "items", "list", "data", "entries", "rows"):
            return [
                {"id": i, "name": f"Item {i}", "description": f"Description for item {i}"}
                for i in range(1, 4)
            ]
        return ["Item 1", "Item 2", "Item 3"]

    @staticmethod
    def _function(prop: PropDescriptor, component_name: str) -> RawExpression:
        return RawExpression(f'() => console.log("{prop.name} called")')

    def _union(self, prop: PropDescriptor, component_name: str) -> Any:
        members = union_members(prop.type_text)
        for member in members:
            literal = _literal(member)
            if literal is not None:
                return literal
        for member, tag in (("string", PropTag.STRING), ("number", PropTag.NUMBER), ("boolean", PropTag.BOOLEAN)):
            if member in members:
                return self._samplers[tag](prop, component_name)
        return None


def default_values(
    props: list[PropDescriptor],
    component_name: str,
    strategy: SampleStrategy | None = None,
) -> dict[str, Any]:
    """The "default" value set for a component, in declaration order."""
    strategy = strategy or HeuristicSampler()
    values: dict[str, Any] = {}
    for prop in props:
        value = strategy.sample(prop, component_name)
        if value is not None:
            values[prop.name] = value

    names = {p.name for p in props}
    lowered = component_name.lower()
    if "button" in lowered and "onClick" not in values:
        values["onClick"] = RawExpression('() => console.log("Button clicked")')
    if "card" in lowered and "theme" in names and "theme" not in values:
        values["theme"] = "light"
    return values


def alternative_overrides(
    props: list[PropDescriptor],
    defaults: dict[str, Any],
    component_name: str,
) -> dict[str, Any]:
    """
    Fields the "alternative" set changes relative to the defaults.

    The alternative set is always ``{...defaults, ...overrides}``; only
    props already present in the defaults are overridden.
    """
    overrides: dict[str, Any] = {}
    for prop in props:
        if prop.name not in defaults:
            continue
        current = defaults[prop.name]

        if prop.tag is PropTag.UNION:
            literals = [lit for lit in map(_literal, union_members(prop.type_text)) if lit is not None]
            others = [lit for lit in literals if lit != current]
            if others:
                overrides[prop.name] = others[0]
        elif prop.tag is PropTag.STRING and _has(prop.name, "title", "heading"):
            overrides[prop.name] = f"Alternative {component_name} Title"
        elif prop.tag is PropTag.STRING and _has(prop.name, "button", "cta", "action", "label"):
            if not _has(prop.name, "url", "link", "href"):
                overrides[prop.name] = "View Details"
        elif prop.tag is PropTag.BOOLEAN and re.match(r"^(?:is|show|has|disabled)", prop.name):
            overrides[prop.name] = not current

    if "theme" in defaults and "theme" not in overrides and defaults["theme"] == "light":
        overrides["theme"] = "dark"
    return overrides
