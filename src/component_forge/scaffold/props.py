"""
Props extraction
Regex/brace-scan heuristics over a component's ``<Name>Props`` declaration.
"""

import re
from dataclasses import dataclass
from enum import Enum


class PropTag(str, Enum):
    """Closed set of type tags used to pick sample values."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    FUNCTION = "function"
    UNION = "union"


@dataclass(frozen=True)
class PropDescriptor:
    """One declared prop."""

    name: str
    type_text: str
    tag: PropTag | None
    required: bool


_OPENERS = {"{": "}", "(": ")", "[": "]", "<": ">"}
_CLOSERS = set(_OPENERS.values())

PROPERTY = re.compile(r"^(?:readonly\s+)?([\"']?)([A-Za-z_$][\w$]*)\1\s*(\?)?\s*:\s*(.*)$", re.DOTALL)
METHOD = re.compile(r"^([A-Za-z_$][\w$]*)\s*(\?)?\s*\(.*\)\s*:\s*(.+)$", re.DOTALL)
BARE = re.compile(r"^([A-Za-z_$][\w$]*)\s*(\?)?$")
BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
LINE_COMMENT = re.compile(r"(?<![:\"'])//[^\n]*")


def _declaration(component_name: str) -> re.Pattern[str]:
    name = re.escape(component_name)
    return re.compile(
        rf"\b(?:interface\s+{name}Props\b[^{{]*|type\s+{name}Props\s*=\s*)\{{"
    )


def _split_top_level(text: str, separators: str) -> list[str]:
    """Split on separator characters that sit outside any brackets."""
    parts: list[str] = []
    depth = 0
    quote: str | None = None
    current: list[str] = []
    prev = ""
    for ch in text:
        if quote:
            if ch == quote and prev != "\\":
                quote = None
        elif ch in "\"'`":
            quote = ch
        elif ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS and not (ch == ">" and prev == "="):
            depth = max(depth - 1, 0)
        elif ch in separators and depth == 0:
            parts.append("".join(current))
            current = []
            prev = ch
            continue
        current.append(ch)
        prev = ch
    parts.append("".join(current))
    return parts


def find_props_block(code: str, component_name: str) -> str | None:
    """
    Return the body of ``<Name>Props`` (between its braces), or None.

    Handles ``interface NameProps { ... }``, ``interface NameProps extends X { ... }``
    and ``type NameProps = { ... }``.
    """
    match = _declaration(component_name).search(code)
    if not match:
        return None

    depth = 1
    start = match.end()
    for i in range(start, len(code)):
        if code[i] == "{":
            depth += 1
        elif code[i] == "}":
            depth -= 1
            if depth == 0:
                return code[start:i]
    # Unterminated declaration: take what is there
    return code[start:]


def infer_tag(type_text: str) -> PropTag | None:
    """Map declared type text to a tag; None when unrecognised."""
    t = type_text.strip().rstrip(";,").strip()
    if not t:
        return PropTag.STRING
    if "=>" in t or re.match(r"^(?:Function|VoidFunction)\b", t):
        return PropTag.FUNCTION
    if t.endswith("[]") or re.match(r"^(?:Readonly)?Array<", t):
        return PropTag.ARRAY
    if len(_split_top_level(t, "|")) > 1:
        return PropTag.UNION
    if t.startswith("{") or t.startswith("Record<"):
        return None
    if re.search(r"\bstring\b", t):
        return PropTag.STRING
    if re.search(r"\bnumber\b", t):
        return PropTag.NUMBER
    if re.search(r"\bboolean\b", t):
        return PropTag.BOOLEAN
    return None


def union_members(type_text: str) -> list[str]:
    """Top-level members of a union type."""
    return [m.strip() for m in _split_top_level(type_text.strip(), "|") if m.strip()]


def parse_member(member: str) -> PropDescriptor | None:
    text = member.strip()
    if not text or text.startswith("["):  # index signature
        return None

    method = METHOD.match(text)
    if method and not PROPERTY.match(text):
        return PropDescriptor(
            name=method.group(1),
            type_text=f"() => {method.group(3).strip()}",
            tag=PropTag.FUNCTION,
            required=method.group(2) is None,
        )

    prop = PROPERTY.match(text)
    if prop:
        type_text = " ".join(prop.group(4).split())
        return PropDescriptor(
            name=prop.group(2),
            type_text=type_text,
            tag=infer_tag(type_text),
            required=prop.group(3) is None,
        )

    bare = BARE.match(text)
    if bare:
        return PropDescriptor(name=bare.group(1), type_text="", tag=PropTag.STRING, required=bare.group(2) is None)
    return None


def parse_props(block: str | None) -> list[PropDescriptor]:
    """Parse every member of a props body; comments are ignored."""
    if not block:
        return []
    body = LINE_COMMENT.sub("", BLOCK_COMMENT.sub("", block))
    props = []
    for member in _split_top_level(body, ";,\n"):
        descriptor = parse_member(member)
        if descriptor:
            props.append(descriptor)
    return props


def extract_props(code: str, component_name: str) -> list[PropDescriptor]:
    """Props declared by ``<component_name>Props``; empty when absent."""
    return parse_props(find_props_block(code, component_name))
