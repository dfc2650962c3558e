"""Scaffold Generator - barrel, mock-data and story files."""

import json
import re
from dataclasses import dataclass
from typing import Any

from ..core import get_logger
from .props import PropDescriptor, extract_props, find_props_block
from .samples import (
    HeuristicSampler,
    RawExpression,
    SampleStrategy,
    alternative_overrides,
    default_values,
)

logger = get_logger(__name__)

IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")
INDENT = "  "


@dataclass(frozen=True)
class ScaffoldFile:
    """One generated file, relative to the component directory."""

    filename: str
    content: str


def barrel_filename() -> str:
    return "index.ts"


def mock_filename(component_name: str) -> str:
    return f"{component_name}.mock.ts"


def story_filename(component_name: str) -> str:
    return f"{component_name}.stories.tsx"


def to_ts_literal(value: Any, level: int = 0) -> str:
    """Render a sample value as a TypeScript expression."""
    pad = INDENT * (level + 1)
    end = INDENT * level
    if isinstance(value, RawExpression):
        return value.source
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        items = ",\n".join(pad + to_ts_literal(v, level + 1) for v in value)
        return f"[\n{items},\n{end}]"
    if isinstance(value, dict):
        if not value:
            return "{}"
        return "{\n" + _object_body(value, level + 1) + f"\n{end}}}"
    if value is None:
        return "undefined"
    raise TypeError(f"Cannot render {type(value).__name__} as TypeScript")


def _key(name: str) -> str:
    return name if IDENTIFIER.match(name) else json.dumps(name)


def _object_body(values: dict[str, Any], level: int) -> str:
    pad = INDENT * level
    return "\n".join(f"{pad}{_key(k)}: {to_ts_literal(v, level)}," for k, v in values.items())


def render_barrel(component_name: str) -> str:
    return (
        f"export * from './{component_name}';\n"
        f"export {{ default }} from './{component_name}';\n"
    )


def render_mock_data(
    component_name: str,
    props_type: str | None,
    defaults: dict[str, Any],
    overrides: dict[str, Any],
) -> str:
    """Mock module exporting the default and alternative value sets."""
    annotation = props_type or "Record<string, unknown>"
    lines = []
    if props_type:
        lines += [f"import type {{ {props_type} }} from './{component_name}';", ""]

    default_body = _object_body(defaults, 1)
    lines += [
        "/**",
        f" * Mock data for {component_name} component",
        " */",
        f"export const mock{component_name}Data: {annotation} = {{",
    ]
    if default_body:
        lines.append(default_body)
    lines += [
        "};",
        "",
        "/**",
        f" * Alternative mock data for {component_name} component",
        " */",
        f"export const alternative{component_name}Data: {annotation} = {{",
        f"{INDENT}...mock{component_name}Data,",
    ]
    if overrides:
        lines.append(_object_body(overrides, 1))
    lines += ["};", ""]
    return "\n".join(lines)


def _story_header(component_name: str) -> list[str]:
    return [
        "import React from 'react';",
        "import type { Meta, StoryObj } from '@storybook/react';",
        f"import {component_name} from './index';",
    ]


def _story_meta(component_name: str) -> list[str]:
    return [
        "",
        f"const meta: Meta<typeof {component_name}> = {{",
        f"  title: 'Components/{component_name}',",
        f"  component: {component_name},",
        "  parameters: {",
        "    layout: 'centered',",
        "  },",
        "  tags: ['autodocs'],",
        "};",
        "",
        "export default meta;",
        f"type Story = StoryObj<typeof {component_name}>;",
        "",
    ]


def render_story(component_name: str) -> str:
    """Story module backed by the mock-data module."""
    lines = _story_header(component_name)
    lines.append(
        f"import {{ mock{component_name}Data, alternative{component_name}Data }} "
        f"from './{component_name}.mock';"
    )
    lines += _story_meta(component_name)
    lines += [
        "export const Default: Story = {",
        "  args: {",
        f"    ...mock{component_name}Data,",
        "  },",
        "};",
        "",
        "export const Variant: Story = {",
        "  args: {",
        f"    ...alternative{component_name}Data,",
        "  },",
        "};",
        "",
    ]
    return "\n".join(lines)


def render_inline_story(component_name: str, args: dict[str, Any]) -> str:
    """Story module with inline literals, used when no mock module exists."""
    lines = _story_header(component_name)
    lines += _story_meta(component_name)
    lines += ["export const Default: Story = {", "  args: {"]
    if args:
        lines.append(_object_body(args, 2))
    lines += [
        "  },",
        "};",
        "",
        "export const Variant: Story = {",
        "  args: {",
        "    // Add variant props here",
        "  },",
        "};",
        "",
    ]
    return "\n".join(lines)


def _inline_story_props(props: list[PropDescriptor]) -> list[PropDescriptor]:
    keep = ("image", "img", "src", "title", "description")
    return [p for p in props if any(k in p.name.lower() for k in keep)]


class ScaffoldGenerator:
    """Derives auxiliary files from parsed component code."""

    def __init__(self, strategy: SampleStrategy | None = None) -> None:
        self.strategy = strategy or HeuristicSampler()

    def generate(
        self,
        component_name: str,
        component_code: str,
        want_storybook: bool = False,
        want_mock_data: bool = False,
    ) -> list[ScaffoldFile]:
        """
        Build scaffold files for a component.

        Args:
            component_name: PascalCase component name
            component_code: Parsed component source
            want_storybook: Emit ``<Name>.stories.tsx``
            want_mock_data: Emit ``<Name>.mock.ts``

        Returns:
            Barrel file first, then mock data and story when requested
        """
        files = [ScaffoldFile(barrel_filename(), render_barrel(component_name))]
        if not (want_storybook or want_mock_data):
            return files

        has_props_type = find_props_block(component_code, component_name) is not None
        props = extract_props(component_code, component_name)
        logger.debug("props_extracted", component=component_name, count=len(props))

        if want_mock_data:
            defaults = default_values(props, component_name, self.strategy)
            overrides = alternative_overrides(props, defaults, component_name)
            files.append(
                ScaffoldFile(
                    mock_filename(component_name),
                    render_mock_data(
                        component_name,
                        f"{component_name}Props" if has_props_type else None,
                        defaults,
                        overrides,
                    ),
                )
            )

        if want_storybook:
            if want_mock_data:
                content = render_story(component_name)
            else:
                args = default_values(_inline_story_props(props), component_name, self.strategy)
                args = {k: v for k, v in args.items() if not isinstance(v, RawExpression)}
                content = render_inline_story(component_name, args)
            files.append(ScaffoldFile(story_filename(component_name), content))

        return files
