"""Auxiliary file generation for generated components."""

from .files import ScaffoldFile, ScaffoldGenerator, to_ts_literal
from .props import PropDescriptor, PropTag, extract_props, infer_tag, parse_props
from .samples import (
    HeuristicSampler,
    RawExpression,
    SampleStrategy,
    alternative_overrides,
    default_values,
)

__all__ = [
    "ScaffoldFile",
    "ScaffoldGenerator",
    "to_ts_literal",
    "PropDescriptor",
    "PropTag",
    "extract_props",
    "infer_tag",
    "parse_props",
    "HeuristicSampler",
    "RawExpression",
    "SampleStrategy",
    "alternative_overrides",
    "default_values",
]
