"""Sample value heuristic tests."""

import pytest

from component_forge.scaffold import PropTag
from component_forge.scaffold.props import PropDescriptor, parse_props
from component_forge.scaffold.samples import (
    PLACEHOLDER_IMAGE,
    SAMPLE_DESCRIPTION,
    HeuristicSampler,
    RawExpression,
    alternative_overrides,
    default_values,
)


def prop(name: str, type_text: str, tag: PropTag | None) -> PropDescriptor:
    return PropDescriptor(name=name, type_text=type_text, tag=tag, required=True)


@pytest.mark.unit
@pytest.mark.parametrize(
    "name,expected",
    [
        ("imageUrl", PLACEHOLDER_IMAGE),
        ("avatar", PLACEHOLDER_IMAGE),
        ("href", "https://example.com"),
        ("title", "Pricing Title"),
        ("ctaText", "Click Me"),
        ("description", SAMPLE_DESCRIPTION),
        ("email", "user@example.com"),
        ("authorName", "Sample Name"),
        ("badge", "Sample badge"),
    ],
)
def test_string_samples(name, expected):
    assert HeuristicSampler().sample(prop(name, "string", PropTag.STRING), "Pricing") == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    "name,expected",
    [("userId", 1), ("itemCount", 5), ("price", 99.99), ("width", 42)],
)
def test_number_samples(name, expected):
    assert HeuristicSampler().sample(prop(name, "number", PropTag.NUMBER), "Pricing") == expected


@pytest.mark.unit
def test_array_samples():
    sampler = HeuristicSampler()
    items = sampler.sample(prop("items", "Item[]", PropTag.ARRAY), "List")
    tags = sampler.sample(prop("tags", "string[]", PropTag.ARRAY), "List")
    scores = sampler.sample(prop("scores", "Array<number>", PropTag.ARRAY), "List")

    assert items[0] == {"id": 1, "name": "Item 1", "description": "Description for item 1"}
    assert len(items) == 3
    assert tags == ["Item 1", "Item 2", "Item 3"]
    assert scores == [1, 2, 3]


@pytest.mark.unit
def test_other_tags():
    sampler = HeuristicSampler()
    assert sampler.sample(prop("isOpen", "boolean", PropTag.BOOLEAN), "Modal") is True
    assert sampler.sample(prop("onClose", "() => void", PropTag.FUNCTION), "Modal") == RawExpression(
        '() => console.log("onClose called")'
    )
    assert sampler.sample(prop("size", "'sm' | 'lg'", PropTag.UNION), "Modal") == "sm"
    assert sampler.sample(prop("label", "string | undefined", PropTag.UNION), "Modal") == "Click Me"
    assert sampler.sample(prop("children", "React.ReactNode", None), "Modal") is None


@pytest.mark.unit
def test_register_replaces_heuristic():
    sampler = HeuristicSampler()
    sampler.register(PropTag.NUMBER, lambda p, name: 7)
    assert sampler.sample(prop("price", "number", PropTag.NUMBER), "Pricing") == 7


@pytest.mark.unit
def test_pricing_values():
    """Test default and alternative sets for a simple props body."""
    props = parse_props("title: string; price: number")
    defaults = default_values(props, "Pricing")
    overrides = alternative_overrides(props, defaults, "Pricing")

    assert defaults == {"title": "Pricing Title", "price": 99.99}
    assert overrides == {"title": "Alternative Pricing Title"}


@pytest.mark.unit
def test_card_values(card_reply):
    from component_forge.scaffold.props import extract_props

    props = extract_props(card_reply, "Card")
    defaults = default_values(props, "Card")
    overrides = alternative_overrides(props, defaults, "Card")

    assert defaults["title"] == "Card Title"
    assert defaults["theme"] == "light"
    assert isinstance(defaults["onCtaClick"], RawExpression)
    assert overrides == {"title": "Alternative Card Title", "ctaText": "View Details", "theme": "dark"}


@pytest.mark.unit
def test_button_gets_click_handler():
    defaults = default_values(parse_props("label: string"), "PrimaryButton")
    assert defaults["label"] == "Click Me"
    assert defaults["onClick"] == RawExpression('() => console.log("Button clicked")')


@pytest.mark.unit
def test_boolean_flags_flip():
    props = parse_props("isActive: boolean; rounded: boolean")
    defaults = default_values(props, "Toggle")
    assert alternative_overrides(props, defaults, "Toggle") == {"isActive": False}


@pytest.mark.unit
def test_custom_strategy():
    class Constant:
        def sample(self, prop, component_name):
            return "x"

    assert default_values(parse_props("a: number; b: boolean"), "Foo", Constant()) == {"a": "x", "b": "x"}
