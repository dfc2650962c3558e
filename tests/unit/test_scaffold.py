"""Scaffold file generation tests."""

import pytest

from component_forge.scaffold import ScaffoldGenerator
from component_forge.scaffold.files import render_barrel, render_mock_data, to_ts_literal
from component_forge.scaffold.samples import RawExpression


PRICING_CODE = """import React from 'react';

export interface PricingProps {title: string; price: number}

export const Pricing: React.FC<PricingProps> = ({ title, price }) => <div>{title} {price}</div>;
export default Pricing;
"""


@pytest.mark.unit
def test_barrel():
    assert render_barrel("Card") == "export * from './Card';\nexport { default } from './Card';\n"


@pytest.mark.unit
def test_barrel_only_by_default():
    files = ScaffoldGenerator().generate("Pricing", PRICING_CODE)
    assert [f.filename for f in files] == ["index.ts"]


@pytest.mark.unit
def test_pricing_mock_data():
    """Test mock values and the alternative spread."""
    files = ScaffoldGenerator().generate("Pricing", PRICING_CODE, want_mock_data=True)
    assert [f.filename for f in files] == ["index.ts", "Pricing.mock.ts"]

    mock = files[1].content
    assert "import type { PricingProps } from './Pricing';" in mock
    assert "export const mockPricingData: PricingProps = {" in mock
    assert '  title: "Pricing Title",' in mock
    assert "  price: 99.99," in mock
    assert "export const alternativePricingData: PricingProps = {\n  ...mockPricingData," in mock
    assert '  title: "Alternative Pricing Title",' in mock


@pytest.mark.unit
def test_story_backed_by_mock(card_reply):
    files = ScaffoldGenerator().generate("Card", card_reply, want_storybook=True, want_mock_data=True)
    assert [f.filename for f in files] == ["index.ts", "Card.mock.ts", "Card.stories.tsx"]

    story = files[2].content
    assert "import { mockCardData, alternativeCardData } from './Card.mock';" in story
    assert "title: 'Components/Card'" in story
    assert "export const Default: Story" in story
    assert "...alternativeCardData," in story


@pytest.mark.unit
def test_inline_story(card_reply):
    """Test stories without a mock module carry inline display props."""
    files = ScaffoldGenerator().generate("Card", card_reply, want_storybook=True)
    assert [f.filename for f in files] == ["index.ts", "Card.stories.tsx"]

    story = files[1].content
    assert '    title: "Card Title",' in story
    assert "// Add variant props here" in story
    assert ".mock" not in story
    assert "console.log" not in story


@pytest.mark.unit
def test_mock_without_props_type():
    files = ScaffoldGenerator().generate("Foo", "export const Foo = () => null;", want_mock_data=True)
    mock = files[1].content
    assert "import type" not in mock
    assert "export const mockFooData: Record<string, unknown> = {" in mock


@pytest.mark.unit
def test_render_mock_data_raw_expression():
    content = render_mock_data("Btn", "BtnProps", {"onClick": RawExpression("() => {}")}, {})
    assert "  onClick: () => {}," in content


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,expected",
    [
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (99.99, "99.99"),
        ('say "hi"', '"say \\"hi\\""'),
        ([], "[]"),
        (None, "undefined"),
        (RawExpression("() => 1"), "() => 1"),
    ],
)
def test_ts_literal(value, expected):
    assert to_ts_literal(value) == expected


@pytest.mark.unit
def test_ts_literal_nested():
    rendered = to_ts_literal([{"id": 1, "data-key": "x"}])
    assert rendered == '[\n  {\n    id: 1,\n    "data-key": "x",\n  },\n]'
