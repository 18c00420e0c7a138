"""Test the plain-text deck outline."""

import pytest

from slide_compiler.models import CONTENT_NODE_TYPES
from slide_compiler.outline import FORMATTERS, describe_node, outline
from slide_compiler.validator import validate


def test_every_node_type_has_a_formatter():
    assert set(FORMATTERS) == set(CONTENT_NODE_TYPES.values())


def test_outline_of_example(example_deck):
    text = outline(validate(example_deck))
    lines = text.splitlines()
    assert lines[0] == "Introduction to Calculus"
    assert lines[1] == "Dr. Jane Smith / 2026-01-20"
    assert "1. Limits [slide-1]" in lines
    assert "   - equation: \\lim_{x \\to a} f(x) = L [reveal]" in lines
    assert "   - figure: figures/bisection.png (Each step halves the search interval.)" in lines
    assert "   - algorithm: Binary Search (5 steps)" in lines


def test_long_text_is_shortened():
    deck = validate({
        "meta": {"title": "T"},
        "slides": [{"type": "slide", "id": "a", "title": "A", "content": [{"type": "text", "content": "word " * 40}]}],
    })
    line = outline(deck).splitlines()[-1]
    assert line.endswith("...")
    assert len(line) == len("   - text: ") + 60


def test_unknown_node_rejected():
    with pytest.raises(TypeError):
        describe_node(object())
