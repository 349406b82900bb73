"""Tests for the message template compiler."""

from ruleforge.messages.template import (
    Segment,
    SegmentType,
    compile_template,
    placeholder_names,
)


def text(value: str) -> Segment:
    return Segment(SegmentType.TEXT, value)


def slot(name: str) -> Segment:
    return Segment(SegmentType.PLACEHOLDER, name)


class TestCompileTemplate:
    def test_mixed_text_and_placeholders(self):
        segments = compile_template("Field '{field}' must be at least {min} chars")
        assert list(segments) == [
            text("Field '"),
            slot("field"),
            text("' must be at least "),
            slot("min"),
            text(" chars"),
        ]

    def test_no_braces_is_single_literal(self):
        assert compile_template("Nothing to see here") == (text("Nothing to see here"),)

    def test_empty_template(self):
        assert compile_template("") == ()

    def test_adjacent_placeholders(self):
        assert compile_template("{a}{b}") == (slot("a"), slot("b"))

    def test_unclosed_brace_is_literal(self):
        assert compile_template("x{unclosed") == (text("x{unclosed"),)

    def test_unclosed_brace_after_placeholder(self):
        assert compile_template("{a} and {b") == (slot("a"), text(" and {b"))

    def test_empty_placeholder_name(self):
        assert compile_template("a{}b") == (text("a"), slot(""), text("b"))

    def test_placeholder_only(self):
        assert compile_template("{field}") == (slot("field"),)

    def test_closing_brace_without_opening_is_literal(self):
        assert compile_template("a}b") == (text("a}b"),)

    def test_nested_open_brace_belongs_to_name(self):
        assert compile_template("{a{b}c") == (slot("a{b"), text("c"))

    def test_is_deterministic(self):
        template = "Field '{field}' must be between {min} and {max}"
        assert compile_template(template) == compile_template(template)

    def test_segment_constructors(self):
        assert Segment.text("x") == text("x")
        assert Segment.placeholder("y") == slot("y")


class TestPlaceholderNames:
    def test_names_in_order_without_duplicates(self):
        assert placeholder_names("{b} {a} {b} {}") == ["b", "a", ""]

    def test_no_placeholders(self):
        assert placeholder_names("plain") == []
