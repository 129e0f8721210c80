"""
Tests for <sub> markup rewriting.

Tests cover:
- The subscript table contents and immutability
- Rewriting single and multiple spans
- Unmapped characters passing through
- Malformed, empty and nested wrappers left untouched
"""

import pytest

from glyphfix.text.subscript import SUBSCRIPT_TABLE, rewrite, to_subscript


class TestSubscriptTable:
    """Test suite for SUBSCRIPT_TABLE."""

    def test_digits_and_symbols(self):
        assert to_subscript("0123456789") == "₀₁₂₃₄₅₆₇₈₉"
        assert to_subscript("+-=()") == "₊₋₌₍₎"

    def test_letters(self):
        assert to_subscript("aehijklmnoprstuvx") == "ₐₑₕᵢⱼₖₗₘₙₒₚᵣₛₜᵤᵥₓ"
        assert SUBSCRIPT_TABLE["i"] == "ᵢ"
        assert SUBSCRIPT_TABLE["x"] == "ₓ"

    def test_only_known_characters_are_mapped(self):
        assert len(SUBSCRIPT_TABLE) == 32
        assert "b" not in SUBSCRIPT_TABLE
        assert "A" not in SUBSCRIPT_TABLE

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            SUBSCRIPT_TABLE["b"] = "x"


class TestRewrite:
    """Test suite for rewrite."""

    def test_water(self):
        assert rewrite("H<sub>2</sub>O") == "H₂O"

    def test_mixed_content(self):
        assert rewrite("<sub>a+1</sub>") == "ₐ₊₁"

    def test_unmapped_characters_pass_through(self):
        assert rewrite("<sub>bz</sub>") == "bz"
        assert rewrite("<sub>n-B</sub>") == "ₙ₋B"

    def test_multiple_spans(self):
        assert rewrite("C<sub>6</sub>H<sub>12</sub>O<sub>6</sub>") == "C₆H₁₂O₆"

    def test_no_markup_is_identity(self):
        text = "plain text with < and >"
        assert rewrite(text) is text

    def test_unterminated_tag_untouched(self):
        assert rewrite("x<sub>2") == "x<sub>2"
        assert rewrite("x<sub>2</sup>") == "x<sub>2</sup>"

    def test_empty_span_untouched(self):
        assert rewrite("<sub></sub>") == "<sub></sub>"

    def test_nested_wrapper_rewrites_inner_span_only(self):
        assert rewrite("<sub><sub>2</sub></sub>") == "<sub>₂</sub>"

    def test_on_convert_callback(self):
        conversions = []
        rewrite(
            "H<sub>2</sub>O and CO<sub>2</sub>",
            on_convert=lambda match, result: conversions.append((match, result)),
        )
        assert conversions == [("<sub>2</sub>", "₂"), ("<sub>2</sub>", "₂")]
