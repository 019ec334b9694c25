"""
Tests for value conversion.

Tests cover:
- Kind classification (declared type first, shape sniffing as fallback)
- Dimension, duration, cubic-bezier, shadow and fontFamily conversion
- Unrecognized values and their fallback text
"""

import pytest

from atom_styles.models import Converted, TokenKind, Unrecognized
from atom_styles.tokens.converter import (
    classify,
    convert_value,
    dimension_to_css,
    format_number,
    value_to_css,
)

SHADOW_SM = {
    "offsetX": {"value": 0, "unit": "px"},
    "offsetY": {"value": 1, "unit": "px"},
    "blur": {"value": 2, "unit": "px"},
    "spread": {"value": 0, "unit": "px"},
    "color": "rgba(0, 0, 0, 0.05)",
}


class TestClassify:
    """Tests for kind classification."""

    def test_scalars(self):
        """Strings and numbers are scalars whatever the declared type."""
        assert classify("#fff", "color") == TokenKind.SCALAR
        assert classify(400, "fontWeight") == TokenKind.SCALAR
        assert classify(1.5, "dimension") == TokenKind.SCALAR

    def test_lists_need_declared_type(self):
        """A bare list is only meaningful with a declared type."""
        assert classify([0.4, 0, 1, 1], "cubicBezier") == TokenKind.CUBIC_BEZIER
        assert classify([SHADOW_SM], "shadow") == TokenKind.SHADOW
        assert classify(["Inter"], "fontFamily") == TokenKind.FONT_FAMILY
        assert classify([0.4, 0, 1, 1]) == TokenKind.UNKNOWN

    def test_dimension_shape_wins_over_type(self):
        """A {value, unit} mapping is a dimension even under another type."""
        assert classify({"value": 8, "unit": "px"}, "color") == TokenKind.DIMENSION
        assert classify({"value": 8, "unit": "px"}) == TokenKind.DIMENSION

    def test_duration(self):
        """Declared duration keeps its kind."""
        assert classify({"value": 150, "unit": "ms"}, "duration") == TokenKind.DURATION

    def test_shadow_sniffed(self):
        """offsetX marks a shadow without a declared type."""
        assert classify(SHADOW_SM) == TokenKind.SHADOW

    def test_unknown(self):
        """Other shapes are unknown."""
        assert classify(None) == TokenKind.UNKNOWN
        assert classify({"fontSize": "1rem"}, "typography") == TokenKind.UNKNOWN


class TestScalars:
    """Tests for pass-through values."""

    def test_string_passthrough(self):
        assert value_to_css("#18181b", "color") == "#18181b"

    def test_number_stringified(self):
        """Numbers are stringified without a unit."""
        assert value_to_css(400, "fontWeight") == "400"
        assert value_to_css(1.5) == "1.5"

    def test_integral_float(self):
        """1.0 reads as 1 in a stylesheet."""
        assert format_number(1.0) == "1"
        assert format_number(0.25) == "0.25"

    def test_boolean(self):
        assert value_to_css(True) == "true"


class TestDimension:
    """Tests for dimension and duration objects."""

    @pytest.mark.parametrize(
        ("value", "unit"),
        [(8, "px"), (0.5, "rem"), (150, "ms"), (100, "%"), (-2, "px")],
    )
    def test_value_unit_concatenated(self, value, unit):
        """{value: v, unit: u} converts to exactly f'{v}{u}'."""
        assert value_to_css({"value": value, "unit": unit}, "dimension") == f"{value}{unit}"

    def test_duration_result(self):
        result = convert_value({"value": 150, "unit": "ms"}, "duration")
        assert result == Converted("150ms", TokenKind.DURATION)

    def test_dimension_helper(self):
        assert dimension_to_css("1rem") == "1rem"
        assert dimension_to_css(0) == "0"
        assert dimension_to_css({"value": 4, "unit": "px"}) == "4px"
        assert dimension_to_css({"value": 4}) is None

    def test_object_value_is_not_a_dimension(self):
        """A nested object in value or unit falls back to JSON instead of a repr."""
        raw = {"value": {"x": 1}, "unit": "px"}
        assert classify(raw, "dimension") == TokenKind.UNKNOWN
        result = convert_value(raw, "dimension")
        assert not result.recognized
        assert result.text() == '{"value":{"x":1},"unit":"px"}'
        assert dimension_to_css({"value": 4, "unit": ["px"]}) is None


class TestCubicBezier:
    """Tests for cubic-bezier arrays."""

    @pytest.mark.parametrize(
        "points",
        [[0.4, 0, 1, 1], [0, 0, 0.2, 1], [0.25, 0.1, 0.25, 1], [1, 0.5, 0, 0.75]],
    )
    def test_four_points(self, points):
        """Element order is preserved."""
        expected = "cubic-bezier(" + ", ".join(str(p) for p in points) + ")"
        assert value_to_css(points, "cubicBezier") == expected

    def test_wrong_length_is_unrecognized(self):
        """Other lengths fall back to naive stringification."""
        result = convert_value([0.4, 0, 1], "cubicBezier")
        assert isinstance(result, Unrecognized)
        assert result.kind == TokenKind.CUBIC_BEZIER
        assert result.text() == "0.4,0,1"


class TestShadow:
    """Tests for shadow composites."""

    def test_single_shadow(self):
        assert value_to_css(SHADOW_SM, "shadow") == "0px 1px 2px 0px rgba(0, 0, 0, 0.05)"

    def test_single_shadow_without_type(self):
        """A shadow object converts even when no type is declared."""
        assert value_to_css(SHADOW_SM) == "0px 1px 2px 0px rgba(0, 0, 0, 0.05)"

    def test_string_sub_fields(self):
        shadow = {
            "offsetX": "0",
            "offsetY": "4px",
            "blur": "6px",
            "spread": "-1px",
            "color": "#0000001a",
        }
        assert value_to_css(shadow, "shadow") == "0 4px 6px -1px #0000001a"

    def test_shadow_list(self):
        """Multiple shadows are comma-joined."""
        second = {**SHADOW_SM, "offsetY": {"value": 4, "unit": "px"}, "color": "#000"}
        css = value_to_css([SHADOW_SM, second], "shadow")
        assert css == "0px 1px 2px 0px rgba(0, 0, 0, 0.05), 0px 4px 2px 0px #000"

    def test_missing_field_is_unrecognized(self):
        broken = {"offsetX": "0", "offsetY": "1px", "color": "#000"}
        result = convert_value(broken, "shadow")
        assert not result.recognized
        assert result.text() == '{"offsetX":"0","offsetY":"1px","color":"#000"}'


class TestFontFamily:
    """Tests for fontFamily lists."""

    def test_names_joined_and_quoted(self):
        css = value_to_css(["Inter", "Helvetica Neue", "sans-serif"], "fontFamily")
        assert css == "Inter, 'Helvetica Neue', sans-serif"

    def test_single_quote_in_name(self):
        """Names containing an apostrophe are double-quoted."""
        css = value_to_css(["O'Reilly Sans", "serif"], "fontFamily")
        assert css == "\"O'Reilly Sans\", serif"

    def test_double_quote_in_name(self):
        assert value_to_css(['Say "Hi"'], "fontFamily") == "'Say \"Hi\"'"

    def test_single_string_passthrough(self):
        assert value_to_css("Inter, sans-serif", "fontFamily") == "Inter, sans-serif"


class TestUnrecognized:
    """Tests for values with no CSS form."""

    def test_null(self):
        """Null converts to nothing at all."""
        result = convert_value(None, "color")
        assert result == Unrecognized(None)
        assert value_to_css(None) is None

    def test_unknown_object_dumped(self):
        """Unknown mappings fall back to a compact JSON dump."""
        result = convert_value({"fontSize": "1rem", "lineHeight": 1.5}, "typography")
        assert not result.recognized
        assert result.text() == '{"fontSize":"1rem","lineHeight":1.5}'

    def test_untyped_list(self):
        assert value_to_css([1, 2, 3]) == "1,2,3"
