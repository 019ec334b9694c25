"""
Value converter - turns raw DTCG token values into CSS literals.

Supports:
    - dimension objects: {"value": 8, "unit": "px"}    -> "8px"
    - duration objects:  {"value": 150, "unit": "ms"}  -> "150ms"
    - cubicBezier arrays: [0.4, 0, 1, 1]              -> "cubic-bezier(0.4, 0, 1, 1)"
    - shadow composites: {offsetX, offsetY, blur, spread, color} -> CSS shadow
    - fontFamily arrays: ["Inter", "Helvetica Neue"]  -> "Inter, 'Helvetica Neue'"
    - strings and numbers: pass through

Values the converter has no CSS form for come back as Unrecognized
with a best-effort fallback text, so callers choose between warning
and failing.
"""

from __future__ import annotations

import json
from typing import Any

from atom_styles.constants import TokenType
from atom_styles.models.token import (
    ConversionResult,
    Converted,
    TokenKind,
    Unrecognized,
)

SHADOW_FIELDS = ("offsetX", "offsetY", "blur", "spread")


def format_number(value: int | float | bool) -> str:
    """Stringify a JSON number the way it reads in a stylesheet."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def naive_text(raw: Any) -> str:
    """Flat stringification used when nothing better is known."""
    if raw is None:
        return "null"
    if isinstance(raw, str):
        return raw
    if isinstance(raw, int | float):
        return format_number(raw)
    if isinstance(raw, list):
        return ",".join("" if item is None else naive_text(item) for item in raw)
    return json_dump(raw)


def json_dump(raw: Any) -> str:
    return json.dumps(raw, separators=(",", ":"), ensure_ascii=False)


def _is_dimension(raw: Any) -> bool:
    if not isinstance(raw, dict):
        return False
    value, unit = raw.get("value"), raw.get("unit")
    # Both halves must be scalars; nested objects have no CSS spelling
    return isinstance(value, str | int | float) and isinstance(unit, str | int | float)


def _is_shadow(raw: Any) -> bool:
    return isinstance(raw, dict) and "offsetX" in raw


def classify(raw: Any, token_type: str | None = None) -> TokenKind:
    """
    Decide how a raw value is converted.

    The declared type wins when the value has the matching shape. When it
    does not (or no type was declared), mappings are sniffed: value+unit
    is a dimension, offsetX is a shadow. Bare lists have no shape of their
    own, so they need a declared type.

    Args:
        raw: Raw $value
        token_type: Declared or inherited $type

    Returns:
        The kind the value will be converted as
    """
    if raw is None:
        return TokenKind.UNKNOWN
    if isinstance(raw, str | int | float):
        return TokenKind.SCALAR

    if isinstance(raw, list):
        if token_type == TokenType.CUBIC_BEZIER.value:
            return TokenKind.CUBIC_BEZIER
        if token_type == TokenType.SHADOW.value:
            return TokenKind.SHADOW
        if token_type == TokenType.FONT_FAMILY.value:
            return TokenKind.FONT_FAMILY
        return TokenKind.UNKNOWN

    if isinstance(raw, dict):
        if _is_dimension(raw):
            if token_type == TokenType.DURATION.value:
                return TokenKind.DURATION
            return TokenKind.DIMENSION
        if _is_shadow(raw):
            return TokenKind.SHADOW

    return TokenKind.UNKNOWN


def dimension_to_css(dim: Any) -> str | None:
    """
    Convert a dimension to a CSS string.

    {"value": 8, "unit": "px"} -> "8px"; strings pass through.
    """
    if isinstance(dim, str):
        return dim
    if isinstance(dim, int | float) and not isinstance(dim, bool):
        return format_number(dim)
    if _is_dimension(dim):
        return f"{naive_text(dim['value'])}{naive_text(dim['unit'])}"
    return None


def cubic_bezier_to_css(points: list[Any]) -> ConversionResult:
    """[0.4, 0, 1, 1] -> "cubic-bezier(0.4, 0, 1, 1)"."""
    if len(points) != 4:
        return Unrecognized(points, naive_text(points), TokenKind.CUBIC_BEZIER)
    joined = ", ".join(naive_text(p) for p in points)
    return Converted(f"cubic-bezier({joined})", TokenKind.CUBIC_BEZIER)


def single_shadow_to_css(shadow: Any) -> str | None:
    """
    Convert one shadow object to CSS.

    {offsetX, offsetY, blur, spread, color} -> "0px 1px 2px 0px rgba(...)"
    """
    if not isinstance(shadow, dict):
        return None

    parts: list[str] = []
    for field in SHADOW_FIELDS:
        css = dimension_to_css(shadow.get(field))
        if css is None:
            return None
        parts.append(css)

    color = shadow.get("color")
    if not isinstance(color, str):
        return None
    parts.append(color)
    return " ".join(parts)


def shadow_to_css(value: Any) -> ConversionResult:
    """Convert a shadow value (single or list) to CSS."""
    shadows = value if isinstance(value, list) else [value]
    converted = [single_shadow_to_css(s) for s in shadows]
    if any(css is None for css in converted):
        return Unrecognized(value, json_dump(value), TokenKind.SHADOW)
    return Converted(", ".join(converted), TokenKind.SHADOW)  # type: ignore[arg-type]


def quote_family(family: str) -> str:
    """Quote a family name containing whitespace or quotes; bare names pass through."""
    if not any(ch.isspace() or ch in "'\"" for ch in family):
        return family
    if "'" not in family:
        return f"'{family}'"
    escaped = family.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def font_family_to_css(families: list[Any]) -> ConversionResult:
    """["Inter", "Helvetica Neue", "sans-serif"] -> "Inter, 'Helvetica Neue', sans-serif"."""
    names: list[str] = []
    for family in families:
        if not isinstance(family, str):
            return Unrecognized(families, naive_text(families), TokenKind.FONT_FAMILY)
        names.append(quote_family(family))
    return Converted(", ".join(names), TokenKind.FONT_FAMILY)


def convert_value(raw: Any, token_type: str | None = None) -> ConversionResult:
    """
    Convert any DTCG token value to CSS based on its resolved type.

    Args:
        raw: Raw $value (or legacy value)
        token_type: Declared or inherited $type

    Returns:
        Converted with the CSS literal, or Unrecognized with the fallback
        text (None for null values)
    """
    kind = classify(raw, token_type)

    if kind == TokenKind.SCALAR:
        if isinstance(raw, str):
            return Converted(raw)
        return Converted(format_number(raw))

    if kind in (TokenKind.DIMENSION, TokenKind.DURATION):
        return Converted(dimension_to_css(raw), kind)  # type: ignore[arg-type]

    if kind == TokenKind.CUBIC_BEZIER:
        return cubic_bezier_to_css(raw)

    if kind == TokenKind.SHADOW:
        return shadow_to_css(raw)

    if kind == TokenKind.FONT_FAMILY:
        return font_family_to_css(raw)

    if raw is None:
        return Unrecognized(None)
    if isinstance(raw, list):
        return Unrecognized(raw, naive_text(raw))
    return Unrecognized(raw, json_dump(raw))


def value_to_css(raw: Any, token_type: str | None = None) -> str | None:
    """Lenient conversion: the CSS text, the fallback text, or None."""
    return convert_value(raw, token_type).text()
