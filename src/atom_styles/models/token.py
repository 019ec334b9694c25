"""
Token value models.

Conversion is explicit about what it recognized: every raw value is
classified into a TokenKind, and converting it yields either a
Converted string or an Unrecognized raw value with its best-effort text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TokenKind(str, Enum):
    """
    Shape a raw token value is converted as.

    Chosen from the declared $type first; shape sniffing only applies
    when the declared type does not match the value's shape.
    """

    DIMENSION = "dimension"
    DURATION = "duration"
    CUBIC_BEZIER = "cubicBezier"
    SHADOW = "shadow"
    FONT_FAMILY = "fontFamily"
    SCALAR = "scalar"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Converted:
    """A value with a canonical CSS form."""

    css: str
    kind: TokenKind = TokenKind.SCALAR

    @property
    def recognized(self) -> bool:
        return True

    def text(self) -> str:
        return self.css


@dataclass(frozen=True)
class Unrecognized:
    """
    A value the converter has no CSS form for.

    fallback is the best-effort text (JSON dump or naive stringification);
    None means there is nothing to emit at all.
    """

    raw: Any
    fallback: str | None = None
    kind: TokenKind = TokenKind.UNKNOWN

    @property
    def recognized(self) -> bool:
        return False

    def text(self) -> str | None:
        return self.fallback


ConversionResult = Converted | Unrecognized
