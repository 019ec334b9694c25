"""
Constants and enums for the token pipeline.

No magic strings - use enums for type tags and keep file names in one place.
"""

from enum import Enum

# Custom property prefix: {color.zinc.900} -> var(--atom-color-zinc-900)
PREFIX = "atom"

# DTCG metadata keys start with this sigil
METADATA_SIGIL = "$"

TOKEN_FILE_SUFFIX = ".tokens.json"


class TokenType(str, Enum):
    """Declared DTCG token types the converter knows about."""

    COLOR = "color"
    DIMENSION = "dimension"
    DURATION = "duration"
    CUBIC_BEZIER = "cubicBezier"
    SHADOW = "shadow"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"
    NUMBER = "number"


# Tier 1 categories, emitted in this order
PRIMITIVE_CATEGORIES: tuple[str, ...] = (
    "colors",
    "typography",
    "spacing",
    "borders",
    "shadows",
    "motion",
    "breakpoints",
)

# Tier 2 sources: (file name, theme key inside the file)
SEMANTIC_LIGHT_FILE = "colors.tokens.json"
SEMANTIC_LIGHT_KEY = "light"
SEMANTIC_DARK_FILE = "colors.dark.tokens.json"
SEMANTIC_DARK_KEY = "dark"

DARK_THEME_SELECTORS: tuple[str, ...] = ("[data-theme='dark']", ".atom-theme-dark")

PRIMITIVE_OUTPUT = "_primitive.scss"
SEMANTIC_OUTPUT = "_semantic.scss"

# Bundles written after the module batch
TOKENS_BUNDLE = "all-tokens.css"
EXTENSIONS_BUNDLE = "all-extensions.css"

CONFIG_FILE = "atom.yaml"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_JSON = "Invalid JSON in {path} (line {line}, column {column}): {reason}"
    NOT_AN_OBJECT = "Token file {path} must contain a JSON object, got {kind}."
    UNRECOGNIZED_VALUE = "Token '{path}' has an unrecognized {kind} value: {raw!r}"
    INVALID_CONFIG = "Invalid configuration in {path}: {reason}"
    COMPILER_NOT_FOUND = "Compiler executable not found: {command}"


class SuccessMessages:
    """Standardized success messages."""

    GENERATED = "Generated: {path}"
    MODULE_BUILT = "OK: {output}"
    BUNDLE_BUILT = "OK: {output} (combined)"
    BUILD_DONE = "Done. Built: {built}, Skipped: {skipped}, Failed: {failed}"
