"""
Token normalizer - DTCG JSON to SCSS custom properties.

The pipeline:
    token JSON → flattened {path: css} entries
    → references rewritten to var() lookups
    → _primitive.scss / _semantic.scss
"""

from atom_styles.tokens.converter import classify, convert_value, value_to_css
from atom_styles.tokens.flattener import extract_value, flatten_tokens, is_token
from atom_styles.tokens.generator import (
    GenerateResult,
    TokenGenerator,
    generate_tokens,
    render_block,
)
from atom_styles.tokens.loader import load_token_file
from atom_styles.tokens.references import find_references, resolve_references

__all__ = [
    "GenerateResult",
    "TokenGenerator",
    "classify",
    "convert_value",
    "extract_value",
    "find_references",
    "flatten_tokens",
    "generate_tokens",
    "is_token",
    "load_token_file",
    "render_block",
    "resolve_references",
    "value_to_css",
]
