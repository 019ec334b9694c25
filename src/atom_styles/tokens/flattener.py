"""
Token flattening - nested token groups to dash-joined CSS variable names.

    {"space": {"$type": "dimension", "sm": {"$value": {"value": 8, "unit": "px"}}}}
        -> {"space-sm": "8px"}

$type declared on a group is inherited by everything below it unless a
descendant declares its own.
"""

from __future__ import annotations

import logging
from typing import Any

from atom_styles.constants import METADATA_SIGIL, ErrorMessages
from atom_styles.errors import TokenConversionError
from atom_styles.tokens.converter import convert_value

logger = logging.getLogger(__name__)

_MISSING = object()


def extract_value(token: dict[str, Any]) -> Any:
    """Token value: DTCG $value first, then legacy value. _MISSING for groups."""
    if "$value" in token:
        return token["$value"]
    if "value" in token:
        return token["value"]
    return _MISSING


def is_token(node: Any) -> bool:
    """A node is a token if it carries $value or a legacy value."""
    return isinstance(node, dict) and extract_value(node) is not _MISSING


def flatten_tokens(
    tree: dict[str, Any],
    parent_type: str | None = None,
    *,
    parent_key: str = "",
    strict: bool = False,
) -> dict[str, str]:
    """
    Recursively flatten a token tree into {key: css_value} pairs.

    Args:
        tree: Token group (mapping of names to tokens or groups)
        parent_type: $type inherited from enclosing groups
        parent_key: Dash-joined path of the enclosing group
        strict: Raise on values with no CSS form instead of emitting
            their fallback text

    Returns:
        Flattened tokens in traversal order. Null values are omitted.

    Raises:
        TokenConversionError: strict is set and a value is unrecognized
    """
    result: dict[str, str] = {}

    for key, node in tree.items():
        if key.startswith(METADATA_SIGIL):
            continue
        if not isinstance(node, dict):
            continue

        path = f"{parent_key}-{key}" if parent_key else key
        local_type = node.get("$type") or parent_type

        if not is_token(node):
            result.update(flatten_tokens(node, local_type, parent_key=path, strict=strict))
            continue

        raw = extract_value(node)
        converted = convert_value(raw, local_type)
        if not converted.recognized:
            if raw is None:
                continue
            message = ErrorMessages.UNRECOGNIZED_VALUE.format(
                path=path, kind=converted.kind.value, raw=raw
            )
            if strict:
                raise TokenConversionError(message, token_path=path, raw=raw)
            logger.warning(message)

        css = converted.text()
        if css is not None:
            result[path] = css

    return result
