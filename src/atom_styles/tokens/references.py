"""
Reference resolution - rewrites token references as CSS variable lookups.

    "{color.zinc.900}" -> "var(--atom-color-zinc-900)"

References are kept as indirections; the referenced value is never inlined.
"""

from __future__ import annotations

import re
from typing import Any

from atom_styles.constants import PREFIX

REFERENCE_PATTERN = re.compile(r"\{([^}]+)\}")


def reference_to_var(ref: str, prefix: str = PREFIX) -> str:
    """color.zinc.900 -> var(--atom-color-zinc-900)"""
    return f"var(--{prefix}-{ref.replace('.', '-')})"


def resolve_references(value: Any, prefix: str = PREFIX) -> Any:
    """
    Replace every {path.to.token} in a string with its var() lookup.

    Non-string values are returned unchanged.
    """
    if not isinstance(value, str):
        return value
    return REFERENCE_PATTERN.sub(lambda m: reference_to_var(m.group(1), prefix), value)


def find_references(value: Any) -> list[str]:
    """List the dotted paths referenced by a value, in order of appearance."""
    if not isinstance(value, str):
        return []
    return REFERENCE_PATTERN.findall(value)
