"""
Bundles - plain concatenation of already-built CSS.

No deduplication and no selector merging: the bundle is the files'
text joined with a newline.
"""

from __future__ import annotations

import logging
from pathlib import Path

from atom_styles.constants import EXTENSIONS_BUNDLE, TOKENS_BUNDLE, SuccessMessages

logger = logging.getLogger(__name__)


def concatenate(sources: list[Path], target: Path) -> Path:
    """Write the sources' contents joined by a single newline."""
    combined = "\n".join(source.read_text(encoding="utf-8") for source in sources)
    target.write_text(combined, encoding="utf-8")
    return target


def combine_tokens(dist: Path) -> Path | None:
    """
    Write tokens/all-tokens.css from primitives.css and semantic.css.

    Returns:
        The bundle path, or None when either input is missing
    """
    tokens_dir = dist / "tokens"
    primitives = tokens_dir / "primitives.css"
    semantic = tokens_dir / "semantic.css"
    if not (primitives.exists() and semantic.exists()):
        return None

    target = concatenate([primitives, semantic], tokens_dir / TOKENS_BUNDLE)
    logger.info("  " + SuccessMessages.BUNDLE_BUILT.format(output=f"tokens/{TOKENS_BUNDLE}"))
    return target


def combine_extensions(dist: Path) -> Path | None:
    """
    Write extensions/all-extensions.css from every built extension.

    Returns:
        The bundle path, or None when there is nothing to combine
    """
    ext_dir = dist / "extensions"
    if not ext_dir.is_dir():
        return None

    sources = sorted(
        path
        for path in ext_dir.iterdir()
        if path.is_file() and path.suffix == ".css" and path.name != EXTENSIONS_BUNDLE
    )
    if not sources:
        return None

    target = concatenate(sources, ext_dir / EXTENSIONS_BUNDLE)
    logger.info(
        "  " + SuccessMessages.BUNDLE_BUILT.format(output=f"extensions/{EXTENSIONS_BUNDLE}")
    )
    return target
