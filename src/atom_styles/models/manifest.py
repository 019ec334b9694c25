"""
Module manifest - the static list of SCSS entries to compile.

Output structure mirrors src/ in dist/:
    src/foundations/typography/_index.scss -> dist/foundations/typography.css
    src/tokens/_primitive.scss             -> dist/tokens/primitives.css
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ModuleEntry(BaseModel):
    """A (source entry, output file) pair, both relative."""

    entry: str = Field(description="SCSS entry file relative to the source root")
    output: str = Field(description="CSS file relative to the dist root")

    model_config = {"frozen": True}


def _entries(*pairs: tuple[str, str]) -> tuple[ModuleEntry, ...]:
    return tuple(ModuleEntry(entry=entry, output=output) for entry, output in pairs)


DEFAULT_MODULES: tuple[ModuleEntry, ...] = _entries(
    # Tokens
    ("tokens/_primitive.scss", "tokens/primitives.css"),
    ("tokens/_semantic.scss", "tokens/semantic.css"),
    # Foundations
    ("foundations/typography/_index.scss", "foundations/typography.css"),
    ("foundations/colors/_index.scss", "foundations/colors.css"),
    ("foundations/spacing/_index.scss", "foundations/spacing.css"),
    ("foundations/layout/_index.scss", "foundations/layout.css"),
    ("foundations/elevation/_index.scss", "foundations/elevation.css"),
    ("foundations/borders/_index.scss", "foundations/borders.css"),
    ("foundations/motion/_index.scss", "foundations/motion.css"),
    # Components
    ("components/button/_index.scss", "components/button.css"),
    ("components/card/_index.scss", "components/card.css"),
    ("components/input/_index.scss", "components/input.css"),
    ("components/modal/_index.scss", "components/modal.css"),
    ("components/badge/_index.scss", "components/badge.css"),
    ("components/radio/_index.scss", "components/radio.css"),
    ("components/toggle/_index.scss", "components/toggle.css"),
    ("components/tag/_index.scss", "components/tag.css"),
    # Extensions
    ("extensions/inbox/_index.scss", "extensions/inbox.css"),
    ("extensions/ai/_index.scss", "extensions/ai.css"),
    ("extensions/notifications/_index.scss", "extensions/notifications.css"),
    ("extensions/indicators/_index.scss", "extensions/indicators.css"),
    # Themes
    ("themes/_theme-dark.scss", "themes/dark.css"),
    # Utilities
    ("utilities/_index.scss", "utilities.css"),
)
