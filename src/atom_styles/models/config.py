"""
Project configuration model.

Every field has a default that reproduces the standard layout:

    tokens/global/*.tokens.json     primitive token sources
    tokens/semantic/*.tokens.json   semantic token sources
    src/tokens/                     generated SCSS fragments
    src/                            SCSS module sources
    dist/                           compiled CSS
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from atom_styles.constants import (
    DARK_THEME_SELECTORS,
    PREFIX,
    PRIMITIVE_CATEGORIES,
    SEMANTIC_DARK_FILE,
    SEMANTIC_DARK_KEY,
    SEMANTIC_LIGHT_FILE,
    SEMANTIC_LIGHT_KEY,
)
from atom_styles.models.manifest import DEFAULT_MODULES, ModuleEntry


class CompilerSettings(BaseModel):
    """How the external Sass compiler is invoked."""

    command: list[str] = Field(
        default_factory=lambda: ["sass"],
        description="Executable (and any leading arguments)",
    )
    args: list[str] = Field(
        default_factory=lambda: ["--style=expanded", "--no-source-map"],
        description="Style/formatting flags appended after the paths",
    )

    model_config = {"frozen": True}


class ProjectConfig(BaseModel):
    """Resolved project layout and pipeline switches."""

    root: Path = Field(default_factory=Path.cwd)
    tokens_dir: str = "tokens"
    src_dir: str = "src"
    dist_dir: str = "dist"
    output_dir: str = Field(
        default="src/tokens",
        description="Where generated SCSS fragments are written",
    )
    prefix: str = PREFIX
    primitive_categories: list[str] = Field(
        default_factory=lambda: list(PRIMITIVE_CATEGORIES)
    )
    semantic_light_file: str = SEMANTIC_LIGHT_FILE
    semantic_light_key: str = SEMANTIC_LIGHT_KEY
    semantic_dark_file: str = SEMANTIC_DARK_FILE
    semantic_dark_key: str = SEMANTIC_DARK_KEY
    dark_selectors: list[str] = Field(default_factory=lambda: list(DARK_THEME_SELECTORS))
    compiler: CompilerSettings = Field(default_factory=CompilerSettings)
    modules: list[ModuleEntry] = Field(default_factory=lambda: list(DEFAULT_MODULES))
    strict: bool = Field(
        default=False,
        description="Fail on token values with no CSS form instead of warning",
    )
    coalesce: bool = Field(
        default=False,
        description="Queue one rebuild for changes seen during a rebuild",
    )

    model_config = {"frozen": True}

    @property
    def tokens_path(self) -> Path:
        return self.root / self.tokens_dir

    @property
    def src_path(self) -> Path:
        return self.root / self.src_dir

    @property
    def dist_path(self) -> Path:
        return self.root / self.dist_dir

    @property
    def output_path(self) -> Path:
        return self.root / self.output_dir
