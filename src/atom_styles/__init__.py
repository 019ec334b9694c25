"""
atom-styles - design-token build pipeline.

    token JSON → SCSS custom properties → compiled CSS → bundles
"""

from atom_styles.compiler import BuildReport, ModuleBuilder, build_modules
from atom_styles.config import load_config
from atom_styles.models import ModuleEntry, ProjectConfig
from atom_styles.tokens import (
    TokenGenerator,
    flatten_tokens,
    generate_tokens,
    resolve_references,
    value_to_css,
)

__version__ = "0.1.0"

__all__ = [
    "BuildReport",
    "ModuleBuilder",
    "ModuleEntry",
    "ProjectConfig",
    "TokenGenerator",
    "build_modules",
    "flatten_tokens",
    "generate_tokens",
    "load_config",
    "resolve_references",
    "value_to_css",
]
