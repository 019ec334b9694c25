"""
Models for the token pipeline.

This module provides:
- TokenKind / Converted / Unrecognized: value conversion results
- ModuleEntry: one manifest entry for the module compiler
- ProjectConfig: project layout and pipeline switches
"""

from atom_styles.models.config import CompilerSettings, ProjectConfig
from atom_styles.models.manifest import DEFAULT_MODULES, ModuleEntry
from atom_styles.models.token import (
    ConversionResult,
    Converted,
    TokenKind,
    Unrecognized,
)

__all__ = [
    "CompilerSettings",
    "ConversionResult",
    "Converted",
    "DEFAULT_MODULES",
    "ModuleEntry",
    "ProjectConfig",
    "TokenKind",
    "Unrecognized",
]
