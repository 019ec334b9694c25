"""
Module compiler - SCSS module tree to per-module CSS files.

The pipeline:
    manifest entry → sass (external) → dist/<output>.css
    → tokens/all-tokens.css, extensions/all-extensions.css
"""

from atom_styles.compiler.builder import BuildReport, ModuleBuilder, build_modules
from atom_styles.compiler.bundler import combine_extensions, combine_tokens, concatenate
from atom_styles.compiler.sass import CompileOutcome, SassCompiler

__all__ = [
    "BuildReport",
    "CompileOutcome",
    "ModuleBuilder",
    "SassCompiler",
    "build_modules",
    "combine_extensions",
    "combine_tokens",
    "concatenate",
]
