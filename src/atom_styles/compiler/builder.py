"""
Module builder - compiles each manifest entry to its own CSS file.

Output structure mirrors src/ in dist/. One failing module never blocks
the others; failures are reported in the BuildReport and logged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from atom_styles.compiler.bundler import combine_extensions, combine_tokens
from atom_styles.compiler.sass import CompileOutcome, SassCompiler
from atom_styles.constants import SuccessMessages
from atom_styles.models.config import ProjectConfig
from atom_styles.models.manifest import ModuleEntry

logger = logging.getLogger(__name__)

CompileFn = Callable[[Path, Path], CompileOutcome]


@dataclass
class BuildReport:
    """Result of building a manifest."""

    built: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)
    bundles: list[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def summary(self) -> str:
        return SuccessMessages.BUILD_DONE.format(
            built=len(self.built),
            skipped=len(self.skipped),
            failed=len(self.failed),
        )


class ModuleBuilder:
    """
    Builds the module manifest into the dist tree.

    The builder:
    1. Skips entries whose source does not exist
    2. Creates output directories and compiles the rest
    3. Writes the token and extension bundles
    """

    def __init__(
        self,
        src: Path,
        dist: Path,
        compile_fn: CompileFn | None = None,
    ):
        """
        Initialize the builder.

        Args:
            src: Source root the manifest entries are relative to
            dist: Output root the manifest outputs are relative to
            compile_fn: Compiles one entry; defaults to the sass executable
        """
        self.src = src
        self.dist = dist
        self.compile_fn = compile_fn or SassCompiler().compile

    @classmethod
    def from_config(cls, config: ProjectConfig) -> ModuleBuilder:
        return cls(
            src=config.src_path,
            dist=config.dist_path,
            compile_fn=SassCompiler(config.compiler).compile,
        )

    def build_module(self, module: ModuleEntry) -> CompileOutcome | None:
        """
        Compile a single entry.

        Returns:
            The outcome, or None when the source does not exist
        """
        entry_path = self.src / module.entry
        output_path = self.dist / module.output

        if not entry_path.exists():
            return None

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return CompileOutcome(entry_path, output_path, ok=False, error=str(e))
        return self.compile_fn(entry_path, output_path)

    def build(self, modules: Iterable[ModuleEntry]) -> BuildReport:
        """
        Build every entry, then the bundles.

        Args:
            modules: Manifest entries, in build order

        Returns:
            BuildReport with built/skipped/failed entries and bundles written
        """
        logger.info("Building individual modules...")
        report = BuildReport()

        for module in modules:
            outcome = self.build_module(module)
            if outcome is None:
                logger.info(f"  SKIP: {module.entry} (not found)")
                report.skipped.append(module.entry)
            elif outcome.ok:
                logger.info("  " + SuccessMessages.MODULE_BUILT.format(output=module.output))
                report.built.append(module.output)
            else:
                logger.error(f"  FAIL: {module.output} - {outcome.error}")
                report.failed[module.output] = outcome.error or "unknown error"

        for bundle in (combine_tokens(self.dist), combine_extensions(self.dist)):
            if bundle is not None:
                report.bundles.append(bundle)

        logger.info(report.summary())
        return report


def build_modules(config: ProjectConfig) -> BuildReport:
    """Convenience wrapper: build a project's manifest."""
    return ModuleBuilder.from_config(config).build(config.modules)
