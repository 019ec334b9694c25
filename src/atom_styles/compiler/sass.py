"""
External Sass compiler invocation.

The compiler is a black box: given a source and a destination it either
succeeds or returns error text. Calls block with no timeout and no retry.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from atom_styles.constants import ErrorMessages
from atom_styles.models.config import CompilerSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompileOutcome:
    """Result of compiling one entry."""

    entry: Path
    output: Path
    ok: bool
    error: str | None = None


class SassCompiler:
    """Runs the sass executable once per module."""

    def __init__(self, settings: CompilerSettings | None = None):
        self.settings = settings or CompilerSettings()

    def command_for(self, entry: Path, output: Path) -> list[str]:
        """sass <entry> <output> --style=expanded --no-source-map"""
        return [*self.settings.command, str(entry), str(output), *self.settings.args]

    def compile(self, entry: Path, output: Path) -> CompileOutcome:
        """
        Compile one SCSS entry to a CSS file.

        Args:
            entry: SCSS source file
            output: CSS destination (parent directory must exist)

        Returns:
            CompileOutcome; failures carry the compiler's stderr
        """
        command = self.command_for(entry, output)
        logger.debug(f"Running: {' '.join(command)}")
        try:
            subprocess.run(command, capture_output=True, text=True, check=True)
        except subprocess.CalledProcessError as e:
            error = (e.stderr or "").strip() or str(e)
            return CompileOutcome(entry, output, ok=False, error=error)
        except FileNotFoundError:
            error = ErrorMessages.COMPILER_NOT_FOUND.format(command=self.settings.command[0])
            return CompileOutcome(entry, output, ok=False, error=error)
        except OSError as e:
            return CompileOutcome(entry, output, ok=False, error=str(e))
        return CompileOutcome(entry, output, ok=True)
