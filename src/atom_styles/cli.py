#!/usr/bin/env python3
"""
Command-line entry points for the token pipeline.

    atom-tokens   generate src/tokens/_primitive.scss and _semantic.scss
    atom-build    compile the module manifest into dist/
    atom-watch    rebuild on changes under src/ and tokens/
    atom-styles   umbrella command: tokens | build | watch | all

Per-module compile failures are logged and do not change the exit code.
A malformed token file or config file exits with status 1.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from atom_styles.compiler import build_modules
from atom_styles.config import load_config
from atom_styles.errors import AtomStylesError
from atom_styles.models.config import ProjectConfig
from atom_styles.tokens import generate_tokens

logger = logging.getLogger(__name__)


def run_tokens(config: ProjectConfig) -> None:
    generate_tokens(config)


def run_build(config: ProjectConfig) -> None:
    build_modules(config)


def run_all(config: ProjectConfig) -> None:
    generate_tokens(config)
    build_modules(config)


def run_watch(config: ProjectConfig) -> None:
    # Imported lazily so one-shot commands do not need watchdog loaded
    from atom_styles.watch import watch

    watch(config)


COMMANDS: dict[str, Callable[[ProjectConfig], None]] = {
    "tokens": run_tokens,
    "build": run_build,
    "watch": run_watch,
    "all": run_all,
}


def build_parser(command: str | None = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"atom-{command}" if command else "atom-styles",
        description="Design-token build pipeline",
    )
    if command is None:
        parser.add_argument(
            "command",
            choices=sorted(COMMANDS),
            help="Pipeline step to run",
        )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Project root (default: current directory)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def run(command: str | None = None, argv: Sequence[str] | None = None) -> int:
    """Parse arguments, load the config and run one command."""
    args = build_parser(command).parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    name = command or args.command
    try:
        config = load_config(args.root)
        COMMANDS[name](config)
    except AtomStylesError as e:
        logger.error(str(e))
        return 1
    return 0


def main() -> None:
    """atom-styles {tokens,build,watch,all}"""
    raise SystemExit(run())


def tokens_main() -> None:
    raise SystemExit(run("tokens"))


def build_main() -> None:
    raise SystemExit(run("build"))


def watch_main() -> None:
    raise SystemExit(run("watch"))


if __name__ == "__main__":
    main()
