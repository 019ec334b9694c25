"""
Filesystem watching - src/**/*.scss and tokens/**/*.json.

watchdog delivers events on its observer thread; accepted changes are
rebuilt on a background thread so that changes arriving mid-rebuild reach
the controller while it is still Building.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path

from watchdog.events import FileSystemEvent, PatternMatchingEventHandler
from watchdog.observers import Observer

from atom_styles.compiler import build_modules
from atom_styles.models.config import ProjectConfig
from atom_styles.tokens import generate_tokens
from atom_styles.watch.controller import BuildState, RebuildController

logger = logging.getLogger(__name__)

SCSS_PATTERNS = ["*.scss"]
TOKEN_PATTERNS = ["*.json"]


class RebuildHandler(PatternMatchingEventHandler):
    """Forwards created/modified files to a RebuildController."""

    def __init__(self, controller: RebuildController, patterns: list[str]):
        super().__init__(patterns=patterns, ignore_directories=True)
        self.controller = controller
        self.rebuilds: list[threading.Thread] = []

    def on_created(self, event: FileSystemEvent) -> None:
        self.dispatch_rebuild(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self.dispatch_rebuild(event)

    def dispatch_rebuild(self, event: FileSystemEvent) -> threading.Thread | None:
        """Start a rebuild thread if the controller accepts the change."""
        path = Path(os.fsdecode(event.src_path))
        if not self.controller.begin(path):
            return None

        thread = threading.Thread(
            target=self.controller.run,
            args=(path,),
            name="atom-rebuild",
            daemon=True,
        )
        thread.start()
        self.rebuilds = [t for t in self.rebuilds if t.is_alive()]
        self.rebuilds.append(thread)
        return thread

    def join_rebuilds(self, timeout: float | None = None) -> None:
        """Wait for rebuilds started by this handler to finish."""
        for thread in self.rebuilds:
            thread.join(timeout)
        self.rebuilds = [t for t in self.rebuilds if t.is_alive()]


def create_controller(config: ProjectConfig) -> RebuildController:
    """Controller wired to the token generator and module compiler."""
    return RebuildController(
        tokens_root=config.tokens_path,
        regenerate_tokens=lambda: generate_tokens(config),
        build_modules=lambda: build_modules(config),
        coalesce=config.coalesce,
    )


def create_observer(
    config: ProjectConfig, controller: RebuildController
) -> tuple[Observer, list[RebuildHandler]]:
    """Schedule handlers for the source and token trees that exist."""
    observer = Observer()
    handlers: list[RebuildHandler] = []
    roots = (
        (config.src_path, SCSS_PATTERNS),
        (config.tokens_path, TOKEN_PATTERNS),
    )
    for root, patterns in roots:
        if not root.is_dir():
            logger.warning(f"Not watching missing directory: {root}")
            continue
        handler = RebuildHandler(controller, patterns)
        observer.schedule(handler, str(root), recursive=True)
        handlers.append(handler)
    return observer, handlers


def watch(config: ProjectConfig) -> None:
    """Watch for changes and rebuild until interrupted."""
    controller = create_controller(config)
    observer, handlers = create_observer(config, controller)

    logger.info("Watching for changes...")
    logger.info(f"  src/    -> {config.src_path}")
    logger.info(f"  tokens/ -> {config.tokens_path}")

    observer.start()
    try:
        while observer.is_alive():
            observer.join(timeout=1)
    except KeyboardInterrupt:
        logger.info("Stopping watcher")
    finally:
        observer.stop()
        observer.join()
        if controller.state is not BuildState.IDLE:
            logger.info("Waiting for the running rebuild to finish")
        for handler in handlers:
            handler.join_rebuilds()
