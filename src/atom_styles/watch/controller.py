"""
Rebuild controller - one rebuild at a time.

The controller owns an explicit Idle/Building state. A change that arrives
while a rebuild is running is either dropped (default) or, with coalesce
enabled, remembered as a single pending rebuild that runs as soon as the
current one finishes. Pending changes never stack: many changes during one
rebuild produce at most one extra rebuild.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


class BuildState(str, Enum):
    """Rebuild state."""

    IDLE = "idle"
    BUILDING = "building"


class RebuildController:
    """
    Serializes rebuilds triggered by file changes.

    A rebuild regenerates tokens when the change is under the tokens root,
    then always rebuilds the modules. Failures are logged and leave the
    controller ready for the next change.
    """

    def __init__(
        self,
        tokens_root: Path,
        regenerate_tokens: Callable[[], object],
        build_modules: Callable[[], object],
        coalesce: bool = False,
    ):
        """
        Initialize the controller.

        Args:
            tokens_root: Changes under this directory regenerate tokens first
            regenerate_tokens: Runs the token generator
            build_modules: Runs the module compiler
            coalesce: Keep one pending rebuild instead of dropping changes
        """
        self.tokens_root = tokens_root.resolve()
        self.regenerate_tokens = regenerate_tokens
        self.build_modules = build_modules
        self.coalesce = coalesce
        self.rebuild_count = 0
        self._state = BuildState.IDLE
        self._pending: Path | None = None
        self._lock = threading.Lock()

    @property
    def state(self) -> BuildState:
        return self._state

    @property
    def pending(self) -> Path | None:
        return self._pending

    def is_token_change(self, path: Path) -> bool:
        return path.resolve().is_relative_to(self.tokens_root)

    def begin(self, path: Path) -> bool:
        """
        Claim the controller for a rebuild of path.

        Returns:
            True if the caller must now call run(path); False if a rebuild
            is already running and the change was dropped or queued
        """
        with self._lock:
            if self._state is BuildState.IDLE:
                self._state = BuildState.BUILDING
                return True

            if self.coalesce:
                # A queued token change must not be downgraded to a plain rebuild
                if self._pending is None or self.is_token_change(path):
                    self._pending = path
                logger.debug(f"Rebuild in progress, queued: {path}")
            else:
                logger.debug(f"Rebuild in progress, dropped: {path}")
            return False

    def run(self, path: Path) -> None:
        """Rebuild for path, then for the pending change if one was queued."""
        current = path
        try:
            while True:
                self._rebuild(current)
                with self._lock:
                    if self._pending is None:
                        self._state = BuildState.IDLE
                        return
                    current, self._pending = self._pending, None
        except BaseException:
            with self._lock:
                self._state = BuildState.IDLE
                self._pending = None
            raise

    def trigger(self, path: Path) -> bool:
        """
        Rebuild synchronously unless a rebuild is already running.

        Returns:
            True if this call performed the rebuild
        """
        if not self.begin(path):
            return False
        self.run(path)
        return True

    def _rebuild(self, changed: Path) -> None:
        self.rebuild_count += 1
        logger.info(f"Changed: {changed}")
        try:
            if self.is_token_change(changed):
                logger.info("Regenerating tokens...")
                self.regenerate_tokens()

            logger.info("Building modules...")
            self.build_modules()
            logger.info("Build complete.")
        except Exception:
            logger.exception("Build failed")
