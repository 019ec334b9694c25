"""
Watcher - rebuilds when sources or tokens change.

Token changes regenerate the SCSS fragments before the module build;
source changes only rebuild the modules.
"""

from atom_styles.watch.controller import BuildState, RebuildController
from atom_styles.watch.observer import (
    RebuildHandler,
    create_controller,
    create_observer,
    watch,
)

__all__ = [
    "BuildState",
    "RebuildController",
    "RebuildHandler",
    "create_controller",
    "create_observer",
    "watch",
]
