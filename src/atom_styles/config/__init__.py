"""Project configuration loading."""

from atom_styles.config.loader import ConfigLoader, load_config

__all__ = ["ConfigLoader", "load_config"]
