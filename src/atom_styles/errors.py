"""
Exceptions raised by the token pipeline.

Per-module compiler failures are reported, not raised; these cover the
cases that stop a run.
"""

from __future__ import annotations


class AtomStylesError(Exception):
    """Base class for pipeline errors."""


class TokenFileError(AtomStylesError, ValueError):
    """A token file could not be parsed into a token tree."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class TokenConversionError(AtomStylesError, ValueError):
    """A token value has no CSS form and strict conversion was requested."""

    def __init__(self, message: str, token_path: str, raw: object = None):
        super().__init__(message)
        self.token_path = token_path
        self.raw = raw


class ConfigError(AtomStylesError, ValueError):
    """The project configuration file is invalid."""
