# -*- coding: ascii -*-
"""Exception hierarchy.

Script violations are results, not exceptions; see ``scanner.Violation``.
"""

from typing import Optional


class MixedScriptsError(Exception):
    """Base class for mixedscripts errors."""


class ConfigurationError(MixedScriptsError):
    """Invalid configuration: empty script list, malformed config file, etc."""


class UnknownScriptError(ConfigurationError):
    """A script name that is not a Unicode script property value."""

    def __init__(self, name: str, where: Optional[str] = None):
        self.name = name
        self.where = where
        message = f"Unknown script name: {name!r}"
        if where:
            message = f"{message} ({where})"
        super().__init__(message)


class ScanIOError(MixedScriptsError, OSError):
    """A file could not be opened, read or decoded."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read {self.path}: {reason}")
