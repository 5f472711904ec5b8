"""Exceptions raised by lintignore"""


class LintIgnoreError(Exception):
    """Base class for all lintignore errors."""

    pass


class InvalidArgumentError(LintIgnoreError, ValueError):
    """An argument violates a precondition (e.g. a relative file path)."""

    pass


class InvalidBasePathError(InvalidArgumentError):
    """A path that must anchor ignore patterns is not absolute."""

    pass


class ConfigurationError(LintIgnoreError):
    """Configuration validation error."""

    pass
