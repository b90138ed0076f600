"""Exceptions raised by the villain package."""

from __future__ import annotations


class EvilError(Exception):
    """Base class for raised villain errors."""

    pass


class InvalidFullNameError(EvilError, ValueError):
    """Raised when a full name does not split into exactly two tokens.

    This is a broken precondition, not a reportable outcome: callers are
    expected to have validated the name already.
    """

    def __init__(self) -> None:
        super().__init__("Name must have first and last name, separated by a space")


class ConfigError(EvilError):
    """Raised when the [tool.evil] configuration is invalid."""

    pass
