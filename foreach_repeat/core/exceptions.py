"""Exceptions raised by foreach_repeat.
The loop itself never fails: errors a callback wants to report travel as
ordinary data in the ``Break`` payload. The types here only cover misuse of
the API and bad configuration.
"""

from __future__ import annotations

from typing import Any


class ForEachRepeatError(Exception):
    """Base class for all foreach_repeat errors."""


class InvalidControlError(ForEachRepeatError, TypeError):
    """
    Raised when a callback returns something that is not a LoopControl.
    Attributes:
        value: The object the callback returned
        invocation: 1-based number of the callback invocation that produced it
    """

    def __init__(self, value: Any, invocation: int):
        self.value = value
        self.invocation = invocation
        super().__init__(
            f"callback must return a LoopControl, got {type(value).__name__} "
            f"on invocation {invocation}"
        )


class ConfigError(ForEachRepeatError, ValueError):
    """Raised when a configuration file cannot be used."""

    def __init__(self, message: str, path: Any = None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


__all__ = [
    "ForEachRepeatError",
    "InvalidControlError",
    "ConfigError",
]
