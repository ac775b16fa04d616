"""Exception types raised by folder-path."""

from __future__ import annotations

import typing as t


class FolderPathError(Exception):
    """Base class for folder-path errors."""


class InvalidOptionError(FolderPathError, ValueError):
    """
    Raised when a configuration value does not name a known choice.

    Attributes
    ----------
    option : str
        Name of the option being configured.
    value : object
        The rejected value.
    """

    def __init__(
        self, option: str, value: object, choices: t.Iterable[str] = ()
    ) -> None:
        allowed = ", ".join(choices)
        msg = f"invalid {option}: {value!r}"
        if allowed:
            msg = f"{msg} (expected one of: {allowed})"
        super().__init__(msg)
        self.option = option
        self.value = value


class UnsupportedFieldTypeError(FolderPathError, TypeError):
    """Raised when a folder path field holds something other than a string."""

    def __init__(self, value_type: type) -> None:
        msg = (
            "FolderPath fields can only hold strings, "
            f"got {value_type.__name__}"
        )
        super().__init__(msg)
        self.value_type = value_type


__all__ = [
    "FolderPathError",
    "InvalidOptionError",
    "UnsupportedFieldTypeError",
]
