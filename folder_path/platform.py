"""Host separator helpers shared across folder-path modules.

``SlashType.SYSTEM`` resolves to whatever separator the running interpreter
uses. Tests (and consumers targeting another host) can pin it through an
environment override instead of needing to run on a different OS.
"""

from __future__ import annotations

import os
import typing as t

from .errors import InvalidOptionError

# Pin the separator used for ``SlashType.SYSTEM``. Accepts the literal
# separator or one of the aliases below.
SEPARATOR_OVERRIDE_ENV: t.Final[str] = "FOLDER_PATH_SEPARATOR_OVERRIDE"

_SEPARATOR_ALIASES: t.Final[dict[str, str]] = {
    "/": "/",
    "\\": "\\",
    "posix": "/",
    "windows": "\\",
    "nt": "\\",
}


def _normalise(value: str) -> str:
    """Return a lowercase version of *value* suitable for alias lookups."""
    return value.strip().lower()


def _resolve_alias(value: str) -> str:
    """Map *value* onto a separator character or raise."""
    try:
        return _SEPARATOR_ALIASES[_normalise(value)]
    except KeyError:
        raise InvalidOptionError(
            "system separator", value, _SEPARATOR_ALIASES
        ) from None


def system_separator() -> str:
    """Return the effective host separator, honouring test overrides."""
    if env_value := os.getenv(SEPARATOR_OVERRIDE_ENV):
        return _resolve_alias(env_value)

    return os.sep


__all__ = [
    "SEPARATOR_OVERRIDE_ENV",
    "system_separator",
]
