"""Environment-driven configuration for folder-path."""

from __future__ import annotations

import logging
import os
import typing as t

from .options import DEFAULT_OPTIONS, FolderPathOptions

logger = logging.getLogger(__name__)

FOLDER_PATH_ROOT_ENV: t.Final[str] = "FOLDER_PATH_ROOT"
FOLDER_PATH_SLASHES_ENV: t.Final[str] = "FOLDER_PATH_SLASHES"
FOLDER_PATH_LEADING_SLASH_ENV: t.Final[str] = "FOLDER_PATH_LEADING_SLASH"
FOLDER_PATH_TRAILING_SLASH_ENV: t.Final[str] = "FOLDER_PATH_TRAILING_SLASH"

# Maps each variable onto the ``FolderPathOptions`` field it overrides.
_ENV_FIELDS: t.Final[dict[str, str]] = {
    FOLDER_PATH_ROOT_ENV: "root",
    FOLDER_PATH_SLASHES_ENV: "slashes",
    FOLDER_PATH_LEADING_SLASH_ENV: "leading_slash",
    FOLDER_PATH_TRAILING_SLASH_ENV: "trailing_slash",
}


def options_from_mapping(
    mapping: t.Mapping[str, str],
    *,
    base: FolderPathOptions = DEFAULT_OPTIONS,
) -> FolderPathOptions:
    """Return *base* with overrides taken from the ``FOLDER_PATH_*`` keys.

    Missing or blank keys keep the value from *base*.

    Raises
    ------
    InvalidOptionError
        If a key names no known choice.
    """
    overrides: dict[str, str] = {}
    for env_name, field in _ENV_FIELDS.items():
        raw = mapping.get(env_name)
        if raw is None or not raw.strip():
            continue
        logger.debug("Applying %s=%r to folder path options", env_name, raw)
        overrides[field] = raw.strip()
    if not overrides:
        return base
    return base.replace(**overrides)


def options_from_env(
    *,
    base: FolderPathOptions = DEFAULT_OPTIONS,
    environ: t.Mapping[str, str] | None = None,
) -> FolderPathOptions:
    """Return *base* with overrides from ``os.environ`` (or *environ*)."""
    return options_from_mapping(os.environ if environ is None else environ, base=base)


__all__ = [
    "FOLDER_PATH_LEADING_SLASH_ENV",
    "FOLDER_PATH_ROOT_ENV",
    "FOLDER_PATH_SLASHES_ENV",
    "FOLDER_PATH_TRAILING_SLASH_ENV",
    "options_from_env",
    "options_from_mapping",
]
