"""Normalise folder paths relative to a game project's asset roots.

:func:`normalize_path` turns an absolute or relative folder path (using either
separator) into the canonical form selected by :class:`FolderPathOptions`:
relative to the file system, the ``Assets`` folder, or a ``Resources`` /
``StreamingAssets`` folder, with a chosen separator style and boundary slash
policy.
"""

from __future__ import annotations

from .environment import (
    FOLDER_PATH_LEADING_SLASH_ENV,
    FOLDER_PATH_ROOT_ENV,
    FOLDER_PATH_SLASHES_ENV,
    FOLDER_PATH_TRAILING_SLASH_ENV,
    options_from_env,
    options_from_mapping,
)
from .errors import FolderPathError, InvalidOptionError, UnsupportedFieldTypeError
from .field import FolderPathField
from .normalizer import normalize_path
from .options import (
    DEFAULT_OPTIONS,
    FolderPathOptions,
    FolderRoot,
    SlashRequirement,
    SlashType,
)
from .platform import SEPARATOR_OVERRIDE_ENV, system_separator

__all__ = [
    "DEFAULT_OPTIONS",
    "FOLDER_PATH_LEADING_SLASH_ENV",
    "FOLDER_PATH_ROOT_ENV",
    "FOLDER_PATH_SLASHES_ENV",
    "FOLDER_PATH_TRAILING_SLASH_ENV",
    "SEPARATOR_OVERRIDE_ENV",
    "FolderPathError",
    "FolderPathField",
    "FolderPathOptions",
    "FolderRoot",
    "InvalidOptionError",
    "SlashRequirement",
    "SlashType",
    "UnsupportedFieldTypeError",
    "normalize_path",
    "options_from_env",
    "options_from_mapping",
    "system_separator",
]
