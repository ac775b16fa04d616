"""Canonicalise folder paths relative to a project root.

Normalisation runs in five ordered stages:

1. unify separators on ``/`` and trim surrounding whitespace;
2. resolve the configured root (strip or insert the root folder);
3. rewrite separators in the configured :class:`~folder_path.options.SlashType`;
4. apply the leading separator policy (``FolderRoot.ASSETS`` only);
5. apply the trailing separator policy (file-system and assets roots only).

Malformed input never raises; the worst case is an odd but deterministic
string. Running the result through the same options again returns it
unchanged.
"""

from __future__ import annotations

import functools
import logging
import re
import typing as t

from .options import (
    DEFAULT_OPTIONS,
    FolderPathOptions,
    FolderRoot,
    SlashRequirement,
    SlashType,
)
from .platform import system_separator

logger = logging.getLogger(__name__)

ASSETS_FOLDER: t.Final[str] = "Assets"
RESOURCES_FOLDER: t.Final[str] = "Resources"
STREAMING_ASSETS_FOLDER: t.Final[str] = "StreamingAssets"

_SEPARATORS: t.Final[str] = "/\\"


def normalize_path(
    path: str | None, options: FolderPathOptions = DEFAULT_OPTIONS
) -> str | None:
    """Return *path* normalised according to *options*.

    ``None``, empty and whitespace-only paths are returned unchanged.

    Parameters
    ----------
    path : str | None
        An absolute or relative folder path using either separator.
    options : FolderPathOptions, optional
        Root, separator style and boundary policies to apply.

    Returns
    -------
    str | None
        The root-relative path with the requested separators.

    Raises
    ------
    TypeError
        If *path* is neither a string nor ``None``.

    Examples
    --------
    >>> normalize_path("C:/MyGame/Assets/MyFolder/MySubFolder/")
    'Assets/MyFolder/MySubFolder/'
    """
    if path is None:
        return None
    if not isinstance(path, str):
        msg = f"path must be a str or None, got {type(path).__name__}"
        raise TypeError(msg)
    if not path.strip():
        return path

    working = path.replace("\\", "/").strip()
    working = resolve_root(working, options.root)
    working = apply_slash_style(working, options)
    if options.root is FolderRoot.ASSETS:
        lead = separator_for(options.slashes)
        working = apply_leading_slash(working, options.leading_slash, lead)
    if _honours_trailing_slash(options.root):
        trail = separator_for(options.slashes)
        working = apply_trailing_slash(working, options.trailing_slash, trail)
    return working


def resolve_root(path: str, root: FolderRoot) -> str:
    """Strip or insert the folder for *root* in a forward-slash *path*.

    Resolution is repeated until the path stops changing so that nested
    root folders (``Resources/Resources/...``) collapse in a single call.
    """
    while True:
        resolved = _resolve_root_once(path, root).strip()
        if resolved == path:
            return resolved
        path = resolved


def _resolve_root_once(path: str, root: FolderRoot) -> str:
    match root:
        case FolderRoot.FILE_SYSTEM:
            return path
        case FolderRoot.ASSETS:
            return _strip_to_assets(path)
        case FolderRoot.RESOURCES:
            return _strip_subfolder(path, RESOURCES_FOLDER)
        case FolderRoot.STREAMING_ASSETS:
            return _strip_subfolder(path, STREAMING_ASSETS_FOLDER)
        case _:
            t.assert_never(root)


@functools.cache
def _folder_marker(folder: str) -> re.Pattern[str]:
    """Return a pattern matching ``/<folder>/`` regardless of ASCII case."""
    return re.compile(f"/{re.escape(folder)}/", re.IGNORECASE | re.ASCII)


def _find_folder(path: str, folder: str) -> int:
    """Return the index of ``/<folder>/`` in *path*, or -1 when absent."""
    found = _folder_marker(folder).search(path)
    return found.start() if found else -1


def _starts_with_folder(path: str, folder: str) -> bool:
    return _find_folder(f"/{path}", folder) == 0


def _strip_to_assets(path: str) -> str:
    """Return *path* starting at its ``Assets`` folder.

    The end of the string, or a trailing run of separators and whitespace,
    counts as a folder boundary, so ``C:/Game/Assets /`` resolves to
    ``Assets /``. Paths that do not mention the folder get it prepended.
    """
    # The trimmed path is a prefix of *path*, so match indices stay valid.
    boundary = f"{_strip_trailing(path)}/"
    index = _find_folder(boundary, ASSETS_FOLDER)
    if index >= 0:
        stripped = path[index + 1 :]
        logger.debug("Dropped %r ahead of the assets folder", path[: index + 1])
        return stripped
    if _starts_with_folder(boundary, ASSETS_FOLDER):
        return path
    logger.debug("Prefixing %r with the assets folder", path)
    return f"{ASSETS_FOLDER}/{path.lstrip('/')}"


def _strip_subfolder(path: str, folder: str) -> str:
    """Return the part of *path* below *folder*, dropping the folder itself."""
    index = _find_folder(path, folder)
    if index >= 0:
        logger.debug("Dropped %r up to the %s folder", path[:index], folder)
        return path[index + len(folder) + 2 :]
    if _starts_with_folder(path, folder):
        return path[len(folder) + 1 :]
    return path


def separator_for(slashes: SlashType) -> str:
    """Return the separator character written for *slashes*."""
    match slashes:
        case SlashType.FORWARD:
            return "/"
        case SlashType.BACKWARD:
            return "\\"
        case SlashType.SYSTEM:
            return system_separator()
        case _:
            t.assert_never(slashes)


def _forces_forward_slashes(root: FolderRoot) -> bool:
    match root:
        case FolderRoot.RESOURCES | FolderRoot.STREAMING_ASSETS:
            return True
        case FolderRoot.FILE_SYSTEM | FolderRoot.ASSETS:
            return False
        case _:
            t.assert_never(root)


def _honours_trailing_slash(root: FolderRoot) -> bool:
    return not _forces_forward_slashes(root)


def apply_slash_style(path: str, options: FolderPathOptions) -> str:
    """Rewrite every separator in *path* to the style *options* selects."""
    if _forces_forward_slashes(options.root):
        return path.replace("\\", "/")
    separator = separator_for(options.slashes)
    return path.replace("\\", "/").replace("/", separator)


def _strip_trailing(path: str) -> str:
    while (stripped := path.rstrip(_SEPARATORS).rstrip()) != path:
        path = stripped
    return path


def apply_leading_slash(
    path: str, requirement: SlashRequirement, separator: str
) -> str:
    """Enforce *requirement* on the first character of *path*."""
    match requirement:
        case SlashRequirement.INCLUDE:
            return path if path.startswith(separator) else separator + path
        case SlashRequirement.OMIT:
            return path.lstrip(_SEPARATORS)
        case SlashRequirement.OPTIONAL:
            return path
        case _:
            t.assert_never(requirement)


def apply_trailing_slash(
    path: str, requirement: SlashRequirement, separator: str
) -> str:
    """Enforce *requirement* on the last character of *path*."""
    match requirement:
        case SlashRequirement.INCLUDE:
            return path if path.endswith(separator) else path + separator
        case SlashRequirement.OMIT:
            return _strip_trailing(path)
        case SlashRequirement.OPTIONAL:
            return path
        case _:
            t.assert_never(requirement)


__all__ = [
    "ASSETS_FOLDER",
    "RESOURCES_FOLDER",
    "STREAMING_ASSETS_FOLDER",
    "apply_leading_slash",
    "apply_slash_style",
    "apply_trailing_slash",
    "normalize_path",
    "resolve_root",
    "separator_for",
]
