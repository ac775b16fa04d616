"""Configuration types controlling how folder paths are normalised."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as t

from .errors import InvalidOptionError

_E = t.TypeVar("_E", bound=enum.Enum)


class FolderRoot(enum.StrEnum):
    """Well-known base directory a folder path is expressed relative to."""

    FILE_SYSTEM = "file_system"
    ASSETS = "assets"
    RESOURCES = "resources"
    STREAMING_ASSETS = "streaming_assets"


class SlashRequirement(enum.StrEnum):
    """Whether a boundary separator is forced present, forced absent, or kept."""

    INCLUDE = "include"
    OMIT = "omit"
    OPTIONAL = "optional"


class SlashType(enum.StrEnum):
    """Separator character written into normalised paths."""

    SYSTEM = "system"
    FORWARD = "forward"
    BACKWARD = "backward"


def _lookup_key(value: str) -> str:
    """Fold *value* so ``StreamingAssets`` and ``streaming-assets`` compare equal."""
    return "".join(ch for ch in value.lower() if ch not in "_- ")


def coerce_choice(enum_type: type[_E], value: object, *, option: str) -> _E:
    """Return the *enum_type* member named by *value*.

    Members are passed through unchanged. Strings match either a member's
    value or its name, ignoring case, underscores, hyphens and spaces.
    """
    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        key = _lookup_key(value)
        for member in enum_type:
            if key in (_lookup_key(member.name), _lookup_key(str(member.value))):
                return member
    raise InvalidOptionError(option, value, (str(m.value) for m in enum_type))


@dc.dataclass(frozen=True, slots=True)
class FolderPathOptions:
    """
    Settings applied by :func:`folder_path.normalizer.normalize_path`.

    Attributes
    ----------
    root : FolderRoot
        Base directory the normalised path is relative to.
    leading_slash : SlashRequirement
        Leading separator policy. Only honoured for ``FolderRoot.ASSETS``.
    trailing_slash : SlashRequirement
        Trailing separator policy. Honoured for ``FolderRoot.FILE_SYSTEM`` and
        ``FolderRoot.ASSETS``.
    slashes : SlashType
        Separator style. ``FolderRoot.RESOURCES`` and
        ``FolderRoot.STREAMING_ASSETS`` always use forward slashes.

    Raises
    ------
    InvalidOptionError
        If a field names no known choice.
    """

    root: FolderRoot = FolderRoot.ASSETS
    leading_slash: SlashRequirement = SlashRequirement.OMIT
    trailing_slash: SlashRequirement = SlashRequirement.INCLUDE
    slashes: SlashType = SlashType.FORWARD

    def __post_init__(self) -> None:
        """Coerce string values onto their enum members."""
        object.__setattr__(
            self, "root", coerce_choice(FolderRoot, self.root, option="root")
        )
        for name in ("leading_slash", "trailing_slash"):
            value = coerce_choice(SlashRequirement, getattr(self, name), option=name)
            object.__setattr__(self, name, value)
        object.__setattr__(
            self, "slashes", coerce_choice(SlashType, self.slashes, option="slashes")
        )

    def replace(self, **overrides: object) -> FolderPathOptions:
        """Return a copy with *overrides* applied."""
        return dc.replace(self, **overrides)  # type: ignore[arg-type]


DEFAULT_OPTIONS: t.Final[FolderPathOptions] = FolderPathOptions()

__all__ = [
    "DEFAULT_OPTIONS",
    "FolderPathOptions",
    "FolderRoot",
    "SlashRequirement",
    "SlashType",
    "coerce_choice",
]
