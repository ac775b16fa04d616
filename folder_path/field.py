"""String fields that keep their value as a normalised folder path."""

from __future__ import annotations

import typing as t

from .errors import UnsupportedFieldTypeError
from .normalizer import normalize_path
from .options import DEFAULT_OPTIONS, FolderPathOptions


class FolderPathField:
    """Bind :class:`FolderPathOptions` to a string-valued field.

    The field validates that it only ever holds text and normalises every
    value written to it, whether typed in directly or picked from a folder
    browser.
    """

    def __init__(
        self,
        options: FolderPathOptions = DEFAULT_OPTIONS,
        **overrides: t.Any,  # noqa: ANN401 - forwarded to FolderPathOptions
    ) -> None:
        """Create a field.

        Parameters
        ----------
        options:
            Base normalisation settings.
        **overrides:
            Individual ``FolderPathOptions`` fields (``root``, ``slashes``,
            ``leading_slash``, ``trailing_slash``) replacing those in
            *options*.
        """
        self.options = options.replace(**overrides) if overrides else options

    def normalize(self, value: object) -> str | None:
        """Return *value* normalised, rejecting anything that is not text."""
        if value is not None and not isinstance(value, str):
            raise UnsupportedFieldTypeError(type(value))
        return normalize_path(t.cast("str | None", value), self.options)

    def apply_edit(self, edited: str | None) -> str | None:
        """Return the value to store after the user typed *edited*."""
        return self.normalize(edited)

    def apply_selection(self, current: str | None, selected: str | None) -> str | None:
        """Return the value to store after a folder browser returned *selected*.

        A cancelled browser (empty or ``None`` selection) keeps *current*.
        """
        if not selected:
            return current
        return self.normalize(selected)

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"FolderPathField({self.options!r})"


__all__ = ["FolderPathField"]
