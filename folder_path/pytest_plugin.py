"""Pytest plugin providing folder path normalisation fixtures."""

from __future__ import annotations

import functools
import logging
import typing as t

import pytest

from .normalizer import normalize_path
from .options import DEFAULT_OPTIONS, FolderPathOptions

logger = logging.getLogger(__name__)

# ini option name -> ``FolderPathOptions`` field it configures.
_INI_FIELDS: t.Final[dict[str, str]] = {
    "folder_path_root": "root",
    "folder_path_slashes": "slashes",
    "folder_path_leading_slash": "leading_slash",
    "folder_path_trailing_slash": "trailing_slash",
}


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options for the plugin."""
    for ini_name, field in _INI_FIELDS.items():
        parser.addini(
            ini_name,
            f"Default {field.replace('_', ' ')} for the folder_path_options fixture.",
            default="",
        )


def pytest_configure(config: pytest.Config) -> None:
    """Register plugin-specific markers."""
    config.addinivalue_line(
        "markers",
        (
            "folder_path(**overrides): override root, slashes, leading_slash "
            "or trailing_slash of the folder_path_options fixture."
        ),
    )


def _ini_overrides(config: pytest.Config) -> dict[str, str]:
    """Return option overrides configured in the ini file."""
    overrides: dict[str, str] = {}
    for ini_name, field in _INI_FIELDS.items():
        value = str(config.getini(ini_name)).strip()
        if value:
            overrides[field] = value
    return overrides


def _param_overrides(request: pytest.FixtureRequest) -> dict[str, t.Any]:
    """Return fixture parameter overrides if present."""
    param = getattr(request, "param", None)
    if param is None:
        return {}
    if isinstance(param, dict):
        return dict(param)
    msg = (
        "folder_path_options fixture param must be a dict of option overrides, "
        f"got {type(param).__name__}"
    )
    raise TypeError(msg)


def _marker_overrides(request: pytest.FixtureRequest) -> dict[str, t.Any]:
    """Return marker overrides if present."""
    marker = request.node.get_closest_marker("folder_path")
    if marker is None:
        return {}
    return dict(marker.kwargs)


@pytest.fixture
def folder_path_options(request: pytest.FixtureRequest) -> FolderPathOptions:
    """Provide :class:`FolderPathOptions` configured for the current test."""
    # Priority order: marker > fixture param > INI setting > defaults
    overrides = _ini_overrides(request.config)
    overrides.update(_param_overrides(request))
    overrides.update(_marker_overrides(request))
    if not overrides:
        return DEFAULT_OPTIONS
    try:
        return DEFAULT_OPTIONS.replace(**overrides)
    except Exception:
        logger.exception("Invalid folder_path_options overrides: %r", overrides)
        raise


@pytest.fixture
def normalize_folder_path(
    folder_path_options: FolderPathOptions,
) -> t.Callable[[str | None], str | None]:
    """Provide :func:`normalize_path` bound to ``folder_path_options``."""
    return functools.partial(normalize_path, options=folder_path_options)


__all__ = ["folder_path_options", "normalize_folder_path"]
