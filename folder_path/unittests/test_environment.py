"""Unit tests for environment-driven configuration."""

from __future__ import annotations

import logging

import pytest

from folder_path.environment import (
    FOLDER_PATH_LEADING_SLASH_ENV,
    FOLDER_PATH_ROOT_ENV,
    FOLDER_PATH_SLASHES_ENV,
    FOLDER_PATH_TRAILING_SLASH_ENV,
    options_from_env,
    options_from_mapping,
)
from folder_path.errors import InvalidOptionError
from folder_path.options import (
    DEFAULT_OPTIONS,
    FolderPathOptions,
    FolderRoot,
    SlashRequirement,
    SlashType,
)


def test_empty_mapping_returns_base() -> None:
    """No variables means the base options are returned as-is."""
    assert options_from_mapping({}) is DEFAULT_OPTIONS


def test_mapping_overrides_only_present_keys() -> None:
    """Each variable overrides its own field; blanks are ignored."""
    options = options_from_mapping(
        {
            FOLDER_PATH_ROOT_ENV: "StreamingAssets",
            FOLDER_PATH_SLASHES_ENV: "  ",
            FOLDER_PATH_TRAILING_SLASH_ENV: " omit ",
        }
    )
    assert options == FolderPathOptions(
        root=FolderRoot.STREAMING_ASSETS,
        trailing_slash=SlashRequirement.OMIT,
    )


def test_custom_base_is_respected() -> None:
    """Overrides layer on top of a caller-supplied base."""
    base = FolderPathOptions(root=FolderRoot.FILE_SYSTEM, slashes=SlashType.BACKWARD)
    options = options_from_mapping(
        {FOLDER_PATH_LEADING_SLASH_ENV: "include"}, base=base
    )
    assert options.root is FolderRoot.FILE_SYSTEM
    assert options.slashes is SlashType.BACKWARD
    assert options.leading_slash is SlashRequirement.INCLUDE


def test_options_from_env_reads_os_environ(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """Process environment variables configure the options."""
    monkeypatch.setenv(FOLDER_PATH_ROOT_ENV, "resources")
    monkeypatch.setenv(FOLDER_PATH_SLASHES_ENV, "system")
    with caplog.at_level(logging.DEBUG, logger="folder_path.environment"):
        options = options_from_env()
    assert options.root is FolderRoot.RESOURCES
    assert options.slashes is SlashType.SYSTEM
    assert FOLDER_PATH_ROOT_ENV in caplog.text


def test_options_from_env_accepts_explicit_environ(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """An explicit mapping replaces ``os.environ`` entirely."""
    monkeypatch.setenv(FOLDER_PATH_ROOT_ENV, "resources")
    options = options_from_env(environ={FOLDER_PATH_ROOT_ENV: "file_system"})
    assert options.root is FolderRoot.FILE_SYSTEM


def test_invalid_environment_value_raises() -> None:
    """Misconfigured variables surface as ``InvalidOptionError``."""
    with pytest.raises(InvalidOptionError, match="root"):
        options_from_mapping({FOLDER_PATH_ROOT_ENV: "Plugins"})
