"""Global test configuration and shared fixtures."""

from __future__ import annotations

import pytest

from folder_path.environment import (
    FOLDER_PATH_LEADING_SLASH_ENV,
    FOLDER_PATH_ROOT_ENV,
    FOLDER_PATH_SLASHES_ENV,
    FOLDER_PATH_TRAILING_SLASH_ENV,
)
from folder_path.platform import SEPARATOR_OVERRIDE_ENV

pytest_plugins = ("folder_path.pytest_plugin", "pytester")

_CONFIG_ENV_VARS = (
    FOLDER_PATH_ROOT_ENV,
    FOLDER_PATH_SLASHES_ENV,
    FOLDER_PATH_LEADING_SLASH_ENV,
    FOLDER_PATH_TRAILING_SLASH_ENV,
    SEPARATOR_OVERRIDE_ENV,
)


@pytest.fixture(autouse=True)
def clear_folder_path_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure configuration variables from the host never leak into tests."""
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
