"""Shared pytest fixtures for test files."""

from __future__ import annotations

from pathlib import Path

import pytest

from system_cleaner.config import (
    ENV_FILE_ENV_VAR,
    LOCAL_APP_DATA_ENV_VAR,
    SYSTEM_ROOT_ENV_VAR,
    TEMP_ENV_VARS,
)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep tests away from the real temp and cache directories."""
    for name in (*TEMP_ENV_VARS, LOCAL_APP_DATA_ENV_VAR, ENV_FILE_ENV_VAR):
        # setenv first so undo also removes values a dotenv load adds later
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setenv(SYSTEM_ROOT_ENV_VAR, str(tmp_path / "no-such-windows"))


@pytest.fixture
def fake_windows(tmp_path, monkeypatch):
    """Build a miniature Windows layout and point the environment at it."""
    root = tmp_path / "fake"
    user_temp = root / "Users" / "me" / "AppData" / "Local" / "Temp"
    local_app_data = root / "Users" / "me" / "AppData" / "Local"
    system_root = root / "Windows"
    for directory in (user_temp, system_root / "Temp", system_root / "Prefetch"):
        directory.mkdir(parents=True, exist_ok=True)

    monkeypatch.setenv("TEMP", str(user_temp))
    monkeypatch.setenv("TMP", str(user_temp))
    monkeypatch.setenv(LOCAL_APP_DATA_ENV_VAR, str(local_app_data))
    monkeypatch.setenv(SYSTEM_ROOT_ENV_VAR, str(system_root))
    return {
        "user_temp": user_temp,
        "local_app_data": local_app_data,
        "system_root": system_root,
    }


@pytest.fixture
def locked_files(monkeypatch):
    """Make Path.unlink fail for any file whose name is added to the returned set."""
    locked: set[str] = set()
    original_unlink = Path.unlink

    def _unlink(self, *args, **kwargs):
        if self.name in locked:
            raise PermissionError(f"{self} is in use")
        return original_unlink(self, *args, **kwargs)

    monkeypatch.setattr(Path, "unlink", _unlink)
    return locked
