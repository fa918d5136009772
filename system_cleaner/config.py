"""
Configuration and path resolution for system_cleaner.

Reads the environment variables the cleanup targets are derived from and
optionally layers in overrides from a dotenv file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

TEMP_ENV_VARS = ("TEMP", "TMP")
LOCAL_APP_DATA_ENV_VAR = "LOCALAPPDATA"
SYSTEM_ROOT_ENV_VAR = "SYSTEMROOT"
ENV_FILE_ENV_VAR = "SYSTEM_CLEANER_ENV_FILE"

DEFAULT_SYSTEM_ROOT = r"C:\Windows"
PREFETCH_MAX_AGE_DAYS = 30


class ConfigurationError(RuntimeError):
    """Raised when requested configuration cannot be loaded."""


@dataclass(frozen=True)
class CleanerEnvironment:
    """Locations the cleanup categories are derived from."""

    temp_dirs: tuple[Path, ...]
    local_app_data: Path | None
    system_root: Path


def _env_path(name: str) -> Path | None:
    value = os.environ.get(name)
    if value:
        return Path(value)
    return None


def _resolve_env_file(env_file: str | Path | None = None) -> Path | None:
    """
    Determine which dotenv file, if any, should be loaded.

    Priority order:
      1. Explicit parameter
      2. SYSTEM_CLEANER_ENV_FILE environment variable
    """
    if env_file:
        return Path(env_file).expanduser()
    from_env = os.environ.get(ENV_FILE_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser()
    return None


def load_env_file(env_file: str | Path | None = None) -> Path | None:
    """Load overrides from a dotenv file without replacing variables already set.

    Returns the loaded path, or None when no file was requested.

    Raises:
        ConfigurationError: If a file was requested but does not exist.
    """
    resolved = _resolve_env_file(env_file)
    if resolved is None:
        return None
    if not resolved.is_file():
        raise ConfigurationError(f"Environment file {resolved} does not exist")
    load_dotenv(resolved, override=False)
    logging.info("Loaded environment overrides from %s", resolved)
    return resolved


def load_environment() -> CleanerEnvironment:
    """Snapshot the cleanup-relevant environment variables."""
    temp_dirs: list[Path] = []
    for name in TEMP_ENV_VARS:
        path = _env_path(name)
        if path is not None:
            temp_dirs.append(path)

    system_root = _env_path(SYSTEM_ROOT_ENV_VAR) or Path(DEFAULT_SYSTEM_ROOT)
    return CleanerEnvironment(
        temp_dirs=tuple(dict.fromkeys(temp_dirs)),
        local_app_data=_env_path(LOCAL_APP_DATA_ENV_VAR),
        system_root=system_root,
    )
