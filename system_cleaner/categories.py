"""
Cleanup categories and the directories each one targets.

The table here is static data; the traversal itself lives in cleaner.py and
knows nothing about which concrete paths it is given.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .config import PREFETCH_MAX_AGE_DAYS, CleanerEnvironment

BROWSER_CACHE_DIRS: tuple[tuple[str, str], ...] = (
    ("Google/Chrome/User Data/Default/Cache", "Chrome Cache"),
    ("Google/Chrome/User Data/Default/Code Cache", "Chrome Code Cache"),
    ("Microsoft/Edge/User Data/Default/Cache", "Edge Cache"),
    ("Microsoft/Edge/User Data/Default/Code Cache", "Edge Code Cache"),
    ("BraveSoftware/Brave-Browser/User Data/Default/Cache", "Brave Cache"),
    ("BraveSoftware/Brave-Browser/User Data/Default/Code Cache", "Brave Code Cache"),
    ("Opera Software/Opera Stable/Cache", "Opera Cache"),
)
FIREFOX_PROFILES_DIR = "Mozilla/Firefox/Profiles"
FIREFOX_CACHE_DIR = "cache2"
THUMBNAIL_CACHE_DIR = "Microsoft/Windows/Explorer"


@dataclass(frozen=True)
class Target:
    """One directory to clean and how to clean it."""

    label: str
    path: Path
    recursive: bool = False
    max_age_days: int | None = None
    announce: bool = False


@dataclass(frozen=True)
class Category:
    """A named source of cleanup targets."""

    name: str
    description: str
    announcement: str
    resolve: Callable[[CleanerEnvironment], list[Target]]


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


def _existing(targets: list[Target]) -> list[Target]:
    return [target for target in targets if _is_dir(target.path)]


def _temp_targets(environment: CleanerEnvironment) -> list[Target]:
    targets = [Target(label="Temp", path=path) for path in environment.temp_dirs]
    targets.append(Target(label="Windows Temp", path=environment.system_root / "Temp"))
    return _existing(targets)


def _firefox_targets(profiles_dir: Path) -> list[Target]:
    """Return one target per Firefox profile that has a disk cache."""
    try:
        profiles = sorted(profiles_dir.iterdir())
    except OSError:
        return []
    return [
        Target(label="Firefox Cache", path=profile / FIREFOX_CACHE_DIR, recursive=True, announce=True)
        for profile in profiles
        if _is_dir(profile)
    ]


def _browser_targets(environment: CleanerEnvironment) -> list[Target]:
    app_data = environment.local_app_data
    if app_data is None:
        return []
    targets = [
        Target(label=label, path=app_data / relative, recursive=True, announce=True)
        for relative, label in BROWSER_CACHE_DIRS
    ]
    targets.extend(_firefox_targets(app_data / FIREFOX_PROFILES_DIR))
    return _existing(targets)


def _prefetch_targets(environment: CleanerEnvironment) -> list[Target]:
    return _existing(
        [
            Target(
                label="Prefetch",
                path=environment.system_root / "Prefetch",
                max_age_days=PREFETCH_MAX_AGE_DAYS,
            )
        ]
    )


def _thumbnail_targets(environment: CleanerEnvironment) -> list[Target]:
    if environment.local_app_data is None:
        return []
    return _existing([Target(label="Thumbnail Cache", path=environment.local_app_data / THUMBNAIL_CACHE_DIR)])


def build_categories() -> dict[str, Category]:
    """Return all categories keyed by name, in the order they are cleaned."""
    categories = [
        Category(
            name="temp",
            description="User and Windows temp directories",
            announcement="Cleaning Windows temp directories...",
            resolve=_temp_targets,
        ),
        Category(
            name="browser",
            description="Chrome, Edge, Brave, Opera and Firefox caches",
            announcement="Cleaning browser caches...",
            resolve=_browser_targets,
        ),
        Category(
            name="prefetch",
            description=f"Windows prefetch files older than {PREFETCH_MAX_AGE_DAYS} days",
            announcement="Cleaning Windows prefetch...",
            resolve=_prefetch_targets,
        ),
        Category(
            name="thumbnails",
            description="Explorer thumbnail cache",
            announcement="Cleaning thumbnail cache...",
            resolve=_thumbnail_targets,
        ),
    ]
    return {category.name: category for category in categories}
