"""
Directory cleaning passes for system_cleaner.

Both cleaners are best-effort: filesystem errors are folded into the stats
accumulator (or ignored) and never propagate to the caller.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from .stats import CleanupStats

SECONDS_PER_DAY = 24 * 60 * 60


def _list_entries(directory: Path) -> list[Path]:
    """Return the direct entries of ``directory`` or an empty list if unreadable."""
    try:
        return list(directory.iterdir())
    except OSError as exc:
        logging.debug("Skipping %s: %s", directory, exc)
        return []


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


def _is_real_dir(path: Path) -> bool:
    try:
        return path.is_dir() and not path.is_symlink()
    except OSError:
        return False


def _delete_file(path: Path, size: int, stats: CleanupStats) -> None:
    try:
        path.unlink()
    except OSError as exc:
        logging.debug("Failed to delete %s: %s", path, exc)
        stats.add_error()
    else:
        stats.add_file(size)


def clean_directory(directory: str | Path, stats: CleanupStats, recursive: bool = False) -> None:
    """Delete every file directly inside ``directory``.

    With ``recursive`` set, subdirectories are cleaned the same way and then
    removed if they ended up empty. Files whose size cannot be read are left
    alone without counting an error.
    """
    # (directory, emptied) pairs; an emptied entry is popped after its whole subtree
    pending: list[tuple[Path, bool]] = [(Path(directory), False)]
    while pending:
        current, emptied = pending.pop()
        if emptied:
            try:
                current.rmdir()
            except OSError as exc:
                logging.debug("Leaving directory %s in place: %s", current, exc)
            continue

        subdirs: list[Path] = []
        for path in _list_entries(current):
            if _is_file(path):
                try:
                    size = path.stat().st_size
                except OSError as exc:
                    logging.debug("Unable to stat %s: %s", path, exc)
                    continue
                _delete_file(path, size, stats)
            elif recursive and _is_real_dir(path):
                subdirs.append(path)
        for subdir in reversed(subdirs):
            pending.append((subdir, True))
            pending.append((subdir, False))


def clean_directory_with_age_filter(
    directory: str | Path,
    stats: CleanupStats,
    max_age_days: int,
    *,
    now: int | None = None,
) -> None:
    """Delete files directly inside ``directory`` last modified more than ``max_age_days`` ago.

    The cutoff is taken once before the scan starts. Subdirectories are never
    entered, and files whose modification time cannot be read are kept.
    """
    if max_age_days < 0:
        raise ValueError("max_age_days must be >= 0")
    max_age_seconds = max_age_days * SECONDS_PER_DAY
    if now is None:
        now = int(time.time())

    for path in _list_entries(Path(directory)):
        if not _is_file(path):
            continue
        try:
            stat = path.stat()
        except OSError as exc:
            logging.debug("Unable to stat %s: %s", path, exc)
            continue
        if now - int(stat.st_mtime) > max_age_seconds:
            _delete_file(path, stat.st_size, stats)
