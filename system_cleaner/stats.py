"""
Cleanup statistics for system_cleaner.

A single CleanupStats instance is created by the CLI and passed into every
cleaning call so that all categories accumulate into the same totals.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CleanupStats:
    """Running totals for one cleanup run."""

    files_deleted: int = 0
    bytes_freed: int = 0
    errors: int = 0

    def add_file(self, size: int) -> None:
        """Record a successful deletion of a file of ``size`` bytes."""
        if size < 0:
            raise ValueError(f"File size must be >= 0, got {size}")
        self.files_deleted += 1
        self.bytes_freed += size

    def add_error(self) -> None:
        """Record a failed deletion."""
        self.errors += 1
