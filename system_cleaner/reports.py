"""
Report output for system_cleaner.

Prints the final summary and optionally writes the totals as JSON.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path

from .stats import CleanupStats

BYTES_PER_KIB = 1024
BYTES_PER_MIB = BYTES_PER_KIB**2


def format_megabytes(num_bytes: int) -> str:
    """Format a byte count as megabytes with two decimals (e.g. '1.50 MB')."""
    return f"{num_bytes / BYTES_PER_MIB:.2f} MB"


def print_banner() -> None:
    print("Windows System Cleaner")
    print("========================")
    print("This tool will clean temporary files and browser caches.")
    print("Personal files and documents are not touched.\n")


def print_summary(stats: CleanupStats) -> None:
    """Print the end-of-run totals."""
    print("\nCleanup completed!")
    print("===================")
    print(f"Files deleted: {stats.files_deleted}")
    print(f"Space freed: {format_megabytes(stats.bytes_freed)}")
    if stats.errors > 0:
        print(f"Errors encountered: {stats.errors} (some files may be in use)")


def write_json_report(stats: CleanupStats, json_path: Path) -> None:
    """Write the run totals to ``json_path``."""
    payload = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        **asdict(stats),
        "space_freed": format_megabytes(stats.bytes_freed),
    }
    json_path.parent.mkdir(parents=True, exist_ok=True)
    json_path.write_text(json.dumps(payload, indent=2))
