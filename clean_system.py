#!/usr/bin/env python3
"""
Delete temporary files and browser caches from well-known Windows locations.

This is a thin wrapper around the system_cleaner package.
"""
from __future__ import annotations

from system_cleaner.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
