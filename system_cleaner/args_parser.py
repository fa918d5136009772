"""
Argument parsing for the system_cleaner CLI.

Handles command-line argument definition, parsing, and validation.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .categories import Category, build_categories


def add_selection_arguments(parser: argparse.ArgumentParser, categories: dict[str, Category]) -> None:
    """Add category selection arguments."""
    parser.add_argument(
        "--categories",
        nargs="+",
        choices=list(categories),
        default=list(categories),
        help="Categories to clean (default: all). They always run in the order listed here.",
    )
    parser.add_argument("--list-categories", action="store_true", help="List available categories and exit.")


def add_interaction_arguments(parser: argparse.ArgumentParser) -> None:
    """Add confirmation and pause arguments."""
    parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt.")
    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="Exit immediately instead of waiting for Enter after the report.",
    )


def add_output_arguments(parser: argparse.ArgumentParser) -> None:
    """Add configuration, output and logging arguments."""
    parser.add_argument(
        "--env-file",
        type=Path,
        help="Optional dotenv file providing TEMP/TMP/LOCALAPPDATA/SYSTEMROOT overrides.",
    )
    parser.add_argument("--report-json", type=Path, help="Optional path to write the final totals as JSON.")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")


def build_parser(categories: dict[str, Category]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Delete temporary files, browser caches, old prefetch files and the thumbnail cache."
    )
    add_selection_arguments(parser, categories)
    add_interaction_arguments(parser)
    add_output_arguments(parser)
    return parser


def _validate_and_transform_args(args: argparse.Namespace, categories: dict[str, Category]) -> None:
    """Validate and transform parsed arguments."""
    if args.list_categories:
        for cat in categories.values():
            print(f"{cat.name:12} {cat.description}")
        sys.exit(0)
    selected = set(args.categories)
    args.categories = [cat for name, cat in categories.items() if name in selected]


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse and process command-line arguments for system_cleaner."""
    categories = build_categories()
    parser = build_parser(categories)
    args = parser.parse_args(argv)
    _validate_and_transform_args(args, categories)
    return args
