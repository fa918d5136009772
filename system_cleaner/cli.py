"""
Command-line interface and main entry point for system_cleaner.

Handles workflow orchestration and user interaction.
"""

from __future__ import annotations

import logging
import sys

from .args_parser import parse_args
from .categories import Category, Target
from .cleaner import clean_directory, clean_directory_with_age_filter
from .config import CleanerEnvironment, ConfigurationError, load_env_file, load_environment
from .prompts import confirm_continue, wait_for_exit
from .reports import print_banner, print_summary, write_json_report
from .stats import CleanupStats


def clean_target(target: Target, stats: CleanupStats) -> None:
    """Run the cleaner matching ``target`` and accumulate into ``stats``."""
    if target.announce:
        print(f"  Cleaning {target.label}...")
    logging.debug("Cleaning %s (%s)", target.label, target.path)
    if target.max_age_days is not None:
        clean_directory_with_age_filter(target.path, stats, target.max_age_days)
    else:
        clean_directory(target.path, stats, recursive=target.recursive)


def run_category(category: Category, environment: CleanerEnvironment, stats: CleanupStats) -> None:
    print(category.announcement)
    for target in category.resolve(environment):
        clean_target(target, stats)


def run_cleanup(categories: list[Category], environment: CleanerEnvironment) -> CleanupStats:
    """Clean every category in order and return the combined totals."""
    stats = CleanupStats()
    print("\nStarting cleanup...\n")
    for category in categories:
        run_category(category, environment, stats)
    return stats


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the system_cleaner CLI."""
    args = parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        load_env_file(args.env_file)
    except ConfigurationError as exc:
        logging.error("%s", exc)
        return 1
    environment = load_environment()

    print_banner()
    if not confirm_continue(skip_prompt=args.yes):
        print("Operation cancelled.")
        return 0

    stats = run_cleanup(args.categories, environment)
    print_summary(stats)
    if args.report_json:
        write_json_report(stats, args.report_json)

    if not args.no_pause:
        wait_for_exit()
    return 0
