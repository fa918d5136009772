"""
System cleaner package.

Delete temporary files and browser caches from well-known Windows locations
and report how much space was freed.
"""

from . import args_parser, categories, cleaner, cli, config, prompts, reports, stats
from .categories import Category, Target, build_categories
from .cleaner import clean_directory, clean_directory_with_age_filter
from .stats import CleanupStats

__all__ = [
    "Category",
    "CleanupStats",
    "Target",
    "args_parser",
    "build_categories",
    "categories",
    "clean_directory",
    "clean_directory_with_age_filter",
    "cleaner",
    "cli",
    "config",
    "prompts",
    "reports",
    "stats",
]
