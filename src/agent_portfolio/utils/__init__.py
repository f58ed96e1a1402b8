"""Shared utility functions.

This subpackage provides common utility functions used across
the application with no dependencies on other subpackages.

Key modules:
    - parsing: Text scraping helpers for the source extractors
    - paths: Asset resolution and required-file checks
    - logging: Logging configuration
"""

from .parsing import (
    unescape_angle_brackets,
    extract_quoted,
    split_csv,
    extract_field,
    extract_bullets,
)
from .paths import resolve_asset_path, require_file, require_dir
from .logging import configure_logging, get_logger

__all__ = [
    # parsing
    "unescape_angle_brackets",
    "extract_quoted",
    "split_csv",
    "extract_field",
    "extract_bullets",
    # paths
    "resolve_asset_path",
    "require_file",
    "require_dir",
    # logging
    "configure_logging",
    "get_logger",
]
