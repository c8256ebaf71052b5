"""Utility modules.

This package provides shared utilities used across the codebase.
"""

from .time import (
    FORMATTED_INSTANT_PATTERN,
    OFFSET_LABEL_PATTERN,
    epoch_millis,
    format_instant,
    format_offset,
    load_zone,
    local_offset_minutes,
    parse_user_timestamp,
    utc_now,
)

__all__ = [
    # Time utilities (formatting and parsing)
    "FORMATTED_INSTANT_PATTERN",
    "OFFSET_LABEL_PATTERN",
    "epoch_millis",
    "format_instant",
    "format_offset",
    "load_zone",
    "local_offset_minutes",
    "parse_user_timestamp",
    "utc_now",
]
