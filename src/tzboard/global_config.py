"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only
cross-cutting constants that many modules can import.
"""

import logging

# Logging
DEFAULT_LOG_LEVEL = logging.INFO

# Board redraw cadence; fast enough for the millisecond digits to move smoothly
REFRESH_INTERVAL_MS = 50

# Zone names that identify the UTC group
UTC_ZONE_NAMES: tuple[str, ...] = ("Etc/UTC", "UTC", "Etc/GMT", "GMT")

# Zones whose groups are always shown in the pinned view (besides local time)
PINNED_ZONE_NAMES: tuple[str, ...] = ("Etc/UTC", "America/Los_Angeles")
