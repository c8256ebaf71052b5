"""Timezone grouping by current UTC offset, and views derived from it."""

from .grouping import (
    SkippedZone,
    TimezoneOffsetMap,
    available_zone_names,
    build_timezone_groups,
    group_timezones,
    reset_timezone_groups_cache,
)
from .views import filter_offsets, pinned_offsets, sorted_offsets

__all__ = [
    "SkippedZone",
    "TimezoneOffsetMap",
    "available_zone_names",
    "build_timezone_groups",
    "filter_offsets",
    "group_timezones",
    "pinned_offsets",
    "reset_timezone_groups_cache",
    "sorted_offsets",
]
