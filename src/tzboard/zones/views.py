"""Derived views over an offset grouping: ordering, pinning and search."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..global_config import PINNED_ZONE_NAMES, UTC_ZONE_NAMES
from ..utils.time import format_offset, local_offset_minutes
from .grouping import TimezoneOffsetMap


def sorted_offsets(groups: Mapping[int, Sequence[str]]) -> list[int]:
    """Return the group offsets in ascending order."""
    return sorted(groups)


def pinned_offsets(
    groups: TimezoneOffsetMap,
    *,
    local_offset: int | None = None,
) -> list[int]:
    """Select the offsets always worth showing.

    Picks the UTC group, the viewer's local offset and the group holding
    each name in PINNED_ZONE_NAMES. Only offsets present in ``groups`` are
    returned.

    Args:
        groups: Offset grouping to select from.
        local_offset: Viewer's offset in minutes. Defaults to the machine's
            current local offset.

    Returns:
        Deduplicated offsets, ascending.
    """
    if local_offset is None:
        local_offset = local_offset_minutes()

    picked: set[int] = set()
    for name in (*UTC_ZONE_NAMES, *PINNED_ZONE_NAMES):
        offset = groups.offset_of(name)
        if offset is not None:
            picked.add(offset)
    if local_offset in groups:
        picked.add(local_offset)
    return sorted(picked)


def filter_offsets(groups: Mapping[int, Sequence[str]], query: str | None) -> list[int]:
    """Return offsets whose label or any member name contains ``query``.

    Matching is case-insensitive. A blank query matches every group.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return sorted_offsets(groups)

    matches = []
    for offset in sorted_offsets(groups):
        if needle in format_offset(offset).lower():
            matches.append(offset)
        elif any(needle in name.lower() for name in groups[offset]):
            matches.append(offset)
    return matches
