"""Group every IANA timezone by the UTC offset it observes right now.

The grouping is computed once per process from a single reference instant
and memoized. Offsets for "now" do not change within a session, and the
build walks every zone the runtime knows about.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta, tzinfo
from types import MappingProxyType
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from ..errors import TimezoneEnumerationFailure
from ..utils.time import utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkippedZone:
    """A zone name that could not be placed in any group.

    Attributes:
        name: The identifier as enumerated.
        reason: Why its offset could not be computed.
    """

    name: str
    reason: str


@dataclass(frozen=True, eq=False)
class TimezoneOffsetMap(Mapping[int, tuple[str, ...]]):
    """Read-only mapping of offset minutes to the zone names sharing it.

    Member order is enumeration order. Zones that failed to resolve are kept
    in ``skipped`` for diagnostics and appear in no group.
    """

    groups: Mapping[int, tuple[str, ...]]
    skipped: tuple[SkippedZone, ...] = field(default=())

    def __post_init__(self) -> None:
        frozen = {offset: tuple(members) for offset, members in self.groups.items() if members}
        object.__setattr__(self, "groups", MappingProxyType(frozen))
        object.__setattr__(self, "skipped", tuple(self.skipped))

    def __getitem__(self, offset: int) -> tuple[str, ...]:
        return self.groups[offset]

    def __iter__(self) -> Iterator[int]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    @property
    def zone_count(self) -> int:
        """Total number of grouped zone names."""
        return sum(len(members) for members in self.groups.values())

    def offset_of(self, zone_name: str) -> int | None:
        """Return the offset whose group contains ``zone_name``, if any."""
        for offset, members in self.groups.items():
            if zone_name in members:
                return offset
        return None


_GROUPS: TimezoneOffsetMap | None = None
_GROUPS_LOCK = threading.Lock()


def available_zone_names() -> list[str]:
    """Return every IANA identifier the runtime supports, in stable order.

    zoneinfo exposes the identifiers as an unordered set; sorting gives the
    grouping a deterministic member order.
    """
    return sorted(available_timezones())


def _wall_clock(instant: datetime, zone: tzinfo) -> datetime:
    """Project an instant into a zone and drop the tzinfo."""
    return instant.astimezone(zone).replace(tzinfo=None)


def _offset_minutes(name: str, now: datetime, utc_reference: datetime) -> int:
    """Compute one zone's offset from UTC at ``now`` in whole minutes.

    Both wall-clock readings are naive, so subtracting them compares them
    as if they shared a zero offset.

    Raises:
        TimezoneEnumerationFailure: If the zone cannot be loaded or projected.
    """
    try:
        zone = ZoneInfo(name)
        tz_reference = _wall_clock(now, zone)
    except (ZoneInfoNotFoundError, ValueError, OSError, OverflowError) as e:
        raise TimezoneEnumerationFailure(name, str(e) or type(e).__name__) from e
    return (tz_reference - utc_reference) // timedelta(minutes=1)


def build_timezone_groups(
    zone_names: Iterable[str] | None = None,
    *,
    now: datetime | None = None,
) -> TimezoneOffsetMap:
    """Partition zone names into groups keyed by their current UTC offset.

    Args:
        zone_names: Identifiers to group. Defaults to every zone the runtime
            supports (see available_zone_names()).
        now: Reference instant (tz-aware). Defaults to the current time.

    Returns:
        TimezoneOffsetMap with one group per distinct offset. Identifiers
        that could not be resolved are listed in ``skipped``.

    Raises:
        ValueError: If ``now`` is naive.

    Logs:
        - WARNING: "Could not process timezone ..." for each skipped zone.
        - WARNING: when no zone could be grouped at all.
        - DEBUG: summary of groups, zones and skips.
    """
    if now is None:
        now = utc_now()
    elif now.tzinfo is None:
        raise ValueError(f"Reference instant must be tz-aware, got {now}")

    names = available_zone_names() if zone_names is None else list(zone_names)
    utc_reference = _wall_clock(now, UTC)

    grouped: dict[int, list[str]] = {}
    skipped: list[SkippedZone] = []

    for name in names:
        try:
            offset = _offset_minutes(name, now, utc_reference)
        except TimezoneEnumerationFailure as e:
            logger.warning("Could not process timezone: %s (%s)", e.name, e.reason)
            skipped.append(SkippedZone(name=e.name, reason=e.reason))
            continue
        grouped.setdefault(offset, []).append(name)

    result = TimezoneOffsetMap(groups=grouped, skipped=tuple(skipped))
    if not result:
        logger.warning("No timezone data available; offset map is empty")
    logger.debug(
        "Grouped %d zones into %d offsets (%d skipped)",
        result.zone_count,
        len(result),
        len(skipped),
    )
    return result


def group_timezones() -> TimezoneOffsetMap:
    """Return the process-wide offset grouping, building it on first use.

    Idempotent: every call after the first returns the same object without
    recomputing. Initialization is guarded so concurrent first calls build
    the map exactly once.
    """
    global _GROUPS
    if _GROUPS is not None:
        return _GROUPS

    with _GROUPS_LOCK:
        if _GROUPS is None:
            _GROUPS = build_timezone_groups()
    return _GROUPS


def reset_timezone_groups_cache() -> None:
    """Forget the memoized grouping. Intended for tests only."""
    global _GROUPS
    with _GROUPS_LOCK:
        _GROUPS = None
