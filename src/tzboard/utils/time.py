"""Canonical time and date utilities.

This module provides a single source of truth for the board's time handling:
- Local wall-clock strings: YYYY-MM-DDTHH:MM:SS.sss (milliseconds, no suffix)
- Offset labels: UTC +HH:MM / UTC -HH:MM
- Best-effort parsing of user-supplied timestamps (text or epoch milliseconds)

Internal operations use tz-aware datetime objects; naive datetimes are
rejected at the formatting boundary.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from email.utils import parsedate_to_datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..errors import InvalidTimezone, TimestampParseFailure

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

# Fixed-width local timestamp: exactly 23 characters, YYYY-MM-DDTHH:MM:SS.sss
FORMATTED_INSTANT_LENGTH = 23
FORMATTED_INSTANT_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}$")
OFFSET_LABEL_PATTERN = re.compile(r"^UTC [+-]\d{2}:\d{2}$")

_DATE_ONLY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_EPOCH_MILLIS_PATTERN = re.compile(r"^[+-]?\d+$")

# Parsed instants must stay a day inside the datetime range so that projecting
# them into any zone (offsets reach 14h either side of UTC) cannot overflow
_EARLIEST_INSTANT = datetime.min.replace(tzinfo=UTC) + timedelta(days=1)
_LATEST_INSTANT = datetime.max.replace(tzinfo=UTC) - timedelta(days=1)


def utc_now() -> datetime:
    """Return current UTC time as tz-aware datetime.

    Returns:
        Current UTC datetime with timezone.utc.
    """
    return datetime.now(UTC)


def epoch_millis(instant: datetime) -> int:
    """Return whole milliseconds since the Unix epoch for an aware datetime."""
    if instant.tzinfo is None:
        raise ValueError(f"Cannot convert naive datetime {instant} to epoch milliseconds")
    return (instant - EPOCH) // timedelta(milliseconds=1)


def local_offset_minutes(now: datetime | None = None) -> int:
    """Return the machine's local UTC offset in minutes at ``now``."""
    now = now or utc_now()
    offset = now.astimezone().utcoffset()
    if offset is None:
        return 0
    return int(offset.total_seconds() // 60)


def load_zone(name: str) -> ZoneInfo:
    """Resolve an IANA timezone identifier.

    Args:
        name: IANA timezone identifier (e.g., "America/Los_Angeles").

    Returns:
        ZoneInfo instance (cached by zoneinfo per key).

    Raises:
        InvalidTimezone: If the name is not a recognized identifier.
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidTimezone(str(name))
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidTimezone(name) from e


def _wall_clock_parts(local: datetime) -> dict[str, str]:
    """Split a localized datetime into zero-padded calendar fields."""
    return {
        "year": f"{local.year:04d}",
        "month": f"{local.month:02d}",
        "day": f"{local.day:02d}",
        "hour": f"{local.hour:02d}",
        "minute": f"{local.minute:02d}",
        "second": f"{local.second:02d}",
    }


def _normalize_midnight(hour: str) -> str:
    # Some locale formatters report midnight as hour 24 of the previous day.
    return "00" if hour == "24" else hour


def format_instant(instant: datetime, reference_timezone: str) -> str:
    """Format an instant as local wall-clock time in a named timezone.

    The calendar fields come from the instant projected into
    ``reference_timezone``. Milliseconds are read from the instant itself so
    that sub-second precision never depends on the projected fields.

    Args:
        instant: Tz-aware datetime to format.
        reference_timezone: IANA identifier whose local time is rendered.
            For an offset group this is the group's first member.

    Returns:
        String shaped YYYY-MM-DDTHH:MM:SS.sss (exactly 23 characters).

    Raises:
        ValueError: If instant is naive.
        InvalidTimezone: If reference_timezone is not a recognized identifier.
    """
    if instant.tzinfo is None:
        raise ValueError(
            f"Cannot format naive datetime {instant}. Provide a tz-aware instant."
        )

    zone = load_zone(reference_timezone)
    parts = _wall_clock_parts(instant.astimezone(zone))
    hour = _normalize_midnight(parts["hour"])
    millis = f"{instant.microsecond // 1000:03d}"

    return (
        f"{parts['year']}-{parts['month']}-{parts['day']}"
        f"T{hour}:{parts['minute']}:{parts['second']}.{millis}"
    )


def format_offset(offset_minutes: int) -> str:
    """Render an offset in minutes as a display label.

    Zero is shown with a plus sign.

    Args:
        offset_minutes: Signed UTC offset in minutes (e.g., 330, -480).

    Returns:
        Label such as "UTC +05:30" or "UTC -08:00".
    """
    sign = "+" if offset_minutes >= 0 else "-"
    hours, minutes = divmod(abs(offset_minutes), 60)
    return f"UTC {sign}{hours:02d}:{minutes:02d}"


def _within_range(dt: datetime, raw: str) -> datetime:
    """Reject instants too close to the datetime limits to format in every zone."""
    if not _EARLIEST_INSTANT <= dt <= _LATEST_INSTANT:
        raise TimestampParseFailure(f"Timestamp out of range: {raw}")
    return dt


def _to_utc(dt: datetime, raw: str) -> datetime:
    """Convert a parsed datetime to UTC; naive values are machine-local time."""
    try:
        # astimezone() on a naive datetime assumes the machine's local zone
        local = dt if dt.tzinfo is not None else dt.astimezone()
        utc = local.astimezone(UTC)
    except (OverflowError, ValueError, OSError) as e:
        raise TimestampParseFailure(f"Timestamp out of range: {raw}") from e
    return _within_range(utc, raw)


def _parse_iso_text(raw: str) -> datetime:
    """Parse ISO-8601 text; date-only is midnight UTC, naive is local time."""
    # Bare digit runs are epoch numbers, not basic-format ISO dates
    if _EPOCH_MILLIS_PATTERN.match(raw):
        raise TimestampParseFailure(f"Not an ISO timestamp: {raw}")
    try:
        dt = datetime.fromisoformat(raw)
    except ValueError as e:
        raise TimestampParseFailure(f"Not an ISO timestamp: {raw}") from e

    if dt.tzinfo is None and _DATE_ONLY_PATTERN.match(raw):
        return _within_range(dt.replace(tzinfo=UTC), raw)
    return _to_utc(dt, raw)


def _parse_rfc2822_text(raw: str) -> datetime:
    """Parse RFC 2822 text such as 'Sun, 01 Jan 2023 00:00:00 GMT'."""
    try:
        dt = parsedate_to_datetime(raw)
    except (TypeError, ValueError, IndexError) as e:
        raise TimestampParseFailure(f"Not an RFC 2822 timestamp: {raw}") from e

    return _to_utc(dt, raw)


def _parse_epoch_millis(raw: str) -> datetime:
    """Parse a base-10 integer of milliseconds since the Unix epoch."""
    if not _EPOCH_MILLIS_PATTERN.match(raw):
        raise TimestampParseFailure(f"Not an integer: {raw}")
    try:
        instant = EPOCH + timedelta(milliseconds=int(raw))
    except (OverflowError, ValueError) as e:
        raise TimestampParseFailure(f"Epoch milliseconds out of range: {raw}") from e
    return _within_range(instant, raw)


# Tried in order; the first strategy that returns wins
TIMESTAMP_PARSERS: tuple[tuple[str, Callable[[str], datetime]], ...] = (
    ("iso", _parse_iso_text),
    ("rfc2822", _parse_rfc2822_text),
    ("epoch_millis", _parse_epoch_millis),
)


def parse_user_timestamp(raw: str | None) -> datetime | None:
    """Best-effort parse of a user-supplied timestamp.

    Tries each strategy in TIMESTAMP_PARSERS and returns the first success.
    Never raises; unparseable input is treated as absent.

    Args:
        raw: Free text (ISO-8601, RFC 2822) or epoch milliseconds.

    Returns:
        Tz-aware UTC datetime, or None for blank/unparseable input.

    Logs:
        - DEBUG: each strategy that rejects the input.
    """
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None

    for name, parser in TIMESTAMP_PARSERS:
        try:
            return parser(text)
        except TimestampParseFailure as e:
            logger.debug("Parser %s rejected %r: %s", name, text, e)
    return None
