from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime

import pytest

from tzboard.zones import TimezoneOffsetMap, reset_timezone_groups_cache


@pytest.fixture(autouse=True)
def app_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Forces test mode. Application code can use this to refuse dangerous behaviors.
    Automatically applied to all tests.
    """
    monkeypatch.setenv("APP_ENV", "test")


@pytest.fixture(autouse=True)
def fresh_timezone_groups() -> Iterator[None]:
    """
    Every test starts and ends without a memoized grouping, so patched zone
    lists never leak between tests.
    """
    reset_timezone_groups_cache()
    yield
    reset_timezone_groups_cache()


@pytest.fixture
def winter_instant() -> datetime:
    """Mid-January reference instant (northern winter, southern summer)."""
    return datetime(2023, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def summer_instant() -> datetime:
    """Mid-July reference instant (northern summer)."""
    return datetime(2023, 7, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def fixed_offset_zones() -> list[str]:
    """
    Zones whose offsets never change: three at UTC, two at +01:00.
    Etc/GMT-1 is UTC+1 (POSIX sign convention); Africa/Lagos has no DST.
    """
    return ["Etc/UTC", "UTC", "Etc/GMT", "Etc/GMT-1", "Africa/Lagos"]


@pytest.fixture
def sample_groups() -> TimezoneOffsetMap:
    """A small hand-built grouping for view and board tests."""
    return TimezoneOffsetMap(
        groups={
            -480: ("America/Los_Angeles", "America/Tijuana"),
            0: ("Etc/UTC", "Europe/London"),
            60: ("Europe/Paris",),
            330: ("Asia/Kolkata", "Asia/Colombo"),
        }
    )
