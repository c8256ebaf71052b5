"""Tests for sorted, pinned and filtered offset views."""

from __future__ import annotations

import pytest

from tzboard.zones import TimezoneOffsetMap, filter_offsets, pinned_offsets, sorted_offsets


def test_sorted_offsets(sample_groups: TimezoneOffsetMap) -> None:
    assert sorted_offsets(sample_groups) == [-480, 0, 60, 330]


class TestPinnedOffsets:
    """Tests for pinned_offsets."""

    def test_utc_local_and_los_angeles(self, sample_groups: TimezoneOffsetMap) -> None:
        assert pinned_offsets(sample_groups, local_offset=330) == [-480, 0, 330]

    def test_local_offset_deduplicated(self, sample_groups: TimezoneOffsetMap) -> None:
        assert pinned_offsets(sample_groups, local_offset=0) == [-480, 0]

    def test_local_offset_missing_from_groups(self, sample_groups: TimezoneOffsetMap) -> None:
        assert pinned_offsets(sample_groups, local_offset=765) == [-480, 0]

    def test_utc_alias_counts_as_utc(self) -> None:
        groups = TimezoneOffsetMap(groups={0: ("GMT",), 540: ("Asia/Tokyo",)})
        assert pinned_offsets(groups, local_offset=540) == [0, 540]

    def test_defaults_to_machine_offset(
        self, monkeypatch: pytest.MonkeyPatch, sample_groups: TimezoneOffsetMap
    ) -> None:
        monkeypatch.setattr("tzboard.zones.views.local_offset_minutes", lambda: 60)
        assert pinned_offsets(sample_groups) == [-480, 0, 60]

    def test_pinned_zone_found_by_membership(self) -> None:
        groups = TimezoneOffsetMap(
            groups={-420: ("America/Phoenix", "America/Los_Angeles"), 0: ("Etc/UTC",)}
        )
        assert groups.offset_of("America/Los_Angeles") == -420
        assert pinned_offsets(groups, local_offset=0) == [-420, 0]

    def test_empty_groups(self) -> None:
        assert pinned_offsets(TimezoneOffsetMap(groups={}), local_offset=0) == []


class TestFilterOffsets:
    """Tests for filter_offsets."""

    @pytest.mark.parametrize("query", [None, "", "   "])
    def test_blank_query_returns_all(
        self, sample_groups: TimezoneOffsetMap, query: str | None
    ) -> None:
        assert filter_offsets(sample_groups, query) == [-480, 0, 60, 330]

    def test_matches_member_name_case_insensitive(self, sample_groups: TimezoneOffsetMap) -> None:
        assert filter_offsets(sample_groups, "KOLK") == [330]

    def test_matches_any_member(self, sample_groups: TimezoneOffsetMap) -> None:
        assert filter_offsets(sample_groups, "tijuana") == [-480]

    def test_matches_offset_label(self, sample_groups: TimezoneOffsetMap) -> None:
        assert filter_offsets(sample_groups, "+05:30") == [330]
        assert filter_offsets(sample_groups, "utc -08") == [-480]

    def test_shared_substring_matches_several(self, sample_groups: TimezoneOffsetMap) -> None:
        assert filter_offsets(sample_groups, "europe/") == [0, 60]

    def test_no_match(self, sample_groups: TimezoneOffsetMap) -> None:
        assert filter_offsets(sample_groups, "atlantis") == []
