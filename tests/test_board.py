"""Tests for board rows, rendering and the redraw loop."""

from __future__ import annotations

import io
from datetime import UTC, datetime

import pytest
from rich.console import Console

from tzboard.board import BoardRow, build_rows, render_board, run_board
from tzboard.zones import TimezoneOffsetMap

NEW_YEAR = datetime(2023, 1, 1, tzinfo=UTC)
EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def _render_text(renderable) -> str:
    console = Console(record=True, width=200, file=io.StringIO())
    console.print(renderable)
    return console.export_text()


class TestBuildRows:
    """Tests for build_rows."""

    def test_formats_with_first_member(self, sample_groups: TimezoneOffsetMap) -> None:
        rows = build_rows(sample_groups, [0, 330], now=NEW_YEAR)
        assert rows == [
            BoardRow(
                offset=0,
                label="UTC +00:00",
                live="2023-01-01T00:00:00.000",
                pasted=None,
                members=("Etc/UTC", "Europe/London"),
            ),
            BoardRow(
                offset=330,
                label="UTC +05:30",
                live="2023-01-01T05:30:00.000",
                pasted=None,
                members=("Asia/Kolkata", "Asia/Colombo"),
            ),
        ]

    def test_pasted_instant_formatted_per_group(self, sample_groups: TimezoneOffsetMap) -> None:
        rows = build_rows(sample_groups, [-480, 0], now=NEW_YEAR, pasted=EPOCH)
        assert rows[0].pasted == "1969-12-31T16:00:00.000"
        assert rows[1].pasted == "1970-01-01T00:00:00.000"

    def test_keeps_requested_order(self, sample_groups: TimezoneOffsetMap) -> None:
        rows = build_rows(sample_groups, [330, -480], now=NEW_YEAR)
        assert [r.offset for r in rows] == [330, -480]

    def test_unknown_offsets_ignored(self, sample_groups: TimezoneOffsetMap) -> None:
        rows = build_rows(sample_groups, [0, 999], now=NEW_YEAR)
        assert [r.offset for r in rows] == [0]


class TestRenderBoard:
    """Tests for render_board."""

    def test_table_contents(self, sample_groups: TimezoneOffsetMap) -> None:
        rows = build_rows(sample_groups, [0, 330], now=NEW_YEAR)
        text = _render_text(render_board(rows, now=NEW_YEAR))
        assert "1672531200000" in text
        assert "UTC +05:30" in text
        assert "2023-01-01T05:30:00.000" in text
        assert "Asia/Kolkata, Asia/Colombo" in text
        assert "Entered Time" not in text

    def test_entered_column_when_pasted(self, sample_groups: TimezoneOffsetMap) -> None:
        rows = build_rows(sample_groups, [0], now=NEW_YEAR, pasted=EPOCH)
        text = _render_text(render_board(rows, now=NEW_YEAR, pasted=EPOCH))
        assert "Entered Time" in text
        assert "1970-01-01T00:00:00.000" in text

    def test_empty_state_with_query(self) -> None:
        text = _render_text(render_board([], now=NEW_YEAR, query="atlantis"))
        assert "No timezones match 'atlantis'." in text

    def test_empty_state_without_data(self) -> None:
        text = _render_text(render_board([], now=NEW_YEAR))
        assert "No timezone data available." in text


class TestRunBoard:
    """Tests for run_board."""

    def test_zero_duration_draws_one_frame(self, sample_groups: TimezoneOffsetMap) -> None:
        out = io.StringIO()
        frames = run_board(
            sample_groups,
            offsets=[0],
            duration_s=0,
            console=Console(file=out, width=200),
            clock=lambda: NEW_YEAR,
        )
        assert frames == 1
        assert "2023-01-01T00:00:00.000" in out.getvalue()

    def test_keyboard_interrupt_stops_loop(
        self, monkeypatch: pytest.MonkeyPatch, sample_groups: TimezoneOffsetMap
    ) -> None:
        sleeps = []

        def _sleep(seconds: float) -> None:
            sleeps.append(seconds)
            if len(sleeps) == 3:
                raise KeyboardInterrupt

        monkeypatch.setattr("tzboard.board.time.sleep", _sleep)
        frames = run_board(
            sample_groups,
            offsets=[0, 60],
            refresh_ms=50,
            console=Console(file=io.StringIO(), width=200),
            clock=lambda: NEW_YEAR,
        )
        assert frames == 3
        assert sleeps == [0.05, 0.05, 0.05]

    def test_rejects_non_positive_interval(self, sample_groups: TimezoneOffsetMap) -> None:
        with pytest.raises(ValueError, match="refresh_ms"):
            run_board(sample_groups, offsets=[0], refresh_ms=0)
