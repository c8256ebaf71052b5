"""Terminal board: one row per offset group, redrawn on a fixed tick."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime

from rich.console import Console, Group
from rich.live import Live
from rich.table import Table
from rich.text import Text

from .global_config import REFRESH_INTERVAL_MS
from .utils.time import epoch_millis, format_instant, format_offset, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardRow:
    """One rendered offset group.

    Attributes:
        offset: UTC offset in minutes.
        label: Offset label (e.g. "UTC +05:30").
        live: Current time in the group's local wall clock.
        pasted: Entered time in the group's local wall clock, if any.
        members: Zone names sharing the offset.
    """

    offset: int
    label: str
    live: str
    pasted: str | None
    members: tuple[str, ...]


def build_rows(
    groups: Mapping[int, Sequence[str]],
    offsets: Sequence[int],
    *,
    now: datetime,
    pasted: datetime | None = None,
) -> list[BoardRow]:
    """Format each requested offset group for display.

    The first member of a group stands in for the whole group when
    formatting; all members share its offset at the grouping instant.

    Args:
        groups: Offset grouping.
        offsets: Offsets to render, in display order. Unknown or empty
            offsets are ignored.
        now: Live instant to format.
        pasted: Optional user-entered instant to format alongside.

    Returns:
        One BoardRow per rendered offset.
    """
    rows = []
    for offset in offsets:
        members = tuple(groups.get(offset, ()))
        if not members:
            continue
        reference = members[0]
        rows.append(
            BoardRow(
                offset=offset,
                label=format_offset(offset),
                live=format_instant(now, reference),
                pasted=format_instant(pasted, reference) if pasted is not None else None,
                members=members,
            )
        )
    return rows


def render_board(
    rows: Sequence[BoardRow],
    *,
    now: datetime,
    pasted: datetime | None = None,
    query: str | None = None,
) -> Group:
    """Build the renderable for one frame of the board."""
    header = Text.assemble(
        ("Current Epoch Time  ", "bold"),
        (str(epoch_millis(now)), "bold cyan"),
    )
    if pasted is not None:
        header.append("   Entered  ", style="bold")
        header.append(str(epoch_millis(pasted)), style="bold yellow")

    if not rows:
        message = (
            f"No timezones match '{query}'." if query and query.strip()
            else "No timezone data available."
        )
        return Group(header, Text(message, style="yellow"))

    table = Table(expand=True, show_lines=False)
    table.add_column("Offset", style="white", no_wrap=True)
    table.add_column("ISO 8601 Time", style="cyan", justify="center", no_wrap=True)
    if pasted is not None:
        table.add_column("Entered Time", style="yellow", justify="center", no_wrap=True)
    table.add_column("Timezone Names", style="dim", justify="right", ratio=1)

    for row in rows:
        names = ", ".join(row.members)
        if pasted is not None:
            table.add_row(row.label, row.live, row.pasted or "", names)
        else:
            table.add_row(row.label, row.live, names)

    return Group(header, table)


def run_board(
    groups: Mapping[int, Sequence[str]],
    *,
    offsets: Sequence[int],
    pasted: datetime | None = None,
    query: str | None = None,
    refresh_ms: int = REFRESH_INTERVAL_MS,
    duration_s: float | None = None,
    console: Console | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> int:
    """Redraw the board every ``refresh_ms`` until interrupted.

    Args:
        groups: Offset grouping, built once by the caller.
        offsets: Offsets to show, in display order.
        pasted: Optional user-entered instant shown in its own column.
        query: Filter text, used for the empty-state message.
        refresh_ms: Redraw interval in milliseconds (must be positive).
        duration_s: Stop after this many seconds; None runs until Ctrl+C.
        console: Rich Console to draw on.
        clock: Source of the live instant.

    Returns:
        Number of frames drawn.

    Raises:
        ValueError: If refresh_ms is not positive.
    """
    if refresh_ms <= 0:
        raise ValueError(f"refresh_ms must be positive, got {refresh_ms}")

    console = console or Console()
    interval = refresh_ms / 1000

    def _frame() -> Group:
        now = clock()
        rows = build_rows(groups, offsets, now=now, pasted=pasted)
        return render_board(rows, now=now, pasted=pasted, query=query)

    frames = 1
    started = time.monotonic()
    with Live(_frame(), console=console, auto_refresh=False) as live:
        try:
            while duration_s is None or time.monotonic() - started < duration_s:
                time.sleep(interval)
                live.update(_frame(), refresh=True)
                frames += 1
        except KeyboardInterrupt:
            logger.debug("Board interrupted after %d frames", frames)
    return frames
