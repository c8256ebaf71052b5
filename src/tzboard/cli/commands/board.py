"""CLI command for the live offset board."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from ...board import build_rows, render_board, run_board
from ...global_config import REFRESH_INTERVAL_MS
from ...utils.time import parse_user_timestamp, utc_now
from ...zones import filter_offsets, group_timezones, pinned_offsets
from ..base import get_logger, handle_errors

logger = get_logger(__name__)


def board_command(
    at: Annotated[
        str | None,
        typer.Option(
            "--at",
            help="Timestamp to compare against (ISO 8601, RFC 2822 or epoch milliseconds).",
        ),
    ] = None,
    query: Annotated[
        str | None,
        typer.Option("-f", "--filter", help="Only show groups whose offset or zone names match."),
    ] = None,
    pinned: Annotated[
        bool,
        typer.Option("--pinned", help="Only show UTC, local and America/Los_Angeles groups."),
    ] = False,
    once: Annotated[
        bool,
        typer.Option("--once", help="Print a single frame and exit."),
    ] = False,
    refresh_ms: Annotated[
        int,
        typer.Option("--refresh-ms", min=1, help="Redraw interval in milliseconds."),
    ] = REFRESH_INTERVAL_MS,
    duration: Annotated[
        float | None,
        typer.Option("--duration", min=0.0, help="Stop after this many seconds."),
    ] = None,
) -> None:
    """Show the current time for every UTC offset in effect worldwide.

    Groups are computed once at startup. Press Ctrl+C to stop the live view.
    """
    console = Console()
    pasted = parse_user_timestamp(at)
    if at and at.strip() and pasted is None:
        logger.warning("Ignoring unparseable timestamp: %r", at)

    with handle_errors("board", logger=logger):
        groups = group_timezones()
        offsets = filter_offsets(groups, query)
        if pinned:
            keep = set(pinned_offsets(groups))
            offsets = [offset for offset in offsets if offset in keep]

        if once:
            now = utc_now()
            rows = build_rows(groups, offsets, now=now, pasted=pasted)
            console.print(render_board(rows, now=now, pasted=pasted, query=query))
            return

        run_board(
            groups,
            offsets=offsets,
            pasted=pasted,
            query=query,
            refresh_ms=refresh_ms,
            duration_s=duration,
            console=console,
        )
