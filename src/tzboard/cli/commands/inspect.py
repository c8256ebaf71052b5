"""Single-shot commands for formatting instants, offsets and timestamps."""

from __future__ import annotations

from typing import Annotated

import typer

from ...utils.time import (
    epoch_millis,
    format_instant,
    format_offset,
    parse_user_timestamp,
    utc_now,
)
from ..base import get_logger, handle_errors

logger = get_logger(__name__)


def format_command(
    zone: Annotated[str, typer.Argument(help="IANA timezone name (e.g. 'Asia/Kolkata').")],
    at: Annotated[
        str | None,
        typer.Option("--at", help="Instant to format instead of now."),
    ] = None,
) -> None:
    """Print an instant as local ISO 8601 time (milliseconds) in ZONE."""
    with handle_errors("format", logger=logger):
        instant = utc_now()
        if at is not None:
            parsed = parse_user_timestamp(at)
            if parsed is None:
                raise ValueError(f"Not a timestamp: {at!r}")
            instant = parsed
        typer.echo(format_instant(instant, zone))


def offset_command(
    minutes: Annotated[int, typer.Argument(help="Offset from UTC in minutes (e.g. 330, -480).")],
) -> None:
    """Print the display label for an offset in minutes."""
    typer.echo(format_offset(minutes))


def parse_command(
    text: Annotated[str, typer.Argument(help="Timestamp text or epoch milliseconds.")],
) -> None:
    """Parse a timestamp the way the board's --at option does."""
    instant = parse_user_timestamp(text)
    if instant is None:
        typer.secho(f"✗ Not a timestamp: {text!r}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    typer.echo(f"epoch_ms: {epoch_millis(instant)}")
    typer.echo(f"utc: {format_instant(instant, 'Etc/UTC')}")
