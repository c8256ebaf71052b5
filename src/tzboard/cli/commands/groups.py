"""CLI command listing offset groups and their member zones."""

from __future__ import annotations

from typing import Annotated, Any

import typer

from ...utils.time import format_offset
from ...zones import filter_offsets, group_timezones
from ..base import BaseCLI


def groups_command(
    query: Annotated[
        str | None,
        typer.Option("-f", "--filter", help="Only list groups whose offset or zone names match."),
    ] = None,
    members: Annotated[
        bool,
        typer.Option("--members/--no-members", help="Show the zone names in each group."),
    ] = True,
) -> None:
    """List every current UTC offset with the timezones that share it."""
    cli = BaseCLI()

    def _groups() -> dict[str, Any]:
        groups = group_timezones()
        offsets = filter_offsets(groups, query)
        items = [
            {
                "label": format_offset(offset),
                "detail": (
                    ", ".join(groups[offset]) if members
                    else f"{len(groups[offset])} zone(s)"
                ),
            }
            for offset in offsets
        ]
        return {
            "success": True,
            "groups": len(offsets),
            "zones": sum(len(groups[offset]) for offset in offsets),
            "skipped": len(groups.skipped),
            "message": None if offsets else "No groups match the filter.",
            "items": items,
            "failures": [{"item": s.name, "reason": s.reason} for s in groups.skipped],
        }

    cli.handle_cli_operation(operation="groups", op_callable=_groups)
