from __future__ import annotations

import logging
from typing import Annotated

import typer

from .base import configure_logging, set_log_level
from .commands.board import board_command
from .commands.groups import groups_command
from .commands.inspect import format_command, offset_command, parse_command

configure_logging()
app = typer.Typer(
    help="Current time at every UTC offset in effect worldwide",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Log debug messages (grouping summary, parse attempts)."),
    ] = False,
) -> None:
    """Show the current time for each UTC offset and the zones sharing it."""
    if verbose:
        set_log_level(logging.DEBUG)


app.command("board")(board_command)
app.command("groups")(groups_command)
app.command("format")(format_command)
# Negative offsets such as -480 must not be read as options
app.command("offset", context_settings={"ignore_unknown_options": True})(offset_command)
app.command("parse")(parse_command)


def main() -> None:
    """Main entry point for package CLI.

    Invokes the Typer application, which handles command parsing and
    execution.

    Side Effects:
        - Processes CLI arguments and executes commands.
        - May exit with non-zero code on errors.
    """
    app()


if __name__ == "__main__":
    main()
