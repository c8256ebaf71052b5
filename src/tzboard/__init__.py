"""
tzboard core package.

Shows the current time at every UTC offset in effect worldwide:
- Offset grouping of all IANA zones (`tzboard.zones`)
- Fixed-width local time formatting and timestamp parsing (`tzboard.utils.time`)
- A rich-based live board and a Typer CLI (`tzboard.board`, `tzboard.cli`)

Configuration:
- Shared, project-wide constants live in `tzboard.global_config`.
"""
