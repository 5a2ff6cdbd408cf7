# topmark:header:start
#
#   project      : ConfArgs
#   file         : example.py
#   file_relpath : src/confargs/cli/commands/example.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""ConfArgs `example` command.

Prints (or writes) an annotated example config file for a settings dataclass.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from confargs.cli.refs import load_settings_type
from confargs.io.example import render_example_config, write_example_config_file

if TYPE_CHECKING:
    from pathlib import Path

    from confargs.cli.console import ConsoleLike


@click.command(
    name="example",
    help="Generate an example config file for a settings dataclass.",
)
@click.argument("settings_ref", metavar="SETTINGS_REF")
@click.option(
    "-o",
    "--output",
    "output",
    type=click.Path(dir_okay=False, writable=True, path_type=str),
    default=None,
    help="Write to FILE instead of standard output.",
)
def example_command(*, settings_ref: str, output: str | None = None) -> None:
    """Print or write the example config file."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    settings_type: type[Any] = load_settings_type(settings_ref)
    if output is None:
        console.print(render_example_config(settings_type), nl=False)
        return

    written: Path = write_example_config_file(settings_type, output)
    console.print(console.styled(f"Wrote example config file: {written}", bold=True))
