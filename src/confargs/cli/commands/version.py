# topmark:header:start
#
#   project      : ConfArgs
#   file         : version.py
#   file_relpath : src/confargs/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""ConfArgs `version` command.

Prints the current ConfArgs version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from confargs.cli.options import OutputFormat
from confargs.constants import CONFARGS_VERSION
from confargs.parser.params import EnumChoiceParam

if TYPE_CHECKING:
    from confargs.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ConfArgs.",
)
@click.option(
    "--output-format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of ConfArgs."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": CONFARGS_VERSION}))
    else:
        console.print(console.styled(CONFARGS_VERSION, bold=True))
