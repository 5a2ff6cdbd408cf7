# topmark:header:start
#
#   project      : ConfArgs
#   file         : args.py
#   file_relpath : src/confargs/cli/commands/args.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""ConfArgs `args` command.

Prints the arguments the config file contributes for a given command line, one
token per line, in the order they would be prepended to the command line.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import click

from confargs.cli.diagnostics import render_diagnostics
from confargs.cli.options import OutputFormat, settings_target_options
from confargs.cli.refs import default_config_file, load_settings_type
from confargs.parser.params import EnumChoiceParam
from confargs.resolve.resolver import get_config_arguments
from confargs.schema.extractor import extract_schema

if TYPE_CHECKING:
    from confargs.cli.console import ConsoleLike
    from confargs.resolve.resolver import ConfigArguments


@click.command(
    name="args",
    help="Show the arguments the config file adds to a command line.",
)
@settings_target_options
@click.option(
    "--output-format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail if the config file cannot be read.",
)
def args_command(
    *,
    settings_ref: str,
    config_file: str | None,
    app_args: tuple[str, ...],
    output_format: OutputFormat | None = None,
    strict: bool = False,
) -> None:
    """Print the synthesized config file arguments."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    settings_type: type[Any] = load_settings_type(settings_ref)
    filename = default_config_file(extract_schema(settings_type), config_file, app_args)
    result: ConfigArguments = get_config_arguments(
        settings_type, filename, list(app_args), strict=strict
    )

    if output_format == OutputFormat.JSON:
        payload: dict[str, Any] = {
            "config_file": str(result.config_file),
            "args": list(result.args),
            "observed": sorted(result.observed),
            "diagnostics": [
                {"level": d.level.value, "message": d.message} for d in result.diagnostics
            ],
        }
        console.print(json.dumps(payload, indent=2))
        return

    for token in result.args:
        console.print(token)
    verbosity: int = ctx.obj.get("verbosity_level", logging.WARNING)
    render_diagnostics(console, result.diagnostics, verbosity_level=verbosity)
