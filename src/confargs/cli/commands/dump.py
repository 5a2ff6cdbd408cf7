# topmark:header:start
#
#   project      : ConfArgs
#   file         : dump.py
#   file_relpath : src/confargs/cli/commands/dump.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""ConfArgs `dump` command.

Resolves the config file against the given application arguments, parses the
result into the settings dataclass and prints the settings as TOML (default) or
JSON. ``-- --help`` prints the help page generated for the settings instead.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import click

from confargs.cli.diagnostics import render_diagnostics
from confargs.cli.options import DumpFormat, settings_target_options
from confargs.cli.refs import default_config_file, load_settings_type
from confargs.io.render import render_settings_json, render_settings_toml
from confargs.parser.initialize import load_settings
from confargs.parser.params import EnumChoiceParam
from confargs.schema.extractor import extract_schema

if TYPE_CHECKING:
    from confargs.cli.console import ConsoleLike
    from confargs.parser.initialize import ParseOutcome


@click.command(
    name="dump",
    help="Resolve and print the settings for an application command line.",
)
@settings_target_options
@click.option(
    "--output-format",
    "output_format",
    type=EnumChoiceParam(DumpFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in DumpFormat)}).",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail if the config file cannot be read.",
)
def dump_command(
    *,
    settings_ref: str,
    config_file: str | None,
    app_args: tuple[str, ...],
    output_format: DumpFormat | None = None,
    strict: bool = False,
) -> None:
    """Print the fully resolved settings."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    settings_type: type[Any] = load_settings_type(settings_ref)
    filename = default_config_file(extract_schema(settings_type), config_file, app_args)
    outcome: ParseOutcome[Any] = load_settings(
        settings_type,
        list(app_args),
        default_config_file=filename,
        prog_name=settings_type.__name__.lower(),
        strict=strict,
    )

    if outcome.help_wanted:
        console.print(outcome.help_text)
        return

    verbosity: int = ctx.obj.get("verbosity_level", logging.WARNING)
    render_diagnostics(console, outcome.diagnostics, verbosity_level=verbosity)

    fmt: DumpFormat = output_format or DumpFormat.TOML
    if fmt == DumpFormat.JSON:
        console.print(render_settings_json(outcome.settings))
    else:
        console.print(render_settings_toml(outcome.settings), nl=False)

    if outcome.remaining:
        console.warn(f"Unused arguments: {' '.join(outcome.remaining)}")
