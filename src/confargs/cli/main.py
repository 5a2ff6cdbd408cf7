# topmark:header:start
#
#   project      : ConfArgs
#   file         : main.py
#   file_relpath : src/confargs/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""ConfArgs command line.

Group-level options are initialized once and placed into ``ctx.obj``:

- ``verbosity_level``: logging level from ``-v``/``-q``;
- ``log_level``: the level actually configured (``CONFARGS_LOG_LEVEL`` wins);
- ``console``: the program-output console.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from confargs.cli.commands.args import args_command
from confargs.cli.commands.dump import dump_command
from confargs.cli.commands.example import example_command
from confargs.cli.commands.version import version_command
from confargs.cli.console import ClickConsole
from confargs.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from confargs.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from confargs.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # The environment overrides the command line for internal logging
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    enable_color: bool = not no_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ConfArgs: reconcile key=value config files with command-line arguments.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the ConfArgs CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(args_command)

cli.add_command(dump_command)

cli.add_command(example_command)

if __name__ == "__main__":
    cli()
