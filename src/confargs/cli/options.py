# topmark:header:start
#
#   project      : ConfArgs
#   file         : options.py
#   file_relpath : src/confargs/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Reusable CLI options and their resolution logic.

Keeps commands thin: verbosity, color, and the options shared by every command
that operates on a settings dataclass (``SETTINGS_REF``, ``--config``, the
arguments after ``--``).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from confargs.config.logging import TRACE_LEVEL, get_logger
from confargs.errors import ConfargsUsageError

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


class OutputFormat(str, Enum):
    """Plain or machine-readable output."""

    TEXT = "text"
    JSON = "json"


class DumpFormat(str, Enum):
    """Output formats of the ``dump`` command."""

    TOML = "toml"
    JSON = "json"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        ConfargsUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ConfargsUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds counting -v/--verbose and -q/--quiet options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the --no-color flag to a command."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output.",
    )(f)


def settings_target_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds ``SETTINGS_REF``, ``-c/--config`` and the trailing ``ARGS`` to a command.

    ``ARGS`` are the application's own command-line arguments; put them after
    ``--`` so that they are not taken as options of ``confargs`` itself.
    """
    f = click.argument("app_args", nargs=-1, type=click.UNPROCESSED, metavar="[-- ARGS...]")(f)
    f = click.option(
        "-c",
        "--config",
        "config_file",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        help="Default config file (falls back to the ConfigFile field's default).",
    )(f)
    f = click.argument("settings_ref", metavar="SETTINGS_REF")(f)
    return f
