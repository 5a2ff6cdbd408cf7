# topmark:header:start
#
#   project      : ConfArgs
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""CLI test helpers for running ConfArgs in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so relative config file names (such as the
default of a ``ConfigFile`` field) resolve inside the temporary directory.

The CLI reconfigures logging on every run; both helpers restore the test
logging setup afterwards so later tests never log to a closed runner stream.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Sequence

from click.testing import CliRunner, Result

from confargs.cli.main import cli
from confargs.config import logging
from confargs.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["version"]``.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    try:
        return runner.invoke(cli, argv)
    finally:
        logging.setup_logging(level=logging.TRACE_LEVEL)


def run_cli_in(tmp_path: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv)
    finally:
        os.chdir(cwd)


def assert_SUCCESS(result: Result) -> None:  # pylint: disable=invalid-name
    """Assert that the CLI run succeeded, showing its output otherwise."""
    assert result.exit_code == ExitCode.SUCCESS, result.output
