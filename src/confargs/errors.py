# topmark:header:start
#
#   project      : ConfArgs
#   file         : errors.py
#   file_relpath : src/confargs/errors.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Exceptions for ConfArgs.

Taxonomy:
    - `SchemaError`: the settings dataclass is malformed (duplicate config-file
      field, alias collision, bad handler shape, unsupported field type). This is
      a programming mistake and is raised as soon as the schema is extracted.
    - `OptionParsingError`: the merged argument list could not be parsed (bad
      value, missing required option, handler failure). "Help requested" is
      *not* an error; see `confargs.parser.ParseOutcome.help_wanted`.
    - `ConfigFileReadError`: only raised by strict readers. The default
      resolution path records a diagnostic and carries on with an empty file.
    - `ConfargsUsageError`: misuse of the `confargs` command line.

Styling:
    All errors derive from `click.ClickException`, so the CLI prints them and exits
    with the class' `exit_code`. Library callers catch them as ordinary exceptions.
    Inside the CLI, errors prefer the project console if available (see `show()`).
"""

from __future__ import annotations

from typing import IO, Any

import click

from confargs.exit_codes import ExitCode


class ConfargsError(click.ClickException):
    """Base class for all ConfArgs errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class SchemaError(ConfargsError):
    """Error for malformed settings schemas (raised at schema construction)."""

    exit_code = ExitCode.SOFTWARE_ERROR

    def __init__(self, message: str, *, field_name: str | None = None) -> None:
        super().__init__(message)
        self.field_name = field_name


class OptionParsingError(ConfargsError):
    """Error raised when the option parser rejects the merged argument list."""

    exit_code = ExitCode.USAGE_ERROR

    def __init__(self, message: str, *, option: str | None = None) -> None:
        super().__init__(message)
        self.option = option


class ConfigFileReadError(ConfargsError):
    """Error for config files that exist but cannot be read (strict mode only)."""

    exit_code = ExitCode.IO_ERROR

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfargsUsageError(ConfargsError):
    """Error for command-line invocation errors of the `confargs` tool."""

    exit_code = ExitCode.USAGE_ERROR
