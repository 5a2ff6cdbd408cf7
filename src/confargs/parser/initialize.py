# topmark:header:start
#
#   project      : ConfArgs
#   file         : initialize.py
#   file_relpath : src/confargs/parser/initialize.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Parse arguments into a settings instance.

`initialize_settings` normalizes the argument list (see `confargs.parser.tokens`),
runs the generated Click command over it and builds the settings dataclass
from the options that were actually given; fields that were not given keep
their dataclass defaults.

`load_settings` is the one-call entry point: it synthesizes the config file
arguments with `confargs.resolve.get_config_arguments`, prepends them to the
command line and parses the result.

Requesting help is not an error: the outcome has ``help_wanted`` set, the
rendered help in ``help_text`` and no settings. Nothing is printed here.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Generic, TypeVar, get_origin

import click
from click.core import ParameterSource

from confargs.config.logging import get_logger
from confargs.diagnostics import FrozenDiagnosticLog
from confargs.errors import OptionParsingError
from confargs.parser.command import HelpRequested, build_command
from confargs.parser.tokens import normalize_option_tokens
from confargs.resolve.resolver import get_config_arguments
from confargs.schema.extractor import extract_schema

if TYPE_CHECKING:
    from collections.abc import Sequence

    from confargs.config.logging import ConfargsLogger
    from confargs.config.options import ParserOptions
    from confargs.resolve.resolver import ConfigArguments
    from confargs.schema.descriptor import FieldDescriptor, Schema

logger: ConfargsLogger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ParseOutcome(Generic[T]):
    """Result of parsing arguments into a settings instance.

    Attributes:
        settings (T | None): The populated settings, or None when help was requested.
        help_wanted (bool): A help option was given; ``settings`` must not be used.
        help_text (str): The rendered help page when ``help_wanted`` is set.
        remaining (tuple[str, ...]): Positional arguments (and unknown options with
            pass-through) left over after parsing.
        diagnostics (FrozenDiagnosticLog): Problems met while reading the config file.
    """

    settings: T | None = None
    help_wanted: bool = False
    help_text: str = ""
    remaining: tuple[str, ...] = ()
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)


def _prog_name() -> str:
    return Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "settings"


def _failed_option(exc: click.UsageError) -> str | None:
    """Return the option a Click usage error is about, if known."""
    option_name: str | None = getattr(exc, "option_name", None)
    if option_name:
        return option_name
    param: click.Parameter | None = getattr(exc, "param", None)
    if param is not None:
        return param.name
    return None


def _field_value(fd: FieldDescriptor, value: Any) -> Any:
    if fd.handler is None and isinstance(value, tuple):
        # multiple=True yields one list per occurrence
        flat: list[Any] = [item for chunk in value for item in chunk]
        is_tuple: bool = fd.value_type is tuple or get_origin(fd.value_type) is tuple
        return tuple(flat) if is_tuple else flat
    return value


def _collect_values(ctx: click.Context, schema: Schema) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for fd in schema:
        source: ParameterSource | None = ctx.get_parameter_source(fd.name)
        if source is None or source is ParameterSource.DEFAULT:
            continue
        values[fd.name] = _field_value(fd, ctx.params.get(fd.name))
    return values


def initialize_settings(
    settings_type: type[T],
    args: Sequence[str],
    *,
    usage: str = "",
    prog_name: str | None = None,
    options: ParserOptions | None = None,
) -> ParseOutcome[T]:
    """Parse ``args`` into a new ``settings_type`` instance.

    Args:
        settings_type (type[T]): The settings dataclass.
        args (Sequence[str]): Arguments to parse, without the program name.
        usage (str): Text shown at the top of the help page.
        prog_name (str | None): Program name used in the help page.
        options (ParserOptions | None): Parser options; defaults are used if None.

    Returns:
        ParseOutcome[T]: The settings, or the help text if help was requested.

    Raises:
        SchemaError: If the settings dataclass is malformed.
        OptionParsingError: If the arguments cannot be parsed into the settings.
    """
    schema: Schema = extract_schema(settings_type)
    command = build_command(settings_type, usage=usage, options=options)
    argv: list[str] = normalize_option_tokens(args, schema)
    logger.debug("Parsing %s arguments: %s", settings_type.__qualname__, argv)

    try:
        ctx: click.Context = command.make_context(
            prog_name if prog_name is not None else _prog_name(), argv
        )
    except HelpRequested as help_request:
        logger.debug("Help requested for %s", settings_type.__qualname__)
        return ParseOutcome(help_wanted=True, help_text=help_request.help_text)
    except click.UsageError as exc:
        raise OptionParsingError(exc.format_message(), option=_failed_option(exc)) from exc

    with ctx:
        values: dict[str, Any] = _collect_values(ctx, schema)
        remaining: tuple[str, ...] = tuple(ctx.args)

    try:
        settings: T = settings_type(**values)
    except (TypeError, ValueError) as exc:
        raise OptionParsingError(
            f"Cannot build {settings_type.__qualname__} from the given options: {exc}"
        ) from exc

    logger.debug("Resolved settings: %r", settings)
    return ParseOutcome(settings=settings, remaining=remaining)


def load_settings(
    settings_type: type[T],
    args: Sequence[str] | None = None,
    *,
    default_config_file: str | Path,
    usage: str = "",
    prog_name: str | None = None,
    options: ParserOptions | None = None,
    strict: bool = False,
) -> ParseOutcome[T]:
    """Resolve the config file against the command line and parse the result.

    Config file values are placed before the command-line arguments, so the
    command line keeps the last word for every option it supplies.

    Args:
        settings_type (type[T]): The settings dataclass.
        args (Sequence[str] | None): Command-line arguments without the program name;
            ``sys.argv[1:]`` when None.
        default_config_file (str | Path): Config file read unless the command line
            names another one.
        usage (str): Text shown at the top of the help page.
        prog_name (str | None): Program name used in the help page.
        options (ParserOptions | None): Parser options; defaults are used if None.
        strict (bool): Raise `ConfigFileReadError` when the config file cannot be read.

    Returns:
        ParseOutcome[T]: The settings (or help text) plus config file diagnostics.

    Raises:
        SchemaError: If the settings dataclass is malformed.
        OptionParsingError: If the merged arguments cannot be parsed.
        ConfigFileReadError: Only with ``strict=True``.
    """
    cli_args: list[str] = list(sys.argv[1:] if args is None else args)
    config: ConfigArguments = get_config_arguments(
        settings_type, default_config_file, cli_args, strict=strict
    )
    outcome: ParseOutcome[T] = initialize_settings(
        settings_type,
        [*config.args, *cli_args],
        usage=usage,
        prog_name=prog_name,
        options=options,
    )
    return ParseOutcome(
        settings=outcome.settings,
        help_wanted=outcome.help_wanted,
        help_text=outcome.help_text,
        remaining=outcome.remaining,
        diagnostics=config.diagnostics,
    )
