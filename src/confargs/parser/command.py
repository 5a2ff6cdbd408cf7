# topmark:header:start
#
#   project      : ConfArgs
#   file         : command.py
#   file_relpath : src/confargs/parser/command.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Build a `click.Command` from a settings schema.

Each field becomes one `click.Option`:

- the parameter name is the field name (case preserved);
- the long form is ``--name``;
- single-character aliases become ``-x``, longer aliases ``-alias``.

Value types map to Click types (``bool``, ``int``, ``float``, ``str``, ``Path``,
``Enum``, ``list[T]`` and ``tuple[T, ...]``). Fields with a handler use
`HandlerParamType` whatever their type. Other types are rejected with a
`SchemaError`.

Boolean options take an optional value: ``--verbose`` alone means ``true``,
``--verbose false`` or ``--verbose=false`` sets it explicitly. This is also the
form the config file merge produces (``--verbose true``). `confargs.parser.tokens`
keeps a bare ``--verbose`` from consuming a following positional argument.

The command never sets Click defaults: options that are not given are left to
the dataclass defaults when the settings instance is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, get_args, get_origin

import click

from confargs.config.logging import get_logger
from confargs.config.options import resolve_parser_options
from confargs.constants import LONG_OPTION_PREFIX, OPTION_CHAR
from confargs.errors import SchemaError
from confargs.parser.params import EnumChoiceParam, HandlerParamType, SeparatedListParamType
from confargs.schema.descriptor import DispatchKind
from confargs.schema.extractor import extract_schema
from confargs.utils.formatting import format_option_value
from confargs.utils.introspection import type_display_name

if TYPE_CHECKING:
    from confargs.config.logging import ConfargsLogger
    from confargs.config.options import ParserOptions
    from confargs.schema.descriptor import FieldDescriptor, Schema

logger: ConfargsLogger = get_logger(__name__)

HELP_PARAM_NAME: str = "confargs_help"

_SCALAR_TYPES: dict[type[Any], click.ParamType] = {
    bool: click.BOOL,
    int: click.INT,
    float: click.FLOAT,
    str: click.STRING,
}


class HelpRequested(Exception):
    """Raised by the generated help option instead of printing and exiting.

    Attributes:
        help_text (str): The rendered help page.
    """

    def __init__(self, help_text: str) -> None:
        super().__init__("help requested")
        self.help_text = help_text


@dataclass(frozen=True, slots=True)
class _OptionSpec:
    param_type: click.ParamType
    multiple: bool = False
    optional_value: bool = False


class SettingsCommand(click.Command):
    """Click command whose help page groups options by settings section."""

    def __init__(self, *args: Any, sections: dict[str, str] | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.sections: dict[str, str] = dict(sections or {})

    def format_options(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Write one options block per section, in declaration order."""
        groups: dict[str, list[tuple[str, str]]] = {}
        for param in self.get_params(ctx):
            record: tuple[str, str] | None = param.get_help_record(ctx)
            if record is None:
                continue
            section: str = self.sections.get(param.name or "", "")
            groups.setdefault(section, []).append(record)

        for section, records in groups.items():
            title: str = f"Options [{section}]" if section else "Options"
            with formatter.section(title):
                formatter.write_dl(records)


def _scalar_type(tp: Any, field_name: str) -> click.ParamType:
    if isinstance(tp, type):
        if issubclass(tp, Enum):
            return EnumChoiceParam(tp)
        if issubclass(tp, Path):
            return click.Path(path_type=Path)
        # bool before int: bool is an int subclass
        for scalar, param_type in _SCALAR_TYPES.items():
            if issubclass(tp, scalar):
                return param_type
    raise SchemaError(
        f"Field {field_name!r} has unsupported type {type_display_name(tp)}; "
        "declare a Handler to convert it",
        field_name=field_name,
    )


def _option_spec(fd: FieldDescriptor, options: ParserOptions) -> _OptionSpec:
    """Map a field to its Click parameter type."""
    if fd.dispatch is DispatchKind.HANDLER and fd.handler is not None:
        return _OptionSpec(HandlerParamType(fd.handler, fd.default))

    origin: Any = get_origin(fd.value_type)
    if fd.value_type in (list, tuple) or origin in (list, tuple):
        args: tuple[Any, ...] = get_args(fd.value_type)
        if origin is tuple and args and not (len(args) == 2 and args[1] is Ellipsis):
            raise SchemaError(
                f"Field {fd.name!r}: only variable-length tuples (tuple[T, ...]) are supported",
                field_name=fd.name,
            )
        item_type: Any = args[0] if args else str
        return _OptionSpec(
            SeparatedListParamType(_scalar_type(item_type, fd.name), options.array_sep),
            multiple=True,
        )

    param_type: click.ParamType = _scalar_type(fd.value_type, fd.name)
    return _OptionSpec(param_type, optional_value=param_type is click.BOOL)


def option_decls(fd: FieldDescriptor) -> list[str]:
    """Return the Click declarations for a field: name, ``--name`` and aliases."""
    decls: list[str] = [fd.name, f"{LONG_OPTION_PREFIX}{fd.name}"]
    decls.extend(f"{OPTION_CHAR}{alias}" for alias in fd.short_aliases)
    return decls


def option_help(fd: FieldDescriptor, options: ParserOptions) -> str:
    """Return ``"<description> Default: <value>"`` for a field."""
    if not fd.has_default:
        return fd.description
    default: str = format_option_value(fd.default, array_sep=options.array_sep)
    return f"{fd.description} Default: {default}".strip()


def _build_option(fd: FieldDescriptor, options: ParserOptions) -> click.Option:
    decls: list[str] = option_decls(fd)
    clashes: list[str] = [d for d in decls[1:] if d in options.help_option_names]
    if clashes:
        raise SchemaError(
            f"Field {fd.name!r}: option {clashes[0]!r} collides with the help option",
            field_name=fd.name,
        )

    spec: _OptionSpec = _option_spec(fd, options)
    required: bool = (fd.required or not fd.has_default) and not fd.pass_through
    kwargs: dict[str, Any] = {
        "type": spec.param_type,
        "multiple": spec.multiple,
        "required": required,
        "help": option_help(fd, options),
    }
    if spec.optional_value:
        kwargs.update(is_flag=False, flag_value=True)
    logger.trace("Option %s: %s", decls, kwargs)
    return click.Option(decls, **kwargs)


def _help_callback(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if value and not ctx.resilient_parsing:
        raise HelpRequested(ctx.get_help())


def build_command(
    settings_type: type[Any],
    *,
    usage: str = "",
    options: ParserOptions | None = None,
) -> SettingsCommand:
    """Build the Click command parsing options into ``settings_type`` fields.

    Args:
        settings_type (type[Any]): The settings dataclass.
        usage (str): Text shown at the top of the help page.
        options (ParserOptions | None): Parser options; defaults are used if None.

    Returns:
        SettingsCommand: A command without callback, meant for ``make_context``.

    Raises:
        SchemaError: If a field type is unsupported or an option collides with help.
    """
    opts: ParserOptions = resolve_parser_options(options)
    schema: Schema = extract_schema(settings_type)

    params: list[click.Parameter] = [_build_option(fd, opts) for fd in schema]
    params.append(
        click.Option(
            [HELP_PARAM_NAME, *opts.help_option_names],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=_help_callback,
            help="Show this message and exit.",
        )
    )

    context_settings: dict[str, Any] = {
        "allow_extra_args": True,
        "ignore_unknown_options": schema.pass_through,
    }
    return SettingsCommand(
        name=settings_type.__name__.lower(),
        params=params,
        help=usage or None,
        add_help_option=False,
        context_settings=context_settings,
        sections={fd.name: fd.section for fd in schema},
    )
