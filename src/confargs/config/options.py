# topmark:header:start
#
#   project      : ConfArgs
#   file         : options.py
#   file_relpath : src/confargs/config/options.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Explicit parser configuration.

`ParserOptions` is threaded through the scanner, the option parser adapter and
the example writer. There is no process-wide mutable default: callers that do
not pass options get the immutable `DEFAULT_PARSER_OPTIONS` instance.
"""

from __future__ import annotations

from dataclasses import dataclass

from confargs.constants import DEFAULT_ARRAY_SEP


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Options controlling how option values are split and how help is requested.

    Attributes:
        array_sep (str): Separator between list items inside one option value
            (``--names a,b,c``). Also used to join list defaults in help and
            example output.
        help_option_names (tuple[str, ...]): Option spellings that request help.
            Field names and aliases may not collide with these.
    """

    array_sep: str = DEFAULT_ARRAY_SEP
    help_option_names: tuple[str, ...] = ("-h", "--help")

    def __post_init__(self) -> None:
        if not self.array_sep:
            raise ValueError("array_sep must not be empty")


DEFAULT_PARSER_OPTIONS: ParserOptions = ParserOptions()


def resolve_parser_options(options: ParserOptions | None) -> ParserOptions:
    """Return ``options`` or the shared immutable defaults."""
    return options if options is not None else DEFAULT_PARSER_OPTIONS
