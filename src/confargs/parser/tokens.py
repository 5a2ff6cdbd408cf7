# topmark:header:start
#
#   project      : ConfArgs
#   file         : tokens.py
#   file_relpath : src/confargs/parser/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Rewrite argument tokens into spellings Click parses unambiguously.

Two option forms accepted on the command line have no direct Click equivalent:

- ``-x=value`` for a single-character alias. Click reads the value attached to a
  short option verbatim, so the ``=`` would become part of it. The token is
  split into ``-x value``.
- a bare boolean option followed by a non-boolean token (``--verbose input.txt``).
  Boolean options take an optional value, and Click would consume the next
  token as that value. The next token is consumed only when it is a boolean
  literal (``--verbose false``); otherwise the option is folded to
  ``--verbose=true`` and the token stays positional.

Tokens after ``--`` are left alone, as are unknown options and the values of
options that take one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from confargs.config.logging import get_logger
from confargs.constants import ASSIGN_CHAR, END_OF_OPTIONS, LONG_OPTION_PREFIX
from confargs.parser.command import option_decls
from confargs.schema.descriptor import DispatchKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from confargs.config.logging import ConfargsLogger
    from confargs.schema.descriptor import FieldDescriptor, Schema

logger: ConfargsLogger = get_logger(__name__)

# Values accepted by click.BOOL
BOOL_LITERALS: Final[frozenset[str]] = frozenset(
    {"1", "0", "true", "false", "t", "f", "yes", "no", "y", "n", "on", "off"}
)


def _is_bool_option(fd: FieldDescriptor) -> bool:
    return fd.dispatch is DispatchKind.DIRECT and fd.value_type is bool


def _is_short(spelling: str) -> bool:
    return len(spelling) == 2 and not spelling.startswith(LONG_OPTION_PREFIX)


def _with_value(spelling: str, value: str) -> str:
    # Click splits "--name=value" and "-alias=value", but not "-x=value"
    return f"{spelling}{value}" if _is_short(spelling) else f"{spelling}{ASSIGN_CHAR}{value}"


def normalize_option_tokens(args: Sequence[str], schema: Schema) -> list[str]:
    """Return ``args`` with short ``=`` values split and bare boolean options folded.

    Args:
        args (Sequence[str]): Arguments without the program name.
        schema (Schema): Schema of the settings the arguments are parsed into.

    Returns:
        list[str]: The rewritten arguments.
    """
    spellings: dict[str, FieldDescriptor] = {}
    for fd in schema:
        # option_decls()[0] is the bare parameter name
        spellings.update((decl, fd) for decl in option_decls(fd)[1:])

    tokens: list[str] = list(args)
    out: list[str] = []
    i: int = 0
    while i < len(tokens):
        token: str = tokens[i]
        i += 1
        if token == END_OF_OPTIONS:
            out.append(token)
            out.extend(tokens[i:])
            break

        spelling, sep, value = token.partition(ASSIGN_CHAR)
        fd: FieldDescriptor | None = spellings.get(spelling)
        if fd is None:
            out.append(token)
            continue

        if sep:
            if _is_short(spelling):
                out.extend((spelling, value))
            else:
                out.append(token)
            continue

        if _is_bool_option(fd):
            following: str | None = tokens[i] if i < len(tokens) else None
            if following is not None and following.lower() in BOOL_LITERALS:
                out.append(_with_value(spelling, following))
                i += 1
            else:
                out.append(_with_value(spelling, "true"))
            continue

        # The next token is this option's value, whatever it looks like
        out.append(token)
        if i < len(tokens):
            out.append(tokens[i])
            i += 1

    if out != tokens:
        logger.trace("Normalized arguments: %s -> %s", tokens, out)
    return out
