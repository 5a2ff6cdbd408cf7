# topmark:header:start
#
#   project      : ConfArgs
#   file         : scanner.py
#   file_relpath : src/confargs/resolve/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Command-line token scanner.

The scanner does not parse values. It only finds out which fields the command
line already supplies (so the config file must not override them) and whether
the config-file option was given.

Recognized token forms:

- ``--ident`` / ``--ident=value``
- ``-ident`` / ``-ident=value`` (registered identities, usually multi-character aliases)
- ``-Xvalue`` where ``X`` is a registered single-character alias (``-t10``)
- ``--`` ends option scanning

A value given as a separate token (``--ident value``) is not examined, except
for the config-file option, whose next token is the file name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from confargs.config.logging import get_logger
from confargs.constants import ASSIGN_CHAR, END_OF_OPTIONS, LONG_OPTION_PREFIX, OPTION_CHAR

if TYPE_CHECKING:
    from collections.abc import Iterable

    from confargs.config.logging import ConfargsLogger
    from confargs.schema.descriptor import Schema

logger: ConfargsLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of scanning the command line.

    Attributes:
        observed (frozenset[str]): Canonical names of fields supplied on the command line.
            Unregistered identities are recorded verbatim.
        config_file (str | None): Config file named on the command line (last one wins),
            or None when the default applies.
    """

    observed: frozenset[str] = frozenset()
    config_file: str | None = None


class _Token(NamedTuple):
    identity: str
    value: str | None


def _classify(token: str, schema: Schema) -> _Token | None:
    """Split an option token into its identity and inline value.

    Returns None for tokens that are not options (positionals, ``-``).
    """
    if token.startswith(LONG_OPTION_PREFIX):
        if len(token) <= len(LONG_OPTION_PREFIX):
            return None
        ident, sep, value = token[len(LONG_OPTION_PREFIX) :].partition(ASSIGN_CHAR)
        return _Token(ident, value if sep else None)

    if token.startswith(OPTION_CHAR) and len(token) > 1:
        body: str = token[1:]
        ident, sep, value = body.partition(ASSIGN_CHAR)
        if ident in schema.aliases:
            return _Token(ident, value if sep else None)
        short: str = body[0]
        if short in schema.aliases:
            # Single-character alias with the value attached: -t10
            return _Token(short, body[1:])
        return _Token(ident, value if sep else None)

    return None


def scan_cli_args(args: Iterable[str], schema: Schema) -> ScanResult:
    """Scan command-line tokens for supplied fields and the config-file override.

    Args:
        args (Iterable[str]): Command-line tokens, without the program name.
        schema (Schema): Schema of the settings dataclass.

    Returns:
        ScanResult: Observed canonical names and the config-file override, if any.
    """
    config_field: str | None = schema.config_field.name if schema.config_field else None
    observed: set[str] = set()
    config_file: str | None = None
    expect_config_value: bool = False

    for token in args:
        if expect_config_value:
            config_file = token
            expect_config_value = False
            continue
        if token == END_OF_OPTIONS:
            break

        parsed: _Token | None = _classify(token, schema)
        if parsed is None:
            continue

        field_name: str = schema.aliases.resolve(parsed.identity) or parsed.identity
        observed.add(field_name)
        logger.trace("Token %r -> field %r (inline value: %r)", token, field_name, parsed.value)

        if field_name == config_field:
            if parsed.value is not None:
                config_file = parsed.value
            else:
                expect_config_value = True

    if expect_config_value:
        logger.debug("Config file option given without a value; using the default")

    return ScanResult(observed=frozenset(observed), config_file=config_file)
