# topmark:header:start
#
#   project      : ConfArgs
#   file         : merger.py
#   file_relpath : src/confargs/resolve/merger.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Merge config file values into synthetic command-line arguments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from confargs.config.logging import get_logger
from confargs.constants import LONG_OPTION_PREFIX

if TYPE_CHECKING:
    from collections.abc import Mapping, Set

    from confargs.config.logging import ConfargsLogger
    from confargs.schema.descriptor import Schema

logger: ConfargsLogger = get_logger(__name__)


def merge_config_arguments(
    schema: Schema,
    observed: Set[str],
    file_values: Mapping[str, str],
) -> tuple[str, ...]:
    """Turn config file values into ``--name value`` pairs.

    A file value is emitted only when its key is the canonical name of a field
    that may come from the config file and the command line did not already
    supply that field. File keys are not resolved through aliases.

    Args:
        schema (Schema): Schema of the settings dataclass.
        observed (Set[str]): Canonical names found on the command line.
        file_values (Mapping[str, str]): Parsed config file, in file order.

    Returns:
        tuple[str, ...]: Flattened ``("--name", "value", ...)`` in file order.
    """
    eligible: frozenset[str] = schema.eligible_names
    merged: list[str] = []
    for key, value in file_values.items():
        if key not in eligible:
            field = schema.get(key)
            if field is None:
                logger.trace("Ignoring unknown config key %r", key)
            else:
                logger.trace("Ignoring config key %r: field is command-line only", key)
            continue
        if key in observed:
            logger.trace("Config key %r already given on the command line", key)
            continue
        merged.extend((f"{LONG_OPTION_PREFIX}{key}", value))
    return tuple(merged)
