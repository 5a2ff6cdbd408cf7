# topmark:header:start
#
#   project      : ConfArgs
#   file         : formatting.py
#   file_relpath : src/confargs/utils/formatting.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Render field values as the strings an option parser would accept."""

from __future__ import annotations

import dataclasses
from enum import Enum
from pathlib import PurePath
from typing import Any

from confargs.constants import DEFAULT_ARRAY_SEP


def format_option_value(value: Any, *, array_sep: str = DEFAULT_ARRAY_SEP) -> str:
    """Format a field value as option text.

    - ``bool`` → ``true`` / ``false``
    - ``None`` and ``dataclasses.MISSING`` → empty
    - dataclass instances (structured values) → empty
    - ``Enum`` → its value
    - lists, tuples, sets → items joined with ``array_sep``
    - anything else → ``str(value)``

    Args:
        value (Any): The value to format.
        array_sep (str): Separator for sequence items.

    Returns:
        str: The formatted value.
    """
    if value is None or value is dataclasses.MISSING:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, PurePath):
        return str(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return array_sep.join(format_option_value(v, array_sep=array_sep) for v in value)
    return str(value)
