# topmark:header:start
#
#   project      : ConfArgs
#   file         : constants.py
#   file_relpath : src/confargs/constants.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""ConfArgs Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    CONFARGS_VERSION: str = get_version("confargs")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    CONFARGS_VERSION = "0.0.0"

# Command-line token syntax
OPTION_CHAR: Final[str] = "-"
LONG_OPTION_PREFIX: Final[str] = OPTION_CHAR * 2
ASSIGN_CHAR: Final[str] = "="
END_OF_OPTIONS: Final[str] = "--"

# Config file line grammar
COMMENT_CHAR: Final[str] = ";"

# Separators accepted between alternatives in a single `Short(...)` marker
ALIAS_SEPARATORS: Final[tuple[str, ...]] = ("|", ",")

# Separator between list items in a single option value
DEFAULT_ARRAY_SEP: Final[str] = ","

# Width used when wrapping descriptions in example config files
EXAMPLE_WRAP_WIDTH: Final[int] = 80

ENV_LOG_LEVEL: Final[str] = "CONFARGS_LOG_LEVEL"
