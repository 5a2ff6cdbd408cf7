# topmark:header:start
#
#   project      : ConfArgs
#   file         : reader.py
#   file_relpath : src/confargs/resolve/reader.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Config file reader.

Line grammar (the whole of it):

- empty lines are skipped;
- lines starting with ``;`` are comments;
- lines without ``=`` (such as ``[section]`` headers) are skipped;
- anything else is ``key=value``, split at the first ``=``.

Keys and values are kept verbatim: no whitespace trimming, no quote removal,
no escapes. A key given twice keeps the last value.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from confargs.config.logging import get_logger
from confargs.constants import ASSIGN_CHAR, COMMENT_CHAR
from confargs.errors import ConfigFileReadError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from confargs.config.logging import ConfargsLogger
    from confargs.diagnostics import DiagnosticLog

logger: ConfargsLogger = get_logger(__name__)

FileValueMap = dict[str, str]


def parse_config_lines(lines: Iterable[str]) -> FileValueMap:
    """Parse config file lines into an insertion-ordered key/value map.

    Trailing line terminators are removed; nothing else is.

    Args:
        lines (Iterable[str]): Raw lines, with or without line terminators.

    Returns:
        FileValueMap: Keys in order of first appearance, last value wins.
    """
    values: FileValueMap = {}
    for lineno, raw in enumerate(lines, start=1):
        line: str = raw.rstrip("\r\n")
        if not line or line.startswith(COMMENT_CHAR):
            continue
        key, sep, value = line.partition(ASSIGN_CHAR)
        if not sep:
            logger.trace("Line %d has no %r, skipped: %r", lineno, ASSIGN_CHAR, line)
            continue
        if key in values:
            logger.trace("Line %d: key %r given again, last value wins", lineno, key)
        values[key] = value
    return values


def _read_lines(path: Path) -> list[str]:
    with path.open("r", encoding="utf-8") as fh:
        return list(fh)


def read_config_file(path: str | Path, diagnostics: DiagnosticLog) -> FileValueMap:
    """Read a config file, treating any read problem as an empty file.

    A missing or unreadable file is not an error: a warning is logged and
    recorded in ``diagnostics`` and an empty map is returned.

    Args:
        path (str | Path): Config file path.
        diagnostics (DiagnosticLog): Per-call diagnostic log.

    Returns:
        FileValueMap: Parsed key/value pairs (empty on read problems).
    """
    file_path = Path(path)
    try:
        lines: list[str] = _read_lines(file_path)
    except FileNotFoundError:
        logger.warning("Config file not found: %s", file_path)
        diagnostics.add_warning(f"Config file not found: {file_path}")
        return {}
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read config file %s: %s", file_path, exc)
        diagnostics.add_warning(f"Could not read config file {file_path}: {exc}")
        return {}

    values: FileValueMap = parse_config_lines(lines)
    logger.debug("Read %d value(s) from %s", len(values), file_path)
    return values


def read_config_file_strict(path: str | Path) -> FileValueMap:
    """Read a config file, raising on any read problem.

    Raises:
        ConfigFileReadError: If the file is missing, unreadable or not valid UTF-8.
    """
    file_path = Path(path)
    try:
        lines: list[str] = _read_lines(file_path)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigFileReadError(
            f"Could not read config file {file_path}: {exc}", path=str(file_path)
        ) from exc
    return parse_config_lines(lines)
