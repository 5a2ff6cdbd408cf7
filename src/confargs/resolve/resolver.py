# topmark:header:start
#
#   project      : ConfArgs
#   file         : resolver.py
#   file_relpath : src/confargs/resolve/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Config file / command line reconciliation.

`get_config_arguments` runs the whole pre-parsing pipeline:

1. extract (or fetch the cached) schema of the settings dataclass;
2. scan the command line for supplied fields and a config-file override;
3. read the chosen config file (a missing file counts as empty);
4. synthesize ``--name value`` pairs for the file values the command line
   does not supply.

The result is meant to be *prepended* to the real command line before the
option parser runs, so that command-line values win for options the parser
accumulates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from confargs.config.logging import get_logger
from confargs.diagnostics import DiagnosticLog, FrozenDiagnosticLog
from confargs.resolve.merger import merge_config_arguments
from confargs.resolve.reader import read_config_file, read_config_file_strict
from confargs.resolve.scanner import scan_cli_args
from confargs.schema.extractor import extract_schema

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from confargs.config.logging import ConfargsLogger
    from confargs.resolve.reader import FileValueMap
    from confargs.resolve.scanner import ScanResult
    from confargs.schema.descriptor import Schema

logger: ConfargsLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ConfigArguments:
    """Synthesized arguments plus where they came from.

    Attributes:
        args (tuple[str, ...]): Flattened ``--name value`` pairs, in config file order.
        config_file (Path): The config file that was consulted.
        observed (frozenset[str]): Fields the command line already supplies.
        diagnostics (FrozenDiagnosticLog): Problems met while reading the file.
    """

    args: tuple[str, ...]
    config_file: Path
    observed: frozenset[str] = frozenset()
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    def __iter__(self) -> Iterator[str]:
        return iter(self.args)

    def __len__(self) -> int:
        return len(self.args)


def get_config_arguments(
    settings_type: type[Any],
    filename: str | Path,
    args: Sequence[str],
    *,
    strict: bool = False,
) -> ConfigArguments:
    """Return the config file values the command line does not override.

    Args:
        settings_type (type[Any]): The settings dataclass.
        filename (str | Path): Default config file, used unless the command line
            names another one.
        args (Sequence[str]): Command-line tokens, without the program name.
        strict (bool): Raise instead of recording a diagnostic when the config
            file cannot be read.

    Returns:
        ConfigArguments: The synthesized arguments and their provenance.

    Raises:
        SchemaError: If the settings dataclass is malformed.
        ConfigFileReadError: Only with ``strict=True``, if the file cannot be read.
    """
    schema: Schema = extract_schema(settings_type)
    scan: ScanResult = scan_cli_args(args, schema)

    config_path = Path(scan.config_file if scan.config_file is not None else filename)
    if scan.config_file is not None:
        logger.debug("Config file overridden on the command line: %s", config_path)

    diagnostics = DiagnosticLog()
    file_values: FileValueMap
    if strict:
        file_values = read_config_file_strict(config_path)
    else:
        file_values = read_config_file(config_path, diagnostics)

    merged: tuple[str, ...] = merge_config_arguments(schema, scan.observed, file_values)
    logger.debug("Config file arguments: %s", list(merged))

    return ConfigArguments(
        args=merged,
        config_file=config_path,
        observed=scan.observed,
        diagnostics=diagnostics.freeze(),
    )
