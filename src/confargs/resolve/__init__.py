# topmark:header:start
#
#   project      : ConfArgs
#   file         : __init__.py
#   file_relpath : src/confargs/resolve/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Reconciliation of config file values with the command line."""

from __future__ import annotations

from confargs.resolve.merger import merge_config_arguments
from confargs.resolve.reader import (
    FileValueMap,
    parse_config_lines,
    read_config_file,
    read_config_file_strict,
)
from confargs.resolve.resolver import ConfigArguments, get_config_arguments
from confargs.resolve.scanner import ScanResult, scan_cli_args

__all__ = [
    "ConfigArguments",
    "FileValueMap",
    "ScanResult",
    "get_config_arguments",
    "merge_config_arguments",
    "parse_config_lines",
    "read_config_file",
    "read_config_file_strict",
    "scan_cli_args",
]
