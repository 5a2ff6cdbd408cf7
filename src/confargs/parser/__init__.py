# topmark:header:start
#
#   project      : ConfArgs
#   file         : __init__.py
#   file_relpath : src/confargs/parser/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Click-based option parsing of settings dataclasses."""

from __future__ import annotations

from confargs.parser.command import SettingsCommand, build_command
from confargs.parser.initialize import ParseOutcome, initialize_settings, load_settings
from confargs.parser.params import EnumChoiceParam, HandlerParamType, SeparatedListParamType

__all__ = [
    "EnumChoiceParam",
    "HandlerParamType",
    "ParseOutcome",
    "SeparatedListParamType",
    "SettingsCommand",
    "build_command",
    "initialize_settings",
    "load_settings",
]
