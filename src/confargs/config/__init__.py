# topmark:header:start
#
#   project      : ConfArgs
#   file         : __init__.py
#   file_relpath : src/confargs/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Ambient configuration for ConfArgs itself: logging and parser options."""

from __future__ import annotations

from confargs.config.options import DEFAULT_PARSER_OPTIONS, ParserOptions

__all__ = [
    "DEFAULT_PARSER_OPTIONS",
    "ParserOptions",
]
