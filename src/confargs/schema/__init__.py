# topmark:header:start
#
#   project      : ConfArgs
#   file         : __init__.py
#   file_relpath : src/confargs/schema/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Settings schema: declaration markers, descriptors and extraction."""

from __future__ import annotations

from confargs.schema.aliases import AliasIndex
from confargs.schema.descriptor import DispatchKind, FieldDescriptor, HandlerRef, Schema
from confargs.schema.extractor import extract_schema
from confargs.schema.markers import (
    ConfigFile,
    Desc,
    Handler,
    OnlyCLI,
    PassThrough,
    Required,
    Section,
    Short,
)

__all__ = [
    "AliasIndex",
    "ConfigFile",
    "Desc",
    "DispatchKind",
    "FieldDescriptor",
    "Handler",
    "HandlerRef",
    "OnlyCLI",
    "PassThrough",
    "Required",
    "Schema",
    "Section",
    "Short",
    "extract_schema",
]
