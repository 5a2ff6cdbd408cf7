# topmark:header:start
#
#   project      : ConfArgs
#   file         : render.py
#   file_relpath : src/confargs/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Render resolved settings as TOML or JSON.

Values are first normalized by `settings_to_dict` (paths and enums become
strings, nested dataclasses become tables, tuples become arrays). TOML has no
`null` value, so `None` entries are stripped before rendering TOML.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from enum import Enum
from pathlib import PurePath
from typing import TYPE_CHECKING, Any, cast

import tomlkit

from confargs.config.logging import get_logger
from confargs.errors import SchemaError
from confargs.schema.extractor import extract_schema

if TYPE_CHECKING:
    from confargs.config.logging import ConfargsLogger
    from confargs.schema.descriptor import Schema

logger: ConfargsLogger = get_logger(__name__)


def _plain_value(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _plain_value(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return _plain_value(value.value)
    if isinstance(value, PurePath):
        return str(value)
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _plain_value(v) for k, v in m.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_plain_value(v) for v in cast("list[object]", list(value))]
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return str(value)


def settings_to_dict(settings: Any) -> dict[str, Any]:
    """Return the fields of a settings instance as plain JSON/TOML-friendly values.

    Args:
        settings (Any): A settings dataclass instance.

    Returns:
        dict[str, Any]: Field name to plain value, in declaration order.

    Raises:
        TypeError: If ``settings`` is not a dataclass instance.
    """
    if not dataclasses.is_dataclass(settings) or isinstance(settings, type):
        raise TypeError(f"Expected a dataclass instance, got {type(settings).__name__}")
    return cast("dict[str, Any]", _plain_value(settings))


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists."""
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[str, object] = cast("Mapping[str, object]", value)
        for k, v in m.items():
            if v is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k)
                continue
            out[k] = _strip_none_for_toml(v)
        return out
    if isinstance(value, list):
        return [_strip_none_for_toml(v) for v in cast("list[object]", value) if v is not None]
    return value


def _check_section_names(schema: Schema) -> None:
    top_level: set[str] = {fd.name for fd in schema if not fd.section}
    for fd in schema:
        if fd.section in top_level:
            raise SchemaError(
                f"Section [{fd.section}] of field '{fd.name}' clashes with the top-level "
                f"field '{fd.section}'",
                field_name=fd.name,
            )


def render_settings_toml(settings: Any, *, sectioned: bool = True) -> str:
    """Render a settings instance as a TOML document.

    Args:
        settings (Any): A settings dataclass instance.
        sectioned (bool): Group fields under their ``[section]`` table. Fields
            without a section stay at the top level.

    Returns:
        str: The TOML document.

    Raises:
        SchemaError: If a section name equals the name of a top-level field.
    """
    cleaned: object = _strip_none_for_toml(settings_to_dict(settings))
    values: dict[str, Any] = cast("dict[str, Any]", cleaned)
    doc: tomlkit.TOMLDocument = tomlkit.document()
    # Top-level keys must precede every table
    nested: dict[str, Any] = {}
    tables: dict[str, Any] = {}

    schema: Schema = extract_schema(type(settings))
    if sectioned:
        _check_section_names(schema)
    for fd in schema:
        if fd.name not in values:
            continue
        value: Any = values[fd.name]
        if not sectioned or not fd.section:
            if isinstance(value, dict):
                nested[fd.name] = value
            else:
                doc.add(fd.name, value)
            continue
        if fd.section not in tables:
            tables[fd.section] = tomlkit.table()
        tables[fd.section].add(fd.name, value)
    for key, value in nested.items():
        doc.add(key, value)
    for section, table in tables.items():
        doc.add(section, table)
    return tomlkit.dumps(doc)


def render_settings_json(settings: Any, *, indent: int = 2) -> str:
    """Render a settings instance as JSON (``None`` kept as ``null``)."""
    return json.dumps(settings_to_dict(settings), indent=indent)
