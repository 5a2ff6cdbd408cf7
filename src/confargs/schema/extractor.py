# topmark:header:start
#
#   project      : ConfArgs
#   file         : extractor.py
#   file_relpath : src/confargs/schema/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Schema extraction from annotated settings dataclasses.

`extract_schema` walks the fields of a dataclass in declaration order, reads
the `confargs.schema.markers` found in each field's ``Annotated`` metadata and
produces an immutable `Schema`. All schema-level checks happen here, once:

- more than one `ConfigFile` field;
- a `ConfigFile` field that is not a ``str`` or ``Path``;
- handler shape mismatches (see `confargs.schema.handlers`);
- identities claimed by more than one field (see `confargs.schema.aliases`).

Every violation raises `SchemaError`. Results are cached per settings type.
"""

from __future__ import annotations

import dataclasses
import functools
from pathlib import Path
from typing import TYPE_CHECKING, Any

from confargs.config.logging import get_logger
from confargs.errors import SchemaError
from confargs.schema.aliases import AliasIndex, split_alias_spec, validate_identity
from confargs.schema.descriptor import FieldDescriptor, Schema
from confargs.schema.handlers import validate_handler
from confargs.schema.markers import (
    FLAG_MARKERS,
    ConfigFile,
    Desc,
    Handler,
    OnlyCLI,
    PassThrough,
    Required,
    Section,
    Short,
    is_flag_marker,
)
from confargs.utils.introspection import resolve_type_hints, strip_annotated, unwrap_optional

if TYPE_CHECKING:
    from confargs.config.logging import ConfargsLogger

logger: ConfargsLogger = get_logger(__name__)


def _field_default(f: dataclasses.Field[Any]) -> Any:
    """Return the field's default, evaluating ``default_factory`` if needed."""
    if f.default is not dataclasses.MISSING:
        return f.default
    if f.default_factory is not dataclasses.MISSING:
        return f.default_factory()
    return dataclasses.MISSING


def _annotated_metadata(tp: Any) -> tuple[Any, ...]:
    """Return the metadata of an ``Annotated`` type (empty for plain types)."""
    return tuple(getattr(tp, "__metadata__", ()))


def _build_descriptor(f: dataclasses.Field[Any], hint: Any) -> FieldDescriptor:
    metadata: tuple[Any, ...] = _annotated_metadata(hint)
    declared: Any = strip_annotated(hint)
    value_type, optional = unwrap_optional(declared)

    section: str = ""
    description: str = ""
    aliases: list[str] = []
    handler_marker: Handler | None = None
    flags: set[type[Any]] = set()

    for meta in metadata:
        if isinstance(meta, Section):
            section = meta.name
        elif isinstance(meta, Desc):
            description = meta.text
        elif isinstance(meta, Short):
            aliases.extend(a for a in split_alias_spec(meta.names) if a not in aliases)
        elif isinstance(meta, Handler):
            if handler_marker is not None:
                raise SchemaError(
                    f"Field {f.name!r} declares more than one Handler", field_name=f.name
                )
            handler_marker = meta
        else:
            # Foreign Annotated metadata (other libraries) is ignored.
            flags.update(m for m in FLAG_MARKERS if is_flag_marker(meta, m))

    for alias in aliases:
        validate_identity(alias, field_name=f.name)

    handler = None
    if handler_marker is not None:
        handler = validate_handler(
            handler_marker.func,
            field_name=f.name,
            field_type=value_type,
            declared_type=declared,
        )

    is_config_file: bool = ConfigFile in flags
    if is_config_file and value_type not in (str, Path):
        raise SchemaError(
            f"ConfigFile field {f.name!r} must be a str or Path, got {value_type!r}",
            field_name=f.name,
        )

    return FieldDescriptor(
        name=f.name,
        value_type=value_type,
        default=_field_default(f),
        section=section,
        description=description,
        short_aliases=tuple(aliases),
        only_cli=OnlyCLI in flags,
        is_config_file=is_config_file,
        pass_through=PassThrough in flags,
        required=Required in flags,
        handler=handler,
        optional=optional,
    )


@functools.lru_cache(maxsize=None)
def extract_schema(settings_type: type[Any]) -> Schema:
    """Extract the normalized schema of a settings dataclass.

    Args:
        settings_type (type[Any]): A dataclass whose fields may carry
            ``Annotated`` markers.

    Returns:
        Schema: Field descriptors in declaration order, plus the alias index.

    Raises:
        SchemaError: If ``settings_type`` is not a dataclass or the schema is malformed.
    """
    if not (isinstance(settings_type, type) and dataclasses.is_dataclass(settings_type)):
        raise SchemaError(f"Settings type must be a dataclass, got {settings_type!r}")

    hints: dict[str, Any] = resolve_type_hints(settings_type)
    descriptors: list[FieldDescriptor] = []
    for f in dataclasses.fields(settings_type):
        if not f.init:
            # Fields excluded from __init__ cannot be set from options
            logger.trace("Skipping non-init field %s.%s", settings_type.__name__, f.name)
            continue
        hint: Any = hints.get(f.name, f.type)
        if isinstance(hint, str):
            raise SchemaError(
                f"Cannot resolve the type annotation of field {f.name!r}: {hint!r}",
                field_name=f.name,
            )
        descriptors.append(_build_descriptor(f, hint))

    config_fields: list[str] = [d.name for d in descriptors if d.is_config_file]
    if len(config_fields) > 1:
        raise SchemaError(
            "Can only have one settings field with the 'ConfigFile' marker, "
            f"got {len(config_fields)}: {', '.join(config_fields)}"
        )

    fields: tuple[FieldDescriptor, ...] = tuple(descriptors)
    schema = Schema(
        settings_type=settings_type,
        fields=fields,
        aliases=AliasIndex.from_fields(fields),
    )
    logger.debug(
        "Extracted schema for %s: %d field(s), config field: %s",
        settings_type.__qualname__,
        len(fields),
        schema.config_field.name if schema.config_field else None,
    )
    return schema
