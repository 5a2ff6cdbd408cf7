# topmark:header:start
#
#   project      : ConfArgs
#   file         : descriptor.py
#   file_relpath : src/confargs/schema/descriptor.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Normalized schema descriptors.

A `FieldDescriptor` is the flat, immutable view of one settings field and the
markers declared on it. A `Schema` is the ordered tuple of descriptors for one
settings dataclass plus its alias index. Both are produced by
`confargs.schema.extractor.extract_schema` and never mutated afterwards.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from confargs.schema.aliases import AliasIndex


class DispatchKind(str, Enum):
    """How the option parser stores a parsed value into the field."""

    DIRECT = "direct"
    HANDLER = "handler"


@dataclass(frozen=True, slots=True)
class HandlerRef:
    """Validated reference to a custom handler.

    Attributes:
        func (Callable[[str, Any], Any]): The handler, called as ``func(raw, current)``.
        field_name (str): Name of the field the handler computes.
        field_type (Any): The field's value type the handler must return.
    """

    func: Callable[[str, Any], Any]
    field_name: str
    field_type: Any

    def __call__(self, raw: str, current: Any) -> Any:
        return self.func(raw, current)


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Normalized metadata for one settings field.

    Attributes:
        name (str): Canonical field name; also the long option name and the config file key.
        value_type (Any): Field type with ``Annotated`` metadata stripped and
            ``Optional`` unwrapped.
        default (Any): Default value, or ``dataclasses.MISSING`` if the field has none.
        section (str): Section name (empty for the global section).
        description (str): Human description.
        short_aliases (tuple[str, ...]): Alternative identities, in declaration order.
        only_cli (bool): Never read from the config file.
        is_config_file (bool): This field names the config file.
        pass_through (bool): Unknown options are passed through by the option parser.
        required (bool): The option parser fails when the option is missing.
        handler (HandlerRef | None): Custom handler, if declared.
        optional (bool): The declared type admits ``None``.
    """

    name: str
    value_type: Any
    default: Any = field(default_factory=lambda: dataclasses.MISSING)
    section: str = ""
    description: str = ""
    short_aliases: tuple[str, ...] = ()
    only_cli: bool = False
    is_config_file: bool = False
    pass_through: bool = False
    required: bool = False
    handler: HandlerRef | None = None
    optional: bool = False

    @property
    def dispatch(self) -> DispatchKind:
        """Return the closed two-case dispatch for this field."""
        return DispatchKind.HANDLER if self.handler is not None else DispatchKind.DIRECT

    @property
    def eligible(self) -> bool:
        """Return True when the field may receive values from the config file."""
        return not self.only_cli and not self.is_config_file

    @property
    def identities(self) -> tuple[str, ...]:
        """Return the canonical name followed by every short alias."""
        return (self.name, *self.short_aliases)

    @property
    def has_default(self) -> bool:
        """Return True if the dataclass declares a default for this field."""
        return self.default is not dataclasses.MISSING


@dataclass(frozen=True, slots=True)
class Schema:
    """Ordered field descriptors of one settings dataclass.

    Attributes:
        settings_type (type[Any]): The dataclass the schema was extracted from.
        fields (tuple[FieldDescriptor, ...]): Descriptors in declaration order.
        aliases (AliasIndex): Identity lookup built from ``fields``.
    """

    settings_type: type[Any]
    fields: tuple[FieldDescriptor, ...]
    aliases: AliasIndex

    @property
    def config_field(self) -> FieldDescriptor | None:
        """Return the field marked `ConfigFile`, if any."""
        return next((f for f in self.fields if f.is_config_file), None)

    @property
    def eligible_names(self) -> frozenset[str]:
        """Return the names of fields that may receive config file values."""
        return frozenset(f.name for f in self.fields if f.eligible)

    @property
    def pass_through(self) -> bool:
        """Return True if any field asks for unknown options to be passed through."""
        return any(f.pass_through for f in self.fields)

    def get(self, name: str) -> FieldDescriptor | None:
        """Return the descriptor named ``name``, or None."""
        return next((f for f in self.fields if f.name == name), None)

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)
