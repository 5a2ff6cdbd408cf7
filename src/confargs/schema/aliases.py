# topmark:header:start
#
#   project      : ConfArgs
#   file         : aliases.py
#   file_relpath : src/confargs/schema/aliases.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Alias index: identity string to owning field name.

Every canonical field name and every short alias is registered. An identity
claimed by two different fields is rejected with a `SchemaError` when the
index is built; there is no "last registration wins".
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from confargs.config.logging import get_logger
from confargs.constants import ALIAS_SEPARATORS, ASSIGN_CHAR, OPTION_CHAR
from confargs.errors import SchemaError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from confargs.config.logging import ConfargsLogger
    from confargs.schema.descriptor import FieldDescriptor

logger: ConfargsLogger = get_logger(__name__)


def split_alias_spec(spec: str) -> list[str]:
    """Split a `Short` marker value into its individual alternatives.

    ``"v|verb"`` and ``"v,verb"`` both yield ``["v", "verb"]``. Empty
    alternatives are dropped.

    Args:
        spec (str): Raw marker value.

    Returns:
        list[str]: The alternatives in declaration order.
    """
    parts: list[str] = [spec]
    for sep in ALIAS_SEPARATORS:
        parts = [piece for part in parts for piece in part.split(sep)]
    return [p for p in parts if p]


def validate_identity(identity: str, *, field_name: str) -> None:
    """Reject identities that could never be matched on the command line.

    Raises:
        SchemaError: If the identity starts with ``-``, or contains ``=`` or whitespace.
    """
    if identity.startswith(OPTION_CHAR):
        raise SchemaError(
            f"Alias {identity!r} of field {field_name!r} must not start with {OPTION_CHAR!r}",
            field_name=field_name,
        )
    if ASSIGN_CHAR in identity or any(ch.isspace() for ch in identity):
        raise SchemaError(
            f"Alias {identity!r} of field {field_name!r} must not contain "
            f"{ASSIGN_CHAR!r} or whitespace",
            field_name=field_name,
        )


class AliasIndex(Mapping[str, str]):
    """Immutable mapping from identity (canonical name or alias) to field name."""

    __slots__ = ("_map",)

    def __init__(self, mapping: Mapping[str, str]) -> None:
        self._map: Mapping[str, str] = MappingProxyType(dict(mapping))

    @classmethod
    def from_fields(cls, fields: Iterable[FieldDescriptor]) -> AliasIndex:
        """Build the index from field descriptors.

        Args:
            fields (Iterable[FieldDescriptor]): Descriptors in declaration order.

        Returns:
            AliasIndex: The populated, immutable index.

        Raises:
            SchemaError: If two fields claim the same identity.
        """
        registered: dict[str, str] = {}
        for fd in fields:
            for identity in fd.identities:
                owner: str | None = registered.get(identity)
                if owner is not None and owner != fd.name:
                    raise SchemaError(
                        f"Identity {identity!r} of field {fd.name!r} is already "
                        f"claimed by field {owner!r}",
                        field_name=fd.name,
                    )
                registered[identity] = fd.name
        logger.trace("Alias index: %s", registered)
        return cls(registered)

    def resolve(self, identity: str) -> str | None:
        """Return the field name owning ``identity``, or None if unknown."""
        return self._map.get(identity)

    def __getitem__(self, identity: str) -> str:
        return self._map[identity]

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"AliasIndex({dict(self._map)!r})"
