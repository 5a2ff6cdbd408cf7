# topmark:header:start
#
#   project      : ConfArgs
#   file         : test_aliases.py
#   file_relpath : tests/schema/test_aliases.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Tests for alias splitting and the alias index."""

from __future__ import annotations

import pytest

from confargs.errors import SchemaError
from confargs.schema.aliases import AliasIndex, split_alias_spec, validate_identity
from confargs.schema.descriptor import FieldDescriptor
from confargs.schema.extractor import extract_schema
from tests.settings_samples import AppSettings


@pytest.mark.parametrize(
    ("spec", "expected"),
    [
        ("v", ["v"]),
        ("v|verb", ["v", "verb"]),
        ("v,verb", ["v", "verb"]),
        ("v|verb,vb", ["v", "verb", "vb"]),
        ("v||", ["v"]),
        ("", []),
    ],
)
def test_split_alias_spec(spec: str, expected: list[str]) -> None:
    assert split_alias_spec(spec) == expected


def test_index_resolves_names_and_aliases() -> None:
    index = extract_schema(AppSettings).aliases
    assert index.resolve("verbose") == "verbose"
    assert index.resolve("v") == "verbose"
    assert index.resolve("verb") == "verbose"
    assert index.resolve("c") == "config"
    assert index.resolve("nope") is None
    assert "dry_run" in index
    assert len(index) == 7


def test_index_is_read_only() -> None:
    index = extract_schema(AppSettings).aliases
    with pytest.raises(TypeError):
        index["x"] = "y"  # type: ignore[index]


def test_same_field_may_repeat_an_identity() -> None:
    fields = [FieldDescriptor(name="level", value_type=int, short_aliases=("level",))]
    assert dict(AliasIndex.from_fields(fields)) == {"level": "level"}


def test_cross_field_claim_is_rejected() -> None:
    fields = [
        FieldDescriptor(name="alpha", value_type=int, short_aliases=("a",)),
        FieldDescriptor(name="beta", value_type=int, short_aliases=("a",)),
    ]
    with pytest.raises(SchemaError) as excinfo:
        AliasIndex.from_fields(fields)
    assert excinfo.value.field_name == "beta"


def test_validate_identity_accepts_plain_names() -> None:
    validate_identity("timeout", field_name="timeout")
    validate_identity("t", field_name="timeout")
