# topmark:header:start
#
#   project      : ConfArgs
#   file         : test_extractor.py
#   file_relpath : tests/schema/test_extractor.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Tests for schema extraction from annotated settings dataclasses."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated, Optional

import pytest

from confargs.errors import SchemaError
from confargs.schema.descriptor import DispatchKind, FieldDescriptor
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
from tests.settings_samples import (
    AppSettings,
    HandlerSettings,
    MinMax,
    RichSettings,
    min_max_handler,
)


def test_fields_keep_declaration_order() -> None:
    schema = extract_schema(AppSettings)
    assert [f.name for f in schema] == ["config", "number", "verbose", "dry_run"]
    assert len(schema) == 4


def test_markers_are_read() -> None:
    schema = extract_schema(AppSettings)

    config = schema.get("config")
    assert config is not None
    assert config.is_config_file
    assert config.short_aliases == ("c",)
    assert config.description == "Alternative config file"
    assert not config.eligible

    verbose = schema.get("verbose")
    assert verbose is not None
    assert verbose.short_aliases == ("v", "verb")
    assert verbose.value_type is bool
    assert verbose.default is False
    assert verbose.eligible

    dry_run = schema.get("dry_run")
    assert dry_run is not None
    assert dry_run.only_cli
    assert not dry_run.eligible

    assert schema.config_field is config
    assert schema.eligible_names == frozenset({"number", "verbose"})


def test_sections_and_optional_unwrap() -> None:
    schema = extract_schema(RichSettings)

    mode = schema.get("mode")
    assert mode is not None and mode.section == "engine"

    output = schema.get("output")
    assert output is not None
    assert output.value_type is Path
    assert output.optional
    assert output.default is None

    name = schema.get("name")
    assert name is not None and name.section == ""


def test_default_factory_is_evaluated() -> None:
    schema = extract_schema(RichSettings)
    tags = schema.get("tags")
    assert tags is not None
    assert tags.default == ["a", "b"]
    assert tags.has_default


def test_handler_fields_dispatch_to_handler() -> None:
    schema = extract_schema(HandlerSettings)
    min_max = schema.get("minMax")
    assert min_max is not None
    assert min_max.dispatch is DispatchKind.HANDLER
    assert min_max.handler is not None
    assert min_max.handler.func is min_max_handler
    assert min_max.handler("1-2", MinMax()) == MinMax(1, 2)

    app = extract_schema(AppSettings)
    number = app.get("number")
    assert number is not None and number.dispatch is DispatchKind.DIRECT


def test_flag_markers_accept_class_or_instance() -> None:
    @dataclass
    class Flags:
        a: Annotated[str, OnlyCLI()] = ""
        b: Annotated[str, PassThrough] = ""
        c: Annotated[str, Required()] = ""

    schema = extract_schema(Flags)
    a, b, c = schema.fields
    assert a.only_cli and not a.pass_through
    assert b.pass_through
    assert c.required
    assert schema.pass_through


def test_field_without_default_has_missing_default() -> None:
    @dataclass
    class NoDefault:
        host: str

    (host,) = extract_schema(NoDefault).fields
    assert host.default is dataclasses.MISSING
    assert not host.has_default


def test_descriptor_default_is_optional() -> None:
    fd = FieldDescriptor(name="level", value_type=int)
    assert fd.default is dataclasses.MISSING
    assert not fd.has_default
    assert FieldDescriptor(name="level", value_type=int, default=0).has_default


def test_repeated_short_markers_accumulate() -> None:
    @dataclass
    class Repeated:
        level: Annotated[int, Short("l"), Short("lvl,l")] = 0

    (level,) = extract_schema(Repeated).fields
    assert level.short_aliases == ("l", "lvl")
    assert level.identities == ("level", "l", "lvl")


def test_foreign_metadata_is_ignored() -> None:
    @dataclass
    class Foreign:
        x: Annotated[int, "some other library's marker", Desc("X.")] = 1

    (x,) = extract_schema(Foreign).fields
    assert x.description == "X."


def test_schema_is_cached_per_type() -> None:
    assert extract_schema(AppSettings) is extract_schema(AppSettings)


def test_non_init_fields_are_skipped() -> None:
    @dataclass
    class WithComputed:
        a: int = 1
        b: int = field(default=0, init=False)

    assert [f.name for f in extract_schema(WithComputed)] == ["a"]


def test_optional_spelling_is_unwrapped() -> None:
    @dataclass
    class Opt:
        path: Annotated[Optional[str], ConfigFile] = None

    (path,) = extract_schema(Opt).fields
    assert path.value_type is str
    assert path.optional
    assert path.is_config_file


# --- Errors ---


def test_non_dataclass_is_rejected() -> None:
    class Plain:
        number: int = 0

    with pytest.raises(SchemaError, match="must be a dataclass"):
        extract_schema(Plain)


def test_two_config_file_fields_are_rejected() -> None:
    @dataclass
    class TwoConfigs:
        first: Annotated[str, ConfigFile] = "a.conf"
        second: Annotated[str, ConfigFile] = "b.conf"

    with pytest.raises(SchemaError, match="only have one"):
        extract_schema(TwoConfigs)


def test_config_file_field_must_be_a_path_or_string() -> None:
    @dataclass
    class IntConfig:
        config: Annotated[int, ConfigFile] = 0

    with pytest.raises(SchemaError) as excinfo:
        extract_schema(IntConfig)
    assert excinfo.value.field_name == "config"


def test_alias_collision_is_rejected() -> None:
    @dataclass
    class Collide:
        verbose: Annotated[bool, Short("v")] = False
        version: Annotated[bool, Short("v")] = False

    with pytest.raises(SchemaError, match="already claimed"):
        extract_schema(Collide)


def test_alias_equal_to_other_field_name_is_rejected() -> None:
    @dataclass
    class Collide:
        number: int = 0
        count: Annotated[int, Short("number")] = 0

    with pytest.raises(SchemaError, match="'number'"):
        extract_schema(Collide)


@pytest.mark.parametrize("alias", ["-x", "a=b", "with space"])
def test_malformed_alias_is_rejected(alias: str) -> None:
    bad = dataclasses.make_dataclass(
        "Bad", [("value", Annotated[int, Short(alias)], field(default=0))]
    )

    with pytest.raises(SchemaError, match="Alias"):
        extract_schema(bad)


def test_bad_handler_is_reported_at_extraction() -> None:
    @dataclass
    class BadHandler:
        value: Annotated[int, Handler(min_max_handler)] = 0

    with pytest.raises(SchemaError, match="min_max_handler"):
        extract_schema(BadHandler)


def test_two_handlers_are_rejected() -> None:
    @dataclass
    class TwoHandlers:
        value: Annotated[MinMax, Handler(min_max_handler), Handler(min_max_handler)] = field(
            default_factory=MinMax
        )

    with pytest.raises(SchemaError, match="more than one Handler"):
        extract_schema(TwoHandlers)


def test_section_marker_is_per_field() -> None:
    @dataclass
    class Sections:
        a: Annotated[int, Section("one")] = 0
        b: int = 0

    a, b = extract_schema(Sections).fields
    assert a.section == "one"
    assert b.section == ""
