# topmark:header:start
#
#   project      : ConfArgs
#   file         : test_resolver.py
#   file_relpath : tests/resolve/test_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Tests for `get_config_arguments` (scan, read, merge)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

from confargs.errors import ConfigFileReadError, SchemaError
from confargs.resolve.resolver import get_config_arguments
from tests.conftest import mark_integration, write_conf
from tests.settings_samples import AppSettings, NumberSettings, TimeoutSettings


@pytest.fixture
def test_conf(tmp_path: Path) -> Path:
    return write_conf(tmp_path, "test.conf", "; test config", "number=1", "verbose=false")


@pytest.fixture
def missing_conf(tmp_path: Path) -> str:
    return str(tmp_path / "i_do_not_exist.conf")


def test_command_line_value_suppresses_file_value(tmp_path: Path) -> None:
    conf = write_conf(tmp_path, "a.conf", "number=1", "verbose=true")
    result = get_config_arguments(NumberSettings, conf, ["--number=5"])
    assert result.args == ("--verbose", "true")
    assert result.config_file == conf
    assert result.observed == frozenset({"number"})
    assert len(result.diagnostics) == 0


def test_short_alias_with_attached_value_suppresses_file_value(tmp_path: Path) -> None:
    conf = write_conf(tmp_path, "test-short.conf", "timeout=200")
    assert get_config_arguments(TimeoutSettings, conf, ["-t10"]).args == ()
    assert get_config_arguments(TimeoutSettings, conf, ["-t 5"]).args == ()
    assert get_config_arguments(TimeoutSettings, conf, []).args == ("--timeout", "200")


def test_missing_file_yields_nothing_and_a_warning(missing_conf: str) -> None:
    result = get_config_arguments(NumberSettings, missing_conf, ["--number=5"])
    assert result.args == ()
    assert len(result) == 0
    assert result.diagnostics.has_warning()
    assert result.config_file == Path(missing_conf)


def test_empty_file_yields_nothing(tmp_path: Path) -> None:
    conf = write_conf(tmp_path, "empty.conf")
    result = get_config_arguments(NumberSettings, conf, [])
    assert result.args == ()
    assert not result.diagnostics.has_warning()


@pytest.mark.parametrize(
    "args",
    [
        ["foo", "--number=5", "-c", "{conf}"],
        ["foo", "--number=5", "--config={conf}"],
        ["foo", "--config={conf}", "--number=5"],
        ["foo", "-c", "{conf}", "--number=5"],
        ["foo", "-c{conf}", "--number=5"],
        ["foo", "-c", "{missing}", "--number=5", "-c", "{conf}"],
    ],
)
def test_config_file_option_overrides_default(
    args: list[str], test_conf: Path, missing_conf: str
) -> None:
    cli_args = [a.format(conf=test_conf, missing=missing_conf) for a in args]
    result = get_config_arguments(AppSettings, missing_conf, cli_args)
    assert list(result) == ["--verbose", "false"]
    assert result.config_file == test_conf


def test_config_file_option_naming_a_missing_file(test_conf: Path, missing_conf: str) -> None:
    result = get_config_arguments(AppSettings, test_conf, ["foo", "--number=5", "-c", missing_conf])
    assert result.args == ()
    assert result.diagnostics.has_warning()


def test_trailing_config_option_uses_default(test_conf: Path) -> None:
    result = get_config_arguments(AppSettings, test_conf, ["-c"])
    assert result.args == ("--number", "1", "--verbose", "false")


def test_positional_noise_is_harmless(tmp_path: Path) -> None:
    @dataclass
    class Flag:
        test: bool = False

    conf = write_conf(tmp_path, "a_default_config.conf", "other=1")
    assert get_config_arguments(Flag, conf, ["foo", "somevalue", "more=a"]).args == ()


def test_strict_mode_raises_for_missing_file(missing_conf: str) -> None:
    with pytest.raises(ConfigFileReadError):
        get_config_arguments(NumberSettings, missing_conf, [], strict=True)


def test_schema_errors_propagate(test_conf: Path) -> None:
    class NotADataclass:
        pass

    with pytest.raises(SchemaError):
        get_config_arguments(NotADataclass, test_conf, [])


@mark_integration
def test_every_call_is_independent(tmp_path: Path) -> None:
    conf_a = write_conf(tmp_path, "a.conf", "number=1")
    conf_b = write_conf(tmp_path, "b.conf", "number=2")
    first = get_config_arguments(AppSettings, conf_a, [])
    second = get_config_arguments(AppSettings, conf_a, ["-c", str(conf_b)])
    assert first.args == ("--number", "1")
    assert second.args == ("--number", "2")
    assert first.observed == frozenset()
