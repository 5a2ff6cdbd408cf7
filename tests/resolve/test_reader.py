# topmark:header:start
#
#   project      : ConfArgs
#   file         : test_reader.py
#   file_relpath : tests/resolve/test_reader.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Tests for the config file reader."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from confargs.diagnostics import DiagnosticLevel, DiagnosticLog
from confargs.errors import ConfigFileReadError
from confargs.exit_codes import ExitCode
from confargs.resolve.reader import parse_config_lines, read_config_file, read_config_file_strict
from tests.conftest import write_conf

if TYPE_CHECKING:
    from pathlib import Path


def test_grammar() -> None:
    lines = [
        "; a comment",
        "",
        "number=5",
        "[section]",
        "no equals sign here",
        "verbose=true",
        "url=http://x/?a=b",
        " spaced = value ",
        "empty=",
    ]
    assert parse_config_lines(lines) == {
        "number": "5",
        "verbose": "true",
        "url": "http://x/?a=b",
        " spaced ": " value ",
        "empty": "",
    }


def test_only_leading_semicolon_is_a_comment() -> None:
    assert parse_config_lines(["  ;x=1", "y=2;3"]) == {"  ;x": "1", "y": "2;3"}


def test_last_duplicate_wins_and_keeps_first_position() -> None:
    values = parse_config_lines(["a=1", "b=2", "a=3"])
    assert values == {"a": "3", "b": "2"}
    assert list(values) == ["a", "b"]


def test_line_terminators_are_stripped() -> None:
    assert parse_config_lines(["a=1\r\n", "b=2\n", "\n"]) == {"a": "1", "b": "2"}


def test_empty_input() -> None:
    assert parse_config_lines([]) == {}


def test_read_config_file(tmp_path: Path) -> None:
    path = write_conf(tmp_path, "test.conf", "; header", "number=42", "verbose=false")
    diagnostics = DiagnosticLog()
    assert read_config_file(path, diagnostics) == {"number": "42", "verbose": "false"}
    assert len(diagnostics) == 0


def test_read_config_file_accepts_str_paths(tmp_path: Path) -> None:
    path = write_conf(tmp_path, "test.conf", "a=b")
    assert read_config_file(str(path), DiagnosticLog()) == {"a": "b"}


def test_missing_file_is_empty_with_warning(tmp_path: Path) -> None:
    diagnostics = DiagnosticLog()
    assert read_config_file(tmp_path / "i_do_not_exist.conf", diagnostics) == {}
    assert diagnostics.stats().n_warning == 1
    (diag,) = list(diagnostics)
    assert diag.level is DiagnosticLevel.WARNING
    assert "i_do_not_exist.conf" in diag.message


def test_directory_is_empty_with_warning(tmp_path: Path) -> None:
    diagnostics = DiagnosticLog()
    assert read_config_file(tmp_path, diagnostics) == {}
    assert diagnostics.freeze().has_warning()


def test_invalid_utf8_is_empty_with_warning(tmp_path: Path) -> None:
    path = tmp_path / "latin1.conf"
    path.write_bytes(b"name=caf\xe9\n")
    diagnostics = DiagnosticLog()
    assert read_config_file(path, diagnostics) == {}
    assert diagnostics.stats().n_warning == 1


def test_strict_reader_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigFileReadError) as excinfo:
        read_config_file_strict(tmp_path / "missing.conf")
    assert excinfo.value.exit_code == ExitCode.IO_ERROR
    assert excinfo.value.path is not None and excinfo.value.path.endswith("missing.conf")
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_strict_reader_reads(tmp_path: Path) -> None:
    path = write_conf(tmp_path, "ok.conf", "a=1")
    assert read_config_file_strict(path) == {"a": "1"}
