# topmark:header:start
#
#   project      : ConfArgs
#   file         : test_scanner.py
#   file_relpath : tests/resolve/test_scanner.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Tests for the command-line token scanner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

import pytest

from confargs.resolve.scanner import ScanResult, scan_cli_args
from confargs.schema.extractor import extract_schema
from confargs.schema.markers import Short
from tests.settings_samples import AppSettings, NumberSettings, TimeoutSettings


@dataclass
class BareVersusShort:
    """``-tx`` must select ``texture`` rather than ``t`` with value ``x``."""

    threads: Annotated[int, Short("t")] = 1
    texture: Annotated[str, Short("tx")] = ""


def _scan(settings_type: type, args: list[str]) -> ScanResult:
    return scan_cli_args(args, extract_schema(settings_type))


@pytest.mark.parametrize(
    "args",
    [
        ["--number=5"],
        ["--number", "5"],
        ["-number=5"],
        ["prog", "--number=5"],
    ],
)
def test_long_forms_are_observed(args: list[str]) -> None:
    assert _scan(NumberSettings, args).observed == frozenset({"number"})


@pytest.mark.parametrize("args", [["-t10"], ["-t", "10"], ["-t 5"], ["-t=10"], ["--timeout=3"]])
def test_short_forms_resolve_to_the_canonical_name(args: list[str]) -> None:
    assert _scan(TimeoutSettings, args).observed == frozenset({"timeout"})


@pytest.mark.parametrize("args", [["-v"], ["-verb"], ["--verb"], ["-verb=false"], ["--verbose"]])
def test_every_alias_marks_the_field(args: list[str]) -> None:
    assert _scan(AppSettings, args).observed == frozenset({"verbose"})


def test_bare_form_wins_over_combined_short_alias() -> None:
    assert _scan(BareVersusShort, ["-tx"]).observed == frozenset({"texture"})
    assert _scan(BareVersusShort, ["-t4"]).observed == frozenset({"threads"})


def test_positionals_and_lone_dash_are_ignored() -> None:
    result = _scan(AppSettings, ["foo", "somevalue", "more=a", "-"])
    assert result == ScanResult(observed=frozenset(), config_file=None)


def test_unknown_options_are_recorded_verbatim() -> None:
    assert _scan(NumberSettings, ["--zzz=1", "-q"]).observed == frozenset({"zzz", "q"})


def test_scanning_stops_at_end_of_options() -> None:
    result = _scan(AppSettings, ["--number=5", "--", "--verbose", "-c", "x.conf"])
    assert result.observed == frozenset({"number"})
    assert result.config_file is None


@pytest.mark.parametrize(
    "args",
    [
        ["-c", "x.conf"],
        ["--config", "x.conf"],
        ["--config=x.conf"],
        ["-c=x.conf"],
        ["-cx.conf"],
        ["--number=5", "-c", "x.conf"],
        ["-c", "x.conf", "--number=5"],
    ],
)
def test_config_file_override(args: list[str]) -> None:
    result = _scan(AppSettings, args)
    assert result.config_file == "x.conf"
    assert "config" in result.observed


def test_last_config_file_option_wins() -> None:
    args = ["-c", "first.conf", "--number=5", "--config=second.conf", "-cthird.conf"]
    assert _scan(AppSettings, args).config_file == "third.conf"


def test_combined_short_config_then_separate_form() -> None:
    assert _scan(AppSettings, ["-cfirst.conf", "-c", "second.conf"]).config_file == "second.conf"


def test_trailing_config_option_leaves_override_unset() -> None:
    result = _scan(AppSettings, ["--number=5", "-c"])
    assert result.config_file is None
    assert "config" in result.observed


def test_config_value_is_taken_verbatim() -> None:
    # The token after the config option is the file name, even if it looks like an option
    assert _scan(AppSettings, ["-c", "--number=5"]).config_file == "--number=5"
    assert _scan(AppSettings, ["-c", "--number=5"]).observed == frozenset({"config"})


def test_empty_command_line() -> None:
    assert _scan(AppSettings, []) == ScanResult()
