# topmark:header:start
#
#   project      : ConfArgs
#   file         : test_tokens.py
#   file_relpath : tests/parser/test_tokens.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Tests for argument token normalization ahead of Click parsing."""

from __future__ import annotations

import pytest

from confargs.parser.tokens import normalize_option_tokens
from confargs.schema.extractor import extract_schema
from tests.settings_samples import AppSettings, HandlerSettings, TimeoutSettings


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (["-t=10"], ["-t", "10"]),
        (["-t=-5"], ["-t", "-5"]),
        (["-t10"], ["-t10"]),
        (["--timeout=10"], ["--timeout=10"]),
        (["-t", "10", "file"], ["-t", "10", "file"]),
        (["--", "-t=10"], ["--", "-t=10"]),
        (["-x=1", "a=b"], ["-x=1", "a=b"]),
    ],
)
def test_short_alias_values(args: list[str], expected: list[str]) -> None:
    assert normalize_option_tokens(args, extract_schema(TimeoutSettings)) == expected


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (["--verbose"], ["--verbose=true"]),
        (["--verbose", "input.txt"], ["--verbose=true", "input.txt"]),
        (["--verbose", "FALSE"], ["--verbose=FALSE"]),
        (["--verbose", "--number", "3"], ["--verbose=true", "--number", "3"]),
        (["-v", "input.txt"], ["-vtrue", "input.txt"]),
        (["-v", "no"], ["-vno"]),
        (["-v=false"], ["-v", "false"]),
        (["-verb", "input.txt"], ["-verb=true", "input.txt"]),
        (["-verb=off"], ["-verb=off"]),
        (["--number", "--verbose"], ["--number", "--verbose"]),
        (["-c", "-v"], ["-c", "-v"]),
    ],
)
def test_bool_options(args: list[str], expected: list[str]) -> None:
    assert normalize_option_tokens(args, extract_schema(AppSettings)) == expected


def test_handler_values_are_not_touched() -> None:
    schema = extract_schema(HandlerSettings)
    assert normalize_option_tokens(["--minMax", "true"], schema) == ["--minMax", "true"]
