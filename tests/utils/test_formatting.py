# topmark:header:start
#
#   project      : ConfArgs
#   file         : test_formatting.py
#   file_relpath : tests/utils/test_formatting.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Tests for option value formatting."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from confargs.utils.formatting import format_option_value
from tests.settings_samples import MinMax, Mode


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (0.5, "0.5"),
        ("", ""),
        (None, ""),
        (dataclasses.MISSING, ""),
        (MinMax(1, 2), ""),
        (Mode.FAST, "fast"),
        (Path("a/b"), str(Path("a/b"))),
        (["a", "b"], "a,b"),
        ((1, True), "1,true"),
    ],
)
def test_format_option_value(value: object, expected: str) -> None:
    assert format_option_value(value) == expected


def test_custom_separator() -> None:
    assert format_option_value(["a", "b"], array_sep=";") == "a;b"
