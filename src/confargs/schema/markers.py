# topmark:header:start
#
#   project      : ConfArgs
#   file         : markers.py
#   file_relpath : src/confargs/schema/markers.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Declaration markers for settings dataclass fields.

Markers are placed inside `typing.Annotated` on the fields of a settings
dataclass and are read once, when the schema is extracted:

```python
from dataclasses import dataclass
from typing import Annotated

from confargs import ConfigFile, Desc, OnlyCLI, Section, Short


@dataclass
class MyConfig:
    config: Annotated[str, ConfigFile, Short("c"), Desc("Config file to use.")] = "my.conf"
    number: Annotated[int, Desc("My number.")] = 0
    verbose: Annotated[bool, Short("v"), Desc("Print verbose messages.")] = False
    dry_run: Annotated[bool, OnlyCLI, Desc("Do nothing.")] = False
    increment: Annotated[int, Section("bar"), Desc("Another number.")] = 1
```

Flag markers (`OnlyCLI`, `ConfigFile`, `PassThrough`, `Required`) may be used as
the bare class or as an instance.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Section:
    """Section the option belongs to.

    Options are grouped under ``[section]`` in example config files. Sections are
    a write-time concept only: they are not enforced when a config file is read.
    """

    name: str


@dataclass(frozen=True, slots=True)
class Desc:
    """Description shown in ``--help`` output and in example config files."""

    text: str


@dataclass(frozen=True, slots=True)
class Short:
    """Alternative option names, mostly convenient on the command line.

    Several alternatives may be given at once, separated by ``|`` or ``,``
    (``Short("v|verb")``). Single characters become ``-v`` style options,
    longer names become ``-verb`` style options.
    """

    names: str


@dataclass(frozen=True, slots=True)
class Handler:
    """Custom handler computing the field value from the raw option string.

    The handler must accept exactly two positional parameters, ``(raw, current)``,
    where ``raw`` is the string given on the command line or in the config file
    and ``current`` is the field's current (default) value, and must return the
    new field value:

    ```python
    def min_max_handler(value: str, current: MinMax) -> MinMax:
        lo, hi = value.split("-")
        return MinMax(int(lo), int(hi))
    ```
    """

    func: Callable[[str, Any], Any]


class _FlagMarker:
    """Base class for markers that carry no data."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class OnlyCLI(_FlagMarker):
    """The option is never read from (or written to) the config file."""

    __slots__ = ()


class ConfigFile(_FlagMarker):
    """The option names the config file to read instead of the default one.

    A settings dataclass may carry at most one `ConfigFile` field. The value is
    only taken from the command line.
    """

    __slots__ = ()


class PassThrough(_FlagMarker):
    """Unknown options are passed through by the option parser instead of failing."""

    __slots__ = ()


class Required(_FlagMarker):
    """The option parser fails when this option is not supplied.

    Ignored for schemas that also use `PassThrough` on this field.
    """

    __slots__ = ()


FLAG_MARKERS: tuple[type[_FlagMarker], ...] = (OnlyCLI, ConfigFile, PassThrough, Required)


def is_flag_marker(meta: object, marker: type[_FlagMarker]) -> bool:
    """Return True when ``meta`` is ``marker`` itself or an instance of it."""
    return meta is marker or isinstance(meta, marker)
