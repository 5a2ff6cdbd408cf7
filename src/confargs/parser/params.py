# topmark:header:start
#
#   project      : ConfArgs
#   file         : params.py
#   file_relpath : src/confargs/parser/params.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Click parameter types used by the generated settings command.

- `EnumChoiceParam`: case-insensitive enum lookup by member value.
- `SeparatedListParamType`: one option value split into list items.
- `HandlerParamType`: forwards the raw option string to a field handler.
"""

from __future__ import annotations

import copy
import dataclasses
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, Iterable, NoReturn, Protocol, TypeVar, cast

import click

from confargs.config.logging import get_logger
from confargs.utils.introspection import format_callable_pretty

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    from confargs.config.logging import ConfargsLogger
    from confargs.schema.descriptor import HandlerRef

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

logger: ConfargsLogger = get_logger(__name__)

# Type variable bounded to Enum for generic EnumParam
E = TypeVar("E", bound=Enum)


def _fail_noreturn(
    message: str,
    param: click.Parameter | None,
    ctx: click.Context | None,
) -> NoReturn:
    """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
    raise click.BadParameter(message, param=param, ctx=ctx)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum.

    Members are looked up by their value, then by their name, case-insensitively.
    """

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [str(getattr(e, "value", e)) for e in self.enum_cls]

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Converts a string to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value

        members: Iterable[E] = cast("Iterable[E]", self.enum_cls)
        key: str = str(value).lower()
        for choice in members:
            if str(getattr(choice, "value", choice)).lower() == key:
                return choice
        for choice in members:
            if choice.name.lower() == key:
                return choice

        _fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Return ``[a|b|c]`` like `click.Choice` does."""
        return f"[{'|'.join(self.choices)}]"

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click."""
        # Runtime import to avoid import-time dependency for non-completion paths
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix: str = (incomplete or "").lower()
        return [RuntimeCompletionItem(c) for c in self.choices if c.lower().startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumParam({self.enum_cls.__name__})"


class SeparatedListParamType(ParamTypeBase):
    """Split one option value on a separator and convert each item.

    Used together with ``multiple=True``: ``--names a,b --names c`` yields
    ``(["a", "b"], ["c"])``, which the settings builder flattens.
    """

    name: str
    item_type: click.ParamType
    separator: str

    def __init__(self, item_type: click.ParamType, separator: str) -> None:
        self.item_type = item_type
        self.separator = separator
        self.name = f"{item_type.name}-list"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> list[Any]:
        """Split ``value`` and convert every item with the item type."""
        if isinstance(value, (list, tuple)):
            return [self.item_type.convert(v, param, ctx) for v in value]
        if not isinstance(value, str):
            return [self.item_type.convert(value, param, ctx)]
        if value == "":
            return []
        return [self.item_type.convert(v, param, ctx) for v in value.split(self.separator)]

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Return e.g. ``TEXT[,TEXT...]``."""
        item: str = self.item_type.name.upper()
        return f"{item}[{self.separator}{item}...]"

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"SeparatedList({self.item_type!r}, {self.separator!r})"


class HandlerParamType(ParamTypeBase):
    """Forward the raw option string to a field handler.

    The handler receives a deep copy of the field default as its ``current``
    value, so defaults shared through the dataclass are never mutated. Any
    exception raised by the handler becomes a `click.BadParameter` chained to the
    original error.
    """

    name: str
    handler: HandlerRef
    default: Any

    def __init__(self, handler: HandlerRef, default: Any = dataclasses.MISSING) -> None:
        self.handler = handler
        self.default = None if default is dataclasses.MISSING else default
        self.name = getattr(handler.func, "__name__", "handler")

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Any:
        """Call the handler with the raw string and the current field value."""
        if not isinstance(value, str):
            # Already the field value (e.g. a default)
            return value
        current: Any = copy.deepcopy(self.default)
        try:
            result: Any = self.handler(value, current)
        except click.BadParameter:
            raise
        except Exception as exc:  # noqa: BLE001
            logger.debug(
                "Handler %s failed for %r: %r",
                format_callable_pretty(self.handler.func),
                value,
                exc,
            )
            raise click.BadParameter(
                f"{value!r}: {exc}" if str(exc) else f"{value!r}: {type(exc).__name__}",
                ctx=ctx,
                param=param,
            ) from exc
        logger.trace("Handler for %s: %r -> %r", self.handler.field_name, value, result)
        return result

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Return the field type name as metavar."""
        tp: Any = self.handler.field_type
        return getattr(tp, "__name__", "VALUE").upper()

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"HandlerParam({format_callable_pretty(self.handler.func)})"
