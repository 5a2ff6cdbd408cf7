# topmark:header:start
#
#   project      : ConfArgs
#   file         : introspection.py
#   file_relpath : src/confargs/utils/introspection.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Introspection helpers used in error messages and type checks."""

from __future__ import annotations

import inspect
import types
import typing
from inspect import getmodule
from typing import Annotated, Any, Union, get_args, get_origin

NONE_TYPE: type[None] = type(None)


def format_callable_pretty(obj: Any) -> str:
    """Return a human-friendly ``module.qualname`` for any callable.

    Handles functions, bound methods, callable instances, and partials. Falls
    back to the callable's class name when needed, and uses ``inspect.getmodule``
    as a last resort to resolve the module name.

    Args:
        obj: The callable object to describe.

    Returns:
        A string like ``"package.module.QualifiedName"`` or ``"QualifiedName"``
        if the module cannot be resolved.
    """
    mod_name: str | None = getattr(obj, "__module__", None)
    call_name: str | None = getattr(obj, "__qualname__", None)

    if call_name is None:
        call_name = getattr(obj, "__name__", None)
    if call_name is None:
        call_name = type(obj).__name__

    if not mod_name:
        mod = getmodule(obj)
        if mod is not None and getattr(mod, "__name__", None):
            mod_name = mod.__name__

    return f"{mod_name}.{call_name}" if mod_name else call_name


def strip_annotated(tp: Any) -> Any:
    """Return ``tp`` without any ``Annotated[...]`` wrapper."""
    while get_origin(tp) is Annotated:
        tp = get_args(tp)[0]
    return tp


def unwrap_optional(tp: Any) -> tuple[Any, bool]:
    """Split ``Optional[T]`` / ``T | None`` into ``(T, True)``.

    Unions with more than one non-None member are returned unchanged.

    Returns:
        tuple[Any, bool]: The inner type and whether ``None`` was admitted.
    """
    origin: Any = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        members: tuple[Any, ...] = get_args(tp)
        non_none: list[Any] = [m for m in members if m is not NONE_TYPE]
        if len(non_none) == 1 and len(non_none) != len(members):
            return non_none[0], True
    return tp, False


def type_display_name(tp: Any) -> str:
    """Return a short display name for a type (``int``, ``list[str]``, ``MinMax``)."""
    if isinstance(tp, type) and get_origin(tp) is None:
        return tp.__qualname__
    return str(tp).replace("typing.", "")


def type_matches(annotation: Any, expected: Any) -> bool:
    """Return True if a resolved ``annotation`` denotes the ``expected`` type.

    String annotations that could not be resolved are compared by name.
    """
    if annotation == expected:
        return True
    if isinstance(annotation, str):
        names: set[str] = {type_display_name(expected), str(expected)}
        if isinstance(expected, type):
            names.add(expected.__name__)
        return annotation in names
    # typing.Optional[X] vs X | None compare unequal; normalize both sides
    ann_inner, ann_opt = unwrap_optional(annotation)
    exp_inner, exp_opt = unwrap_optional(expected)
    return ann_opt == exp_opt and ann_opt and ann_inner == exp_inner


def resolve_type_hints(obj: Any) -> dict[str, Any]:
    """Resolve ``obj``'s annotations, falling back to the raw (string) annotations.

    Locally defined types referenced from string annotations cannot be resolved
    through the object's globals; in that case the raw annotations are returned.
    """
    target: Any = obj
    if not inspect.isroutine(obj) and not isinstance(obj, type):
        # Callable instances and partials: look at their __call__
        target = getattr(obj, "__call__", obj)
    try:
        return typing.get_type_hints(target, include_extras=True)
    except (NameError, TypeError, AttributeError):
        return dict(getattr(target, "__annotations__", {}) or {})
