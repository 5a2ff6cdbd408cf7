# topmark:header:start
#
#   project      : ConfArgs
#   file         : handlers.py
#   file_relpath : src/confargs/schema/handlers.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Handler shape validation.

A handler replaces direct assignment of a parsed value. Its shape is checked
once, when the schema is extracted:

- exactly two positional parameters, ``(raw, current)``;
- ``raw`` annotated as ``str`` (when annotated);
- ``current`` annotated as the field type (when annotated);
- the return annotation (when present) is the field type. A handler annotated
  to return ``None`` cannot produce the field value and is rejected.

Unannotated parameters are accepted as-is.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any

from confargs.config.logging import get_logger
from confargs.errors import SchemaError
from confargs.schema.descriptor import HandlerRef
from confargs.utils.introspection import (
    NONE_TYPE,
    format_callable_pretty,
    resolve_type_hints,
    type_display_name,
    type_matches,
)

if TYPE_CHECKING:
    from confargs.config.logging import ConfargsLogger

logger: ConfargsLogger = get_logger(__name__)

_POSITIONAL_KINDS: frozenset[inspect._ParameterKind] = frozenset(
    {inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD}
)


def _fail(func: Any, field_name: str, reason: str) -> SchemaError:
    return SchemaError(
        f"Handler '{format_callable_pretty(func)}' of field {field_name!r}: {reason}",
        field_name=field_name,
    )


def validate_handler(
    func: Any,
    *,
    field_name: str,
    field_type: Any,
    declared_type: Any | None = None,
) -> HandlerRef:
    """Validate a handler's shape and return a `HandlerRef`.

    Args:
        func (Any): The object declared with ``Handler(...)``.
        field_name (str): The field the handler computes.
        field_type (Any): The field's value type (``Optional`` unwrapped).
        declared_type (Any | None): The field's declared type, if it differs from
            ``field_type`` (e.g. ``MinMax | None``). Either spelling is accepted.

    Returns:
        HandlerRef: The validated reference.

    Raises:
        SchemaError: If the handler is not callable or its shape does not match.
    """
    if not callable(func):
        raise SchemaError(
            f"Handler of field {field_name!r} is not callable: {func!r}",
            field_name=field_name,
        )

    try:
        sig: inspect.Signature = inspect.signature(func)
    except (TypeError, ValueError) as exc:
        raise _fail(func, field_name, f"signature cannot be inspected ({exc})") from exc

    params: list[inspect.Parameter] = list(sig.parameters.values())
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        raise _fail(func, field_name, "must not accept *args; expected exactly 2 parameters")
    required_kw: list[str] = [
        p.name
        for p in params
        if p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is inspect.Parameter.empty
    ]
    if required_kw:
        raise _fail(
            func,
            field_name,
            f"must not require keyword-only parameters: {', '.join(required_kw)}",
        )
    positional: list[inspect.Parameter] = [p for p in params if p.kind in _POSITIONAL_KINDS]
    if len(positional) != 2:
        raise _fail(
            func,
            field_name,
            f"number of arguments is wrong. Expected 2 got {len(positional)}",
        )

    hints: dict[str, Any] = resolve_type_hints(func)
    accepted: list[Any] = [field_type]
    if declared_type is not None and declared_type != field_type:
        accepted.append(declared_type)

    raw_param, current_param = positional
    raw_ann: Any = hints.get(raw_param.name, inspect.Parameter.empty)
    if raw_ann is not inspect.Parameter.empty and not type_matches(raw_ann, str):
        raise _fail(func, field_name, "first argument must be a string")

    current_ann: Any = hints.get(current_param.name, inspect.Parameter.empty)
    if current_ann is not inspect.Parameter.empty and not any(
        type_matches(current_ann, t) for t in accepted
    ):
        raise _fail(
            func,
            field_name,
            "second argument must be the same type as the settings field: "
            f"{type_display_name(field_type)}",
        )

    if "return" in hints:
        ret_ann: Any = hints["return"]
        if ret_ann is None or ret_ann is NONE_TYPE or ret_ann == "None":
            raise _fail(
                func,
                field_name,
                f"must return the new field value ({type_display_name(field_type)}), "
                "not None",
            )
        if not any(type_matches(ret_ann, t) for t in accepted):
            raise _fail(
                func,
                field_name,
                f"return type must be {type_display_name(field_type)}, "
                f"got {type_display_name(ret_ann)}",
            )

    logger.trace("Validated handler %s for field %s", format_callable_pretty(func), field_name)
    return HandlerRef(func=func, field_name=field_name, field_type=field_type)
