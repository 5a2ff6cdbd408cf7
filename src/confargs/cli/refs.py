# topmark:header:start
#
#   project      : ConfArgs
#   file         : refs.py
#   file_relpath : src/confargs/cli/refs.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Resolve ``module:QualName`` references to settings dataclasses."""

from __future__ import annotations

import dataclasses
import importlib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from confargs.config.logging import get_logger
from confargs.errors import ConfargsUsageError
from confargs.resolve.scanner import scan_cli_args

if TYPE_CHECKING:
    from collections.abc import Sequence

    from confargs.config.logging import ConfargsLogger
    from confargs.schema.descriptor import Schema

logger: ConfargsLogger = get_logger(__name__)


def load_settings_type(ref: str) -> type[Any]:
    """Import the settings dataclass named by ``ref`` (``package.module:ClassName``).

    Nested classes are addressed with dots after the colon (``mod:Outer.Inner``).

    Raises:
        ConfargsUsageError: If the reference is malformed, cannot be imported, or
            does not name a dataclass.
    """
    module_name, sep, qualname = ref.partition(":")
    if not sep or not module_name or not qualname:
        raise ConfargsUsageError(
            f"Invalid settings reference {ref!r}: expected 'package.module:ClassName'"
        )

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfargsUsageError(f"Cannot import module {module_name!r}: {exc}") from exc

    for part in qualname.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ConfargsUsageError(
                f"Module {module_name!r} has no attribute {qualname!r}"
            ) from exc

    if not (isinstance(target, type) and dataclasses.is_dataclass(target)):
        raise ConfargsUsageError(f"{ref!r} is not a dataclass type")

    logger.debug("Loaded settings type %s", ref)
    return target


def default_config_file(
    schema: Schema, config_option: str | None, app_args: Sequence[str] = ()
) -> str | Path:
    """Return the default config file for a resolution run.

    Uses ``--config`` when given, else the default of the settings' ``ConfigFile``
    field. When neither exists but the application arguments name a config file,
    that one is used.

    Raises:
        ConfargsUsageError: If no config file can be determined.
    """
    if config_option:
        return config_option
    field = schema.config_field
    if field is not None and field.has_default and field.default:
        return field.default
    override: str | None = scan_cli_args(app_args, schema).config_file
    if override is not None:
        return override
    raise ConfargsUsageError(
        "No default config file: pass --config FILE "
        "(the settings have no ConfigFile field with a default)"
    )
