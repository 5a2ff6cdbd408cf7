# topmark:header:start
#
#   project      : ConfArgs
#   file         : example.py
#   file_relpath : src/confargs/io/example.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Example config file generation.

Every field that may come from the config file is written, in declaration
order, as a fully commented block:

```ini
[bar]
; Another number.
; Default value: 1
;increment=1

```

A ``[section]`` header is written whenever the section changes to a named one.
Since every value line is commented out, reading a freshly written example file
yields no values.
"""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import TYPE_CHECKING, Any

from confargs.config.logging import get_logger
from confargs.config.options import resolve_parser_options
from confargs.constants import COMMENT_CHAR, EXAMPLE_WRAP_WIDTH
from confargs.schema.extractor import extract_schema
from confargs.utils.formatting import format_option_value

if TYPE_CHECKING:
    from confargs.config.logging import ConfargsLogger
    from confargs.config.options import ParserOptions
    from confargs.schema.descriptor import Schema

logger: ConfargsLogger = get_logger(__name__)

_COMMENT_PREFIX: str = f"{COMMENT_CHAR} "


def render_example_config(
    settings_type: type[Any],
    *,
    options: ParserOptions | None = None,
) -> str:
    """Render an annotated example config file for ``settings_type``.

    Args:
        settings_type (type[Any]): The settings dataclass.
        options (ParserOptions | None): Parser options; ``array_sep`` joins list defaults.

    Returns:
        str: The example file contents.
    """
    opts: ParserOptions = resolve_parser_options(options)
    schema: Schema = extract_schema(settings_type)

    lines: list[str] = []
    current_section: str = ""
    for fd in schema:
        if not fd.eligible:
            continue
        if fd.section != current_section:
            current_section = fd.section
            if current_section:
                lines.append(f"[{current_section}]")
        if fd.description:
            lines.extend(
                textwrap.wrap(
                    fd.description,
                    width=EXAMPLE_WRAP_WIDTH,
                    initial_indent=_COMMENT_PREFIX,
                    subsequent_indent=_COMMENT_PREFIX,
                )
            )
        default: str = format_option_value(fd.default, array_sep=opts.array_sep)
        lines.append(f"{_COMMENT_PREFIX}Default value: {default}")
        lines.append(f"{COMMENT_CHAR}{fd.name}={default}")
        lines.append("")

    return "\n".join(lines) + "\n" if lines else ""


def write_example_config_file(
    settings_type: type[Any],
    path: str | Path,
    *,
    options: ParserOptions | None = None,
) -> Path:
    """Write the example config file for ``settings_type`` to ``path`` (UTF-8).

    Returns:
        Path: The path written to.
    """
    target = Path(path)
    content: str = render_example_config(settings_type, options=options)
    with target.open("w", encoding="utf-8") as fh:
        fh.write(content)
    logger.info("Wrote example config file %s", target)
    return target
