# topmark:header:start
#
#   project      : ConfArgs
#   file         : diagnostics.py
#   file_relpath : src/confargs/cli/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Human-facing rendering of config file diagnostics.

Diagnostics go to stderr so they never mix with program output (argument lists,
rendered settings). Machine formats serialize diagnostics themselves and must
not call this helper.

Behavior:
    - No diagnostics: nothing is written.
    - Default verbosity: one triage line, with a hint to use ``-v``.
    - ``-v`` and above: the triage line, then one line per diagnostic.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from confargs.cli.console import ConsoleLike
    from confargs.diagnostics import DiagnosticStats, FrozenDiagnosticLog


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" + ("s" if count != 1 else "")


def triage_summary(stats: DiagnosticStats) -> str:
    """Return a compact summary like ``"1 error, 2 warnings"``."""
    parts: list[str] = []
    if stats.n_error:
        parts.append(_plural(stats.n_error, "error"))
    if stats.n_warning:
        parts.append(_plural(stats.n_warning, "warning"))
    # Only mention info when there is nothing more severe
    if stats.n_info and not (stats.n_error or stats.n_warning):
        parts.append(_plural(stats.n_info, "info"))
    return ", ".join(parts) if parts else "none"


def render_diagnostics(
    console: ConsoleLike,
    diagnostics: FrozenDiagnosticLog,
    *,
    verbosity_level: int = logging.WARNING,
) -> None:
    """Write config file diagnostics to the console's error stream.

    Args:
        console (ConsoleLike): Console to write to.
        diagnostics (FrozenDiagnosticLog): Diagnostics of one resolution run.
        verbosity_level (int): Logging level selected with ``-v``/``-q``; details are
            shown at INFO and below.
    """
    if not diagnostics:
        return

    triage: str = triage_summary(diagnostics.stats())
    if verbosity_level > logging.INFO:
        console.warn(f"Config file diagnostics: {triage} (use '-v' to view details)")
        return

    console.warn(f"Config file diagnostics: {triage}")
    for diag in diagnostics:
        console.warn(f"  [{diag.level.value}] {diag.message}")
