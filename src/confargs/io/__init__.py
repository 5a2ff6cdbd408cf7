# topmark:header:start
#
#   project      : ConfArgs
#   file         : __init__.py
#   file_relpath : src/confargs/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Output helpers: example config files and settings rendering."""

from __future__ import annotations

from confargs.io.example import render_example_config, write_example_config_file
from confargs.io.render import render_settings_json, render_settings_toml, settings_to_dict

__all__ = [
    "render_example_config",
    "render_settings_json",
    "render_settings_toml",
    "settings_to_dict",
    "write_example_config_file",
]
