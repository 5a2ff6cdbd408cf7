# topmark:header:start
#
#   project      : ConfArgs
#   file         : __init__.py
#   file_relpath : src/confargs/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""ConfArgs package.

ConfArgs reconciles a ``key=value`` config file with command-line arguments.
Settings are declared once, as a dataclass whose fields carry ``Annotated``
markers; the config file values the command line does not supply are turned
into ``--name value`` arguments and everything is parsed by Click.

Typical use:

```python
from confargs import load_settings

outcome = load_settings(MySettings, default_config_file="my.conf")
if outcome.help_wanted:
    print(outcome.help_text)
else:
    settings = outcome.settings
```
"""

from __future__ import annotations

from confargs.config.options import DEFAULT_PARSER_OPTIONS, ParserOptions
from confargs.constants import CONFARGS_VERSION
from confargs.errors import (
    ConfargsError,
    ConfargsUsageError,
    ConfigFileReadError,
    OptionParsingError,
    SchemaError,
)
from confargs.io.example import render_example_config, write_example_config_file
from confargs.io.render import render_settings_json, render_settings_toml, settings_to_dict
from confargs.parser.initialize import ParseOutcome, initialize_settings, load_settings
from confargs.resolve.resolver import ConfigArguments, get_config_arguments
from confargs.schema.extractor import extract_schema
from confargs.schema.markers import (
    ConfigFile,
    Desc,
    Handler,
    OnlyCLI,
    PassThrough,
    Required,
    Section,
    Short,
)

__version__: str = CONFARGS_VERSION

__all__ = [
    "DEFAULT_PARSER_OPTIONS",
    "ConfargsError",
    "ConfargsUsageError",
    "ConfigArguments",
    "ConfigFile",
    "ConfigFileReadError",
    "Desc",
    "Handler",
    "OnlyCLI",
    "OptionParsingError",
    "ParseOutcome",
    "ParserOptions",
    "PassThrough",
    "Required",
    "SchemaError",
    "Section",
    "Short",
    "extract_schema",
    "get_config_arguments",
    "initialize_settings",
    "load_settings",
    "render_example_config",
    "render_settings_json",
    "render_settings_toml",
    "settings_to_dict",
    "write_example_config_file",
]
