# topmark:header:start
#
#   project      : ConfArgs
#   file         : __main__.py
#   file_relpath : src/confargs/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Allow ``python -m confargs``."""

from confargs.cli.main import cli

if __name__ == "__main__":
    cli()
