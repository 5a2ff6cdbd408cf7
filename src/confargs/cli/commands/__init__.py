# topmark:header:start
#
#   project      : ConfArgs
#   file         : __init__.py
#   file_relpath : src/confargs/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""ConfArgs CLI subcommands."""
