# topmark:header:start
#
#   project      : DoctypeGen
#   file         : __init__.py
#   file_relpath : src/doctypegen/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""DoctypeGen CLI subcommands."""
