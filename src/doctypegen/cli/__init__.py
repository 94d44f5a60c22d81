# topmark:header:start
#
#   project      : DoctypeGen
#   file         : __init__.py
#   file_relpath : src/doctypegen/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""Click-based command line interface for DoctypeGen."""
