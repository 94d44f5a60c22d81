# topmark:header:start
#
#   project      : DoctypeGen
#   file         : __init__.py
#   file_relpath : tests/unit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end
