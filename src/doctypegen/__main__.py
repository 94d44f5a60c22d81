# topmark:header:start
#
#   project      : DoctypeGen
#   file         : __main__.py
#   file_relpath : src/doctypegen/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""Module entry point for running DoctypeGen via ``python -m doctypegen``.

Delegates to :func:`doctypegen.cli.main.cli`, the single CLI entry point.
"""

from __future__ import annotations

from doctypegen.cli.main import cli

if __name__ == "__main__":
    cli()
