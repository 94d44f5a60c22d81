# topmark:header:start
#
#   project      : DoctypeGen
#   file         : __init__.py
#   file_relpath : src/doctypegen/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""DoctypeGen package.

DoctypeGen compiles Frappe doctype JSON schemas, scattered across app
directories, into TypeScript interface declarations. Runs are incremental:
interfaces whose schema ``modified`` timestamp did not change are carried
over verbatim from the previous output.
"""

from __future__ import annotations

from doctypegen.generator import GenerationReport, InterfaceGenerator, generate

__all__ = [
    "GenerationReport",
    "InterfaceGenerator",
    "generate",
]
