# topmark:header:start
#
#   project      : DoctypeGen
#   file         : __init__.py
#   file_relpath : src/doctypegen/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""DoctypeGen configuration: model, TOML loading and logging setup."""

from __future__ import annotations

from doctypegen.config.model import Config, MutableConfig, load_config, parse_doctype_args

__all__ = [
    "Config",
    "MutableConfig",
    "load_config",
    "parse_doctype_args",
]
