# topmark:header:start
#
#   project      : DoctypeGen
#   file         : schema.py
#   file_relpath : src/doctypegen/schema.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""Doctype schema model and loader.

A doctype schema is the JSON document describing one record shape: its name,
its ``modified`` timestamp, whether it is a child table, and an ordered list
of fields. Schemas are loaded once per run and never mutated afterwards.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from doctypegen.config.logging import get_logger
from doctypegen.errors import SchemaParseError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from doctypegen.config.logging import DoctypegenLogger
    from doctypegen.storage import Storage

logger: DoctypegenLogger = get_logger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def strip_whitespace(name: str) -> str:
    """Return ``name`` with every whitespace run removed ("Sales Invoice" -> "SalesInvoice")."""
    return _WHITESPACE_RE.sub("", name)


def doctype_request_name(name: str) -> str:
    """Return the on-disk doctype directory name for a display name.

    Frappe stores "Sales Invoice Item" below ``doctype/sales_invoice_item/``.
    """
    return name.lower().replace(" ", "_")


@dataclass(frozen=True, slots=True)
class FieldSchema:
    """A single field of a doctype schema.

    Attributes:
        fieldname (str): Member name in the generated interface.
        fieldtype (str): Field kind, e.g. ``Data``, ``Select`` or ``Table``.
        label (str): Human label, echoed into the doc comment.
        options (str | None): Newline-delimited choices for ``Select`` or the
            related doctype name for relational kinds.
        required (bool): Whether the schema marks the field as mandatory (``reqd``).
    """

    fieldname: str
    fieldtype: str
    label: str = ""
    options: str | None = None
    required: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FieldSchema:
        """Build a field from its JSON object."""
        options = data.get("options")
        return cls(
            fieldname=str(data["fieldname"]),
            fieldtype=str(data["fieldtype"]),
            label=str(data.get("label") or ""),
            options=str(options) if options else None,
            required=bool(data.get("reqd")),
        )


@dataclass(frozen=True, slots=True)
class DoctypeSchema:
    """A parsed doctype schema file.

    Attributes:
        name (str): Doctype display name (may contain spaces).
        modified (str): Last-modified timestamp string, compared verbatim.
        is_table (bool): True for child table doctypes (``istable``).
        fields (tuple[FieldSchema, ...]): Fields in file order.
    """

    name: str
    modified: str
    is_table: bool = False
    fields: tuple[FieldSchema, ...] = ()

    @property
    def interface_name(self) -> str:
        """Interface identifier: the doctype name with whitespace stripped."""
        return strip_whitespace(self.name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DoctypeSchema:
        """Build a schema from the decoded JSON document.

        Raises:
            KeyError: If ``name``, ``modified`` or a field's ``fieldname``/``fieldtype``
                is missing.
        """
        return cls(
            name=str(data["name"]),
            modified=str(data["modified"]),
            is_table=bool(data.get("istable")),
            fields=tuple(FieldSchema.from_dict(f) for f in data.get("fields") or ()),
        )


def parse_schema(text: str, *, path: Path) -> DoctypeSchema:
    """Parse schema JSON text into a `DoctypeSchema`.

    Args:
        text (str): Raw JSON text.
        path (Path): Source path, used for error reporting.

    Returns:
        DoctypeSchema: The parsed schema.

    Raises:
        SchemaParseError: If the text is not valid JSON or lacks required keys.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaParseError(path, str(exc)) from exc
    if not isinstance(data, dict):
        raise SchemaParseError(path, "expected a JSON object")
    try:
        return DoctypeSchema.from_dict(data)
    except (KeyError, TypeError) as exc:
        raise SchemaParseError(path, f"missing or invalid key {exc}") from exc


async def load_schema(storage: Storage, path: Path) -> DoctypeSchema:
    """Read and parse the schema file at ``path``."""
    text: str = await storage.read_text(path)
    schema = parse_schema(text, path=path)
    logger.debug("Loaded doctype %r (%d fields) from %s", schema.name, len(schema.fields), path)
    return schema
