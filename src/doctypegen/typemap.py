# topmark:header:start
#
#   project      : DoctypeGen
#   file         : typemap.py
#   file_relpath : src/doctypegen/typemap.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""Map doctype field kinds to TypeScript type expressions.

The mapping is a closed table with an explicit fallback: layout kinds produce
no member, ``Select`` and the relational table kinds get dedicated rules,
known primitive kinds come from `PRIMITIVE_TYPES`, and anything else becomes
``any``. Unknown kinds are never an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from doctypegen.schema import doctype_request_name, strip_whitespace

if TYPE_CHECKING:
    from doctypegen.schema import FieldSchema

FALLBACK_TYPE: Final[str] = "any"

LAYOUT_KINDS: Final[frozenset[str]] = frozenset(
    {"Section Break", "Column Break", "Tab Break", "HTML", "Button"}
)

TABLE_KINDS: Final[frozenset[str]] = frozenset({"Table", "Table MultiSelect"})

# Kinds whose doc comment also names the related doctype.
RELATIONAL_KINDS: Final[frozenset[str]] = TABLE_KINDS | {"Link", "Dynamic Link"}

SELECT_KIND: Final[str] = "Select"
CHECK_KIND: Final[str] = "Check"

PRIMITIVE_TYPES: Final[dict[str, str]] = {
    "Data": "string",
    "Text Editor": "string",
    "Link": "string",
    "Table": "any[]",
    "Table MultiSelect": "any[]",
    "Percent": "number",
    "Int": "number",
    "Float": "number",
    "Datetime": "string",  # "YYYY-MM-DD HH:MM:SS"
    "Date": "string",  # "YYYY-MM-DD"
    CHECK_KIND: "0 | 1",
    "Attach Image": "string",
    "Dynamic Link": "string",
    "Small Text": "string",
    "Color": "string",
    "Text": "string",
    "Autocomplete": "string",
    "Password": "string",
    "Code": "string",
    "Read Only": "string",
}


@dataclass(frozen=True, slots=True)
class MappedField:
    """A field rendered as an interface member.

    Attributes:
        fieldname (str): Member name.
        type_expr (str): TypeScript type expression.
        doc (str): Doc comment, including the ``/** */`` delimiters.
        optional (bool): Whether the member carries the ``?`` marker.
        reference (str | None): Request name of a child doctype that must be
            resolved as well (relational table kinds only).
    """

    fieldname: str
    type_expr: str
    doc: str
    optional: bool
    reference: str | None = None

    def member_lines(self) -> list[str]:
        """Return the doc comment and declaration lines, newline-terminated."""
        marker = "?" if self.optional else ""
        return [
            f"  {self.doc}\n",
            f"  {self.fieldname}{marker}: {self.type_expr};\n",
        ]


def select_union(options: str) -> str:
    """Render newline-delimited options as a union of string literals.

    Order and duplicates are kept as written in the schema.
    """
    return " | ".join(f"'{option}'" for option in options.split("\n"))


def doc_comment(field: FieldSchema) -> str:
    """Return the ``/** label: kind (options) */`` comment for ``field``."""
    text = f"/** {field.label}: {field.fieldtype}"
    if field.fieldtype in RELATIONAL_KINDS and field.options:
        text += f" ({field.options})"
    return text + " */"


def map_field(field: FieldSchema) -> MappedField | None:
    """Map a schema field to an interface member.

    Args:
        field (FieldSchema): The field to map.

    Returns:
        MappedField | None: The member, or ``None`` for layout-only kinds.
    """
    kind = field.fieldtype
    if kind in LAYOUT_KINDS:
        return None

    type_expr: str = PRIMITIVE_TYPES.get(kind, FALLBACK_TYPE)
    reference: str | None = None
    if kind == SELECT_KIND and field.options:
        type_expr = select_union(field.options)
    elif kind in TABLE_KINDS and field.options:
        type_expr = f"{strip_whitespace(field.options)}[]"
        reference = doctype_request_name(field.options)

    return MappedField(
        fieldname=field.fieldname,
        type_expr=type_expr,
        doc=doc_comment(field),
        optional=not (field.required or kind == CHECK_KIND),
        reference=reference,
    )
