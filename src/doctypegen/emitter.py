# topmark:header:start
#
#   project      : DoctypeGen
#   file         : emitter.py
#   file_relpath : src/doctypegen/emitter.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""Render doctype schemas as TypeScript interface blocks.

Each block is self-describing: the first line carries the schema's
``modified`` timestamp so a later run can tell whether the block is stale.

    // Last updated: 2024-01-01 10:00:00
    export interface ItemTax extends ChildDocType {
      /** Tax Type: Link (Account) */
      tax_type: string;
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from doctypegen.constants import BASE_CHILD_DOCTYPE, BASE_DOCTYPE, LAST_UPDATED_PREFIX
from doctypegen.typemap import map_field

if TYPE_CHECKING:
    from doctypegen.schema import DoctypeSchema

BASE_INTERFACES: str = f"""\
interface {BASE_DOCTYPE} {{
  name: string;
  creation: string;
  modified: string;
  owner: string;
  modified_by: string;
}}

interface {BASE_CHILD_DOCTYPE} extends {BASE_DOCTYPE} {{
  parent?: string;
  parentfield?: string;
  parenttype?: string;
  idx?: number;
}}
"""


@dataclass(frozen=True, slots=True)
class EmittedInterface:
    """A freshly rendered interface block.

    Attributes:
        name (str): Interface name.
        last_updated (str): Timestamp embedded in the marker line.
        text (str): Full block text, ending with a newline.
        references (tuple[str, ...]): Child doctype request names found in
            relational table fields, in field order.
    """

    name: str
    last_updated: str
    text: str
    references: tuple[str, ...] = field(default=())


def marker_line(modified: str) -> str:
    """Return the timestamp marker line for ``modified`` (without newline)."""
    return f"{LAST_UPDATED_PREFIX}{modified}"


def emit_interface(schema: DoctypeSchema) -> EmittedInterface:
    """Render ``schema`` into an interface block.

    Args:
        schema (DoctypeSchema): The schema to render.

    Returns:
        EmittedInterface: The block and the child doctypes it references.
    """
    base = BASE_CHILD_DOCTYPE if schema.is_table else BASE_DOCTYPE
    name = schema.interface_name
    lines: list[str] = [
        f"{marker_line(schema.modified)}\n",
        f"export interface {name} extends {base} {{\n",
    ]
    references: list[str] = []
    for schema_field in schema.fields:
        mapped = map_field(schema_field)
        if mapped is None:
            continue
        lines.extend(mapped.member_lines())
        if mapped.reference is not None:
            references.append(mapped.reference)
    lines.append("}\n")

    return EmittedInterface(
        name=name,
        last_updated=schema.modified,
        text="".join(lines),
        references=tuple(references),
    )


def render_output(blocks: list[str]) -> str:
    """Assemble the full output document from interface blocks."""
    return "\n".join([BASE_INTERFACES, *blocks])
