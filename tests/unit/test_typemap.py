# topmark:header:start
#
#   project      : DoctypeGen
#   file         : test_typemap.py
#   file_relpath : tests/unit/test_typemap.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""Unit tests for `doctypegen.typemap`."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from doctypegen.schema import FieldSchema
from doctypegen.typemap import LAYOUT_KINDS, MappedField, map_field, select_union


def _field(fieldtype: str, **kw: object) -> FieldSchema:
    return FieldSchema(fieldname=kw.pop("fieldname", "f"), fieldtype=fieldtype, label="L", **kw)  # type: ignore[arg-type]


@pytest.mark.parametrize("kind", sorted(LAYOUT_KINDS))
def test_layout_kinds_produce_no_member(kind: str) -> None:
    """Layout-only kinds are dropped."""
    assert map_field(_field(kind, required=True)) is None


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        ("Data", "string"),
        ("Link", "string"),
        ("Datetime", "string"),
        ("Int", "number"),
        ("Float", "number"),
        ("Percent", "number"),
        ("Check", "0 | 1"),
        ("Table", "any[]"),
        ("Select", "any"),
        ("Currency", "any"),
        ("Totally Unknown Kind", "any"),
    ],
)
def test_type_expressions(kind: str, expected: str) -> None:
    """Known kinds map through the table; unknown ones fall back to ``any``."""
    mapped = map_field(_field(kind))
    assert mapped is not None
    assert mapped.type_expr == expected
    assert mapped.reference is None


def test_select_options_render_as_literal_union() -> None:
    """A Select field with options becomes a union of quoted literals in file order."""
    mapped = map_field(_field("Select", options="Draft\nSubmitted\nCancelled"))
    assert mapped is not None
    assert mapped.type_expr == "'Draft' | 'Submitted' | 'Cancelled'"


def test_select_union_keeps_duplicates_and_empty_options() -> None:
    """Options are neither deduplicated nor sorted; empty lines stay."""
    assert select_union("\nB\nA\nB") == "'' | 'B' | 'A' | 'B'"


@given(st.lists(st.text(alphabet="abcXYZ 019-", min_size=1), min_size=1))
def test_select_union_preserves_order(options: list[str]) -> None:
    """The union lists every option once per occurrence, in order."""
    rendered = select_union("\n".join(options))
    assert rendered.split(" | ") == [f"'{o}'" for o in options]


def test_table_field_references_child_doctype() -> None:
    """Table fields type as arrays of the child interface and request the child."""
    mapped = map_field(_field("Table", fieldname="items", options="Sales Invoice Item"))
    assert mapped is not None
    assert mapped.type_expr == "SalesInvoiceItem[]"
    assert mapped.reference == "sales_invoice_item"
    assert mapped.doc == "/** L: Table (Sales Invoice Item) */"


def test_table_multiselect_references_child_doctype() -> None:
    mapped = map_field(_field("Table MultiSelect", options="Item Group"))
    assert mapped is not None
    assert mapped.type_expr == "ItemGroup[]"
    assert mapped.reference == "item_group"


def test_link_doc_comment_names_target_but_does_not_recurse() -> None:
    """Link fields mention their target doctype in the doc comment only."""
    field = FieldSchema(
        fieldname="tax_type", fieldtype="Link", label="Tax Type", options="Account", required=True
    )
    mapped = map_field(field)
    assert mapped == MappedField(
        fieldname="tax_type",
        type_expr="string",
        doc="/** Tax Type: Link (Account) */",
        optional=False,
    )
    assert mapped.member_lines() == [
        "  /** Tax Type: Link (Account) */\n",
        "  tax_type: string;\n",
    ]


def test_select_doc_comment_omits_options() -> None:
    mapped = map_field(_field("Select", options="A\nB"))
    assert mapped is not None
    assert mapped.doc == "/** L: Select */"


@pytest.mark.parametrize(
    ("kind", "required", "optional"),
    [
        ("Check", True, False),
        ("Check", False, False),
        ("Data", True, False),
        ("Data", False, True),
        ("Table", False, True),
    ],
)
def test_optional_marker(kind: str, required: bool, optional: bool) -> None:
    """Members are required when ``reqd`` is set or the kind is Check."""
    mapped = map_field(_field(kind, required=required))
    assert mapped is not None
    assert mapped.optional is optional
    assert ("?" in mapped.member_lines()[1]) is optional
