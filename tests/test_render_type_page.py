"""Tests for rendering type pages."""

from xmldoc_md.as_text import as_inline_text, as_text
from xmldoc_md.load_xml_doc import read_xml_doc
from xmldoc_md.md_table import md_table
from xmldoc_md.models import MethodMetadata, TypeMetadata
from xmldoc_md.order_sequence import OrderSequence
from xmldoc_md.render_type_page import render_type_page
from xmldoc_md.resolve_metadata import resolve_metadata


def _controller(sample_xml: bytes) -> TypeMetadata:
    return resolve_metadata(read_xml_doc(sample_xml, OrderSequence()))[0]


def test_as_text() -> None:
    """Test whitespace normalization of documentation text."""
    assert as_text(None) == ""
    assert as_text("  Handles   orders.\n        More text.  ") == "Handles orders.\nMore text."
    assert as_inline_text("  Handles   orders.\n        More text.  ") == (
        "Handles orders. More text."
    )


def test_md_table() -> None:
    """Test Markdown table generation."""
    assert md_table([], []) == ""

    headers = ["Name", "Value"]
    rows = [["A", "1"], ["x|y", "multi\nline"]]
    expected = "| Name | Value |\n| --- | --- |\n| A | 1 |\n| x\\|y | multi line |"
    assert md_table(headers, rows) == expected


def test_minimal_type_page() -> None:
    """Test the page of a type without members."""
    t = TypeMetadata(name="Widget", full_name="Ns.Widget", order=1, summary=" A   widget. ")
    assert render_type_page(t) == "# Widget\n- **Full name**: Ns.Widget\n- **Summary**: A widget.\n"


def test_type_page_sections(sample_xml: bytes) -> None:
    """Test the sections rendered for a fully documented type."""
    md = render_type_page(_controller(sample_xml))
    assert md.startswith("# OrdersController\n- **Full name**: Shop.Api.OrdersController\n")
    assert "- **Summary**: Handles orders." in md
    assert "- **Remarks**:\nTalks to the order store." in md
    assert "## Properties\n| Name | Summary | Type |\n| --- | --- | --- |\n" in md
    assert "| Count | Number of orders. | System.Int32 |" in md
    assert "## Fields" in md
    assert "| MaxItems | Largest order accepted. |  |" in md
    assert "## Events\n| Name | Summary |" in md
    assert "## Methods" in md
    assert md.index("## Properties") < md.index("## Fields") < md.index("## Events")
    assert md.index("## Events") < md.index("## Methods")


def test_method_details(sample_xml: bytes) -> None:
    """Test the collapsible details block of a method."""
    md = render_type_page(_controller(sample_xml))
    place = md[md.index("### Place") :]
    assert "<details>" in place
    assert "**URI**: `[POST] /orders`" in place
    assert '```\nvar o = c.Place("x", 1);\n```' in place
    assert "| sku | Product code. | System.String |" in place
    assert "| ArgumentException | Bad sku. | System.ArgumentException |" in place
    assert "| 201 | Created. |" in place
    assert "| -1 | Broken. |" in place
    assert "- Summary: The new order.\n- Type: Shop.Api.Order" in place
    assert "  - `Shop.Api.Permissions.CanOrder`: May place orders." in place


def test_constructor_marker(sample_xml: bytes) -> None:
    """Test that constructors are labelled."""
    md = render_type_page(_controller(sample_xml))
    assert "### #ctor\n- Constructor\n- **Summary**: Creates the controller." in md


def test_methods_without_details_do_not_stop_rendering() -> None:
    """Test that every method is rendered, with or without details."""
    t = TypeMetadata(name="Type", full_name="Ns.Type", order=1)
    common = {"declaring_type_full_name": "Ns.Type", "declaring_type_name": "Type"}
    t.methods.append(MethodMetadata(name="Plain", full_name="Ns.Type.Plain", order=2, **common))
    t.methods.append(
        MethodMetadata(name="Rich", full_name="Ns.Type.Rich", order=3, example="x()", **common)
    )
    md = render_type_page(t)
    assert "### Plain" in md
    assert "### Rich" in md
    assert md.count("<details>") == 1


def test_members_sorted_by_order() -> None:
    """Test that members are presented in order, not list position."""
    t = TypeMetadata(name="Type", full_name="Ns.Type", order=1)
    common = {"declaring_type_full_name": "Ns.Type", "declaring_type_name": "Type"}
    t.methods.append(MethodMetadata(name="Second", full_name="Ns.Type.Second", order=5, **common))
    t.methods.append(MethodMetadata(name="First", full_name="Ns.Type.First", order=2, **common))
    md = render_type_page(t)
    assert md.index("### First") < md.index("### Second")


def test_custom_labels() -> None:
    """Test that labels can be overridden."""
    t = TypeMetadata(name="Widget", full_name="Ns.Widget", order=1, summary="Un widget.")
    md = render_type_page(t, {"full_name": "Ruta completa", "summary": "Resumen"})
    assert "- **Ruta completa**: Ns.Widget" in md
    assert "- **Resumen**: Un widget." in md
