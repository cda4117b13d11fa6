"""Logic for rendering type reference pages."""

from xmldoc_md.as_text import as_inline_text, as_text
from xmldoc_md.md_codeblock import md_codeblock
from xmldoc_md.md_table import md_table
from xmldoc_md.models import (
    EventMetadata,
    FieldMetadata,
    MethodMetadata,
    PropertyMetadata,
    TypeMetadata,
)

DEFAULT_LABELS: dict[str, str] = {
    "full_name": "Full name",
    "summary": "Summary",
    "remarks": "Remarks",
    "properties": "Properties",
    "fields": "Fields",
    "events": "Events",
    "methods": "Methods",
    "name": "Name",
    "type": "Type",
    "code": "Code",
    "constructor": "Constructor",
    "details": "Details",
    "uri": "URI",
    "example": "Example",
    "parameters": "Parameters",
    "exceptions": "Exceptions",
    "responses": "Responses",
    "returns": "Returns",
    "permissions": "Permissions",
}


def render_type_page(item: TypeMetadata, labels: dict[str, str] | None = None) -> str:
    """Render a type page with its members in Markdown.

    Members are listed in ``order``, the order in which they were read.
    """
    lb = {**DEFAULT_LABELS, **(labels or {})}
    parts: list[str] = [f"# {item.name}", f"- **{lb['full_name']}**: {item.full_name}"]

    summary = as_inline_text(item.summary)
    if summary:
        parts.append(f"- **{lb['summary']}**: {summary}")
    remarks = as_text(item.remarks)
    if remarks:
        parts.append(f"- **{lb['remarks']}**:\n{remarks}")

    parts.extend(_render_values(lb["properties"], _by_order(item.properties), lb))
    parts.extend(_render_values(lb["fields"], _by_order(item.fields), lb))
    parts.extend(_render_events(_by_order(item.events), lb))
    parts.extend(_render_methods(_by_order(item.methods), lb))

    return "\n".join(parts).rstrip() + "\n"


def _by_order(members: list) -> list:
    return sorted(members, key=lambda m: m.order)


def _render_values(
    title: str,
    members: list[PropertyMetadata] | list[FieldMetadata],
    lb: dict[str, str],
) -> list[str]:
    """Render properties or fields as a table."""
    if not members:
        return []
    rows = [[m.name, as_text(m.summary), (m.type_name or "").strip()] for m in members]
    return ["", f"## {title}", md_table([lb["name"], lb["summary"], lb["type"]], rows)]


def _render_events(members: list[EventMetadata], lb: dict[str, str]) -> list[str]:
    if not members:
        return []
    rows = [[m.name, as_text(m.summary)] for m in members]
    return ["", f"## {lb['events']}", md_table([lb["name"], lb["summary"]], rows)]


def _render_methods(methods: list[MethodMetadata], lb: dict[str, str]) -> list[str]:
    if not methods:
        return []
    parts = ["", f"## {lb['methods']}"]
    for m in methods:
        parts.extend(_render_method(m, lb))
    return parts


def _render_method(m: MethodMetadata, lb: dict[str, str]) -> list[str]:
    """Render one method section, with a collapsible block for the details."""
    parts = [f"### {m.name}"]
    if m.is_constructor:
        parts.append(f"- {lb['constructor']}")

    summary = as_inline_text(m.summary)
    if summary:
        parts.append(f"- **{lb['summary']}**: {summary}")
    remarks = as_text(m.remarks)
    if remarks:
        parts.append(f"- **{lb['remarks']}**:\n{remarks}")

    if m.permissions:
        parts.append(f"- **{lb['permissions']}**:")
        for p in m.permissions:
            text = as_inline_text(p.summary)
            label = f"`{p.full_name}`" if p.full_name else ""
            parts.append(f"  - {label}: {text}" if text else f"  - {label}")

    if m.has_details:
        parts += ["", "<details>", f"<summary>{lb['details']}</summary>"]
        if m.uri:
            parts += ["", f"**{lb['uri']}**: `{m.uri}`"]
        example = as_text(m.example)
        if example:
            parts += ["", f"**{lb['example']}**:", md_codeblock("", example)]
        if m.parameters:
            rows = [[p.name or "", as_text(p.summary), p.type_name.strip()] for p in m.parameters]
            parts += [
                "",
                f"**{lb['parameters']}**:",
                md_table([lb["name"], lb["summary"], lb["type"]], rows),
            ]
        if m.exceptions:
            rows = [
                [e.name or "", as_text(e.summary), (e.full_name or "").strip()]
                for e in m.exceptions
            ]
            parts += [
                "",
                f"**{lb['exceptions']}**:",
                md_table([lb["name"], lb["summary"], lb["type"]], rows),
            ]
        if m.responses:
            rows = [[str(r.code), as_text(r.summary)] for r in m.responses]
            parts += [
                "",
                f"**{lb['responses']}**:",
                md_table([lb["code"], lb["summary"]], rows),
            ]
        if m.returns:
            parts += ["", f"**{lb['returns']}**:"]
            returns_summary = as_inline_text(m.returns.summary)
            if returns_summary:
                parts.append(f"- {lb['summary']}: {returns_summary}")
            if m.returns.full_name:
                parts.append(f"- {lb['type']}: {m.returns.full_name}")
        parts += ["", "</details>"]

    parts += ["", "---", ""]
    return parts
