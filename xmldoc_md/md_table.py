"""Utility for generating Markdown tables."""


def md_cell(text: str | None) -> str:
    """Make text safe for use inside a table cell."""
    if not text:
        return ""
    return " ".join(text.split()).replace("|", "\\|")


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a Markdown table."""
    if not rows:
        return ""
    out = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join(["---"] * len(headers)) + " |",
    ]
    out.extend("| " + " | ".join(md_cell(c) for c in r) + " |" for r in rows)
    return "\n".join(out)
