"""Logic for normalizing documentation text before rendering."""

import re

REPEATED_SPACES_RE = re.compile(r"[ \t]{2,}")
INDENTED_LINE_RE = re.compile(r"\n[ \t]+")


def as_text(v: str | None) -> str:
    """Trim text and collapse runs of spaces into one.

    XML documentation keeps the source indentation of every comment line,
    which is dropped here. Line breaks are kept.
    """
    if v is None:
        return ""
    v = INDENTED_LINE_RE.sub("\n", v.strip())
    return REPEATED_SPACES_RE.sub(" ", v)


def as_inline_text(v: str | None) -> str:
    """Like ``as_text`` but on a single line, for headings and table cells."""
    return " ".join(as_text(v).split())
