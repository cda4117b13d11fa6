"""Logic for extracting documentation text from XML elements."""

from collections.abc import Iterator

from lxml import etree

from xmldoc_md.strip_cref_prefix import strip_cref_prefix

REFERENCE_TAGS = {"see", "seealso"}
NAME_REFERENCE_TAGS = {"paramref", "typeparamref"}


def element_text(element: etree._Element | None) -> str | None:
    """Return the text content of an element and all of its descendants.

    Inline ``<see>``, ``<paramref>`` and ``<typeparamref>`` references, which
    carry no text of their own, are replaced by the referenced name in
    backticks. A missing element yields ``None``.
    """
    if element is None:
        return None
    return "".join(_fragments(element))


def short_reference_name(cref: str | None) -> str | None:
    """Shorten ``M:Ns.Type.Method(System.String)`` to ``Method``."""
    full_name = strip_cref_prefix(cref)
    if full_name is None:
        return None
    if "(" in full_name:
        full_name = full_name[: full_name.index("(")]
    return full_name.rsplit(".", 1)[-1]


def _fragments(element: etree._Element) -> Iterator[str]:
    yield element.text or ""
    for child in element:
        if isinstance(child.tag, str):
            yield _inline(child)
        yield child.tail or ""


def _inline(child: etree._Element) -> str:
    inner = "".join(_fragments(child))
    if child.tag in REFERENCE_TAGS and not inner.strip():
        name = short_reference_name(child.get("cref")) or child.get("langword")
        if name:
            return f"`{name}`"
        return child.get("href") or ""
    if child.tag in NAME_REFERENCE_TAGS:
        name = child.get("name")
        return f"`{name}`" if name else inner
    return inner
