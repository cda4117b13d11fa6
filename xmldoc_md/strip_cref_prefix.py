"""Logic for turning a ``cref`` attribute into a bare qualified name."""

import re

CREF_PREFIX_RE = re.compile(r"^[A-Za-z!]:")


def strip_cref_prefix(value: str | None) -> str | None:
    """Drop the ``T:``/``M:``/... prefix of a cross-reference.

    Blank references resolve to ``None``. Values without a kind prefix
    (plain URLs in ``seealso`` for instance) are returned as they are.
    """
    if value is None or not value.strip():
        return None
    value = value.strip()
    if CREF_PREFIX_RE.match(value):
        return value[2:]
    return value
