"""Utility for making type names safe for use as file names."""

import re

# Conservative: keep letters, digits, underscore, dash and dots.
FILE_SAFE_RE = re.compile(r"[^A-Za-z0-9_.-]+")


def file_safe(name: str) -> str:
    """Make a stable file name token out of a type name.

    Generic arity markers are folded into the name (``List`1`` -> ``List1``)
    and anything else outside the safe set becomes a hyphen.
    """
    name = name.replace("`", "")
    name = FILE_SAFE_RE.sub("-", name).strip("-.")
    # Avoid pathological emptiness
    return name or "Unknown"
