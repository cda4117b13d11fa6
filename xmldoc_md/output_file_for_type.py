"""Utility for determining the output file path of a type page."""

from pathlib import Path

from xmldoc_md.file_safe import file_safe
from xmldoc_md.models import TypeMetadata


def output_file_for_type(out_root: Path, item: TypeMetadata, file_naming: str = "name") -> Path:
    """Determine the output file for a type page.

    Pages are grouped per assembly: out_root/<Assembly>/<Type>.md. With
    ``file_naming="full_name"`` the file is named after the qualified name
    instead of the simple name.
    """
    if file_naming not in ("name", "full_name"):
        msg = f"Unknown file naming scheme: {file_naming!r}"
        raise ValueError(msg)
    stem = item.full_name if file_naming == "full_name" else item.name
    folder = file_safe(item.assembly_name) if item.assembly_name else ""
    p = out_root / folder / f"{file_safe(stem)}.md"
    p.parent.mkdir(parents=True, exist_ok=True)
    return p
