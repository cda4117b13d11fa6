"""Logic for writing type pages to disk."""

import logging
from pathlib import Path

from xmldoc_md.models import TypeMetadata
from xmldoc_md.output_file_for_type import output_file_for_type
from xmldoc_md.render_type_page import render_type_page

logger = logging.getLogger(__name__)


def write_type_pages(
    types: list[TypeMetadata],
    out_root: Path,
    *,
    file_naming: str = "name",
    labels: dict[str, str] | None = None,
) -> int:
    """Write one page per type, in ``order``, replacing existing files."""
    written = 0
    total_types = len(types)
    logger.info("Writing %d type pages...", total_types)
    for it in sorted(types, key=lambda t: t.order):
        md = render_type_page(it, labels)
        out_file = output_file_for_type(out_root, it, file_naming)
        out_file.write_text(md, encoding="utf-8")
        written += 1
        if written % 50 == 0:
            logger.info("  ... wrote %d/%d types", written, total_types)
    return written
