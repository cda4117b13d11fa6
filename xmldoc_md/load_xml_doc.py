"""Logic for loading XML documentation files into flat metadata records."""

import logging
import threading
from collections.abc import Iterable
from pathlib import Path
from typing import IO

from lxml import etree

from xmldoc_md.models import BaseMetadata
from xmldoc_md.order_sequence import OrderSequence
from xmldoc_md.read_member import read_member

logger = logging.getLogger(__name__)

# Loads never run concurrently, even when callers issue them from threads.
_LOAD_LOCK = threading.RLock()


def _xml_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)


def read_xml_doc(
    source: bytes | IO[bytes],
    sequence: OrderSequence,
    *,
    default_assembly_name: str = "",
) -> list[BaseMetadata]:
    """Read an XML documentation document into a flat list of records.

    Every record is tagged with the text of ``assembly/name``, or with
    ``default_assembly_name`` when that is missing or blank. An unrecognized
    member identifier raises and no records are returned for the document.
    The whole read holds the process-wide load lock.
    """
    with _LOAD_LOCK:
        return _read_document(source, sequence, default_assembly_name)


def _read_document(
    source: bytes | IO[bytes], sequence: OrderSequence, default_assembly_name: str
) -> list[BaseMetadata]:
    if isinstance(source, bytes):
        root = etree.fromstring(source, parser=_xml_parser())
    else:
        root = etree.parse(source, parser=_xml_parser()).getroot()
    if root is None:
        return []

    assembly_name = root.findtext(".//assembly/name")
    if not assembly_name or not assembly_name.strip():
        assembly_name = default_assembly_name
    assembly_name = assembly_name.strip()

    items: list[BaseMetadata] = []
    for members in root.iter("members"):
        for member in members.iter("member"):
            name = member.get("name")
            # A missing name fails in read_member; a blank one is skipped.
            if name is not None and not name.strip():
                logger.warning("Skipping <member> with a blank name (line %s)", member.sourceline)
                continue
            items.append(read_member(member, sequence))

    for item in items:
        item.assembly_name = assembly_name

    logger.debug("Read %d members of assembly %s", len(items), assembly_name)
    return items


def load_xml_doc(path: Path, sequence: OrderSequence) -> list[BaseMetadata]:
    """Load one XML documentation file.

    A path that does not exist is not an error and loads as an empty list.
    """
    path = Path(path)
    with _LOAD_LOCK:
        if not path.exists():
            logger.debug("Documentation file not found, skipping: %s", path)
            return []
        with path.open("rb") as fh:
            return read_xml_doc(fh, sequence, default_assembly_name=path.stem)


def load_sources(
    paths: Iterable[Path], sequence: OrderSequence | None = None
) -> list[BaseMetadata]:
    """Load several documentation files into one flat list sharing one sequence."""
    sequence = sequence or OrderSequence()
    records: list[BaseMetadata] = []
    for path in paths:
        loaded = load_xml_doc(Path(path), sequence)
        logger.info("Loaded %d records from %s", len(loaded), path)
        records.extend(loaded)
    return records
