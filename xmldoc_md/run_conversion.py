"""Orchestration logic for converting XML documentation to Markdown."""

import argparse
import logging
from pathlib import Path
from typing import Any

from xmldoc_md.load_config import load_config
from xmldoc_md.load_xml_doc import load_sources
from xmldoc_md.models import TypeMetadata
from xmldoc_md.order_sequence import OrderSequence
from xmldoc_md.resolve_metadata import resolve_metadata
from xmldoc_md.write_type_pages import write_type_pages

logger = logging.getLogger(__name__)


def run_conversion(args: argparse.Namespace) -> int:
    """Execute the full conversion pipeline: load, resolve, render."""
    config = build_config(args)
    sources = [Path(s) for s in config["sources"]]
    if not sources:
        msg = "No documentation files given (pass them as arguments or list them under 'sources')"
        raise SystemExit(msg)

    types = resolve_sources(sources, config)

    if args.dry_run:
        _log_summary(types)
        return 0

    out_root = Path(config["output_dir"]).resolve()
    out_root.mkdir(parents=True, exist_ok=True)
    written = write_type_pages(
        types,
        out_root,
        file_naming=config["output"]["file_naming"],
        labels=config["labels"],
    )
    logger.info("Generated %d Markdown pages into: %s", written, out_root)
    return 0


def build_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load the configuration file and apply command line overrides."""
    config = load_config(args.config)
    if args.sources:
        config["sources"] = [str(s) for s in args.sources]
    if args.out_dir:
        config["output_dir"] = str(args.out_dir)
    if args.scope_by_assembly:
        config["resolution"]["scope_by_assembly"] = True
    if args.file_naming:
        config["output"]["file_naming"] = args.file_naming
    return config


def resolve_sources(sources: list[Path], config: dict[str, Any]) -> list[TypeMetadata]:
    """Load every source with one shared sequence and resolve the result."""
    records = load_sources(sources, OrderSequence())
    types = resolve_metadata(
        records, scope_by_assembly=bool(config["resolution"]["scope_by_assembly"])
    )
    logger.info("Resolved %d types from %d records", len(types), len(records))
    return types


def _log_summary(types: list[TypeMetadata]) -> None:
    for t in sorted(types, key=lambda t: t.order):
        logger.info(
            "%s [%s]: %d methods, %d properties, %d fields, %d events",
            t.full_name,
            t.assembly_name,
            len(t.methods),
            len(t.properties),
            len(t.fields),
            len(t.events),
        )
