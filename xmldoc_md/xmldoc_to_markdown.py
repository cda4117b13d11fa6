"""Convert compiler-generated XML documentation files to Markdown pages.

Each ``<member>`` of the documentation files is decoded into a metadata
record, members are attached to the types declaring them, and one page per
type is written under a folder named after its assembly.
"""

import argparse
import logging
from pathlib import Path

from xmldoc_md.run_conversion import run_conversion


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    ap = argparse.ArgumentParser(
        description="Convert XML documentation comment files to Markdown reference pages.",
    )
    ap.add_argument(
        "sources",
        nargs="*",
        type=Path,
        help="XML documentation files (missing files are skipped)",
    )
    ap.add_argument(
        "-o",
        "--out-dir",
        type=Path,
        help="Output directory (default: 'output_dir' from the config, else ./docs)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--scope-by-assembly",
        action="store_true",
        help="Only attach members to types of the same assembly",
    )
    ap.add_argument(
        "--file-naming",
        choices=["name", "full_name"],
        help="Name pages after the simple or the qualified type name",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Load and resolve, log a summary, write nothing",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the conversion process."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_conversion(args)


if __name__ == "__main__":
    raise SystemExit(main())
