"""Command-line interface for the firmware catalog."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .catalog import FirmwareCatalog
from .ingestion import DEFAULT_FIRMWARE_DIR
from .models import CatalogError

log = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate FIRMWARE_LIST.json from firmware filenames")
    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        default=None,
        help=f"Folder containing firmware files (default: {DEFAULT_FIRMWARE_DIR})",
    )
    parser.add_argument("--stdout", action="store_true", help="Print the manifest instead of writing it")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log every candidate")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    return parser.parse_args(argv)


def configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args)

    catalog = FirmwareCatalog(args.directory)
    try:
        if args.stdout:
            print(catalog.scan().to_json(indent=2))
        else:
            catalog.generate()
    except CatalogError as exc:
        log.error("%s (%s)", exc, exc.__cause__)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
