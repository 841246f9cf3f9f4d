"""Directory scan to manifest pipeline."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .ingestion import list_candidates, resolve_directory
from .labels import map_dongle_type, map_firmware_type
from .models import FirmwareManifest, FirmwareRecord, ParsedFilename
from .parser import parse_filename
from .reporting import ManifestWriter

log = logging.getLogger(__name__)


def build_record(name: str, parsed: ParsedFilename) -> FirmwareRecord:
    return FirmwareRecord(
        name=name,
        dongle_type=map_dongle_type(parsed.dongle_type),
        chip_model=parsed.chip_model or "",
        firmware_type=map_firmware_type(parsed.firmware_type, parsed.chip_model),
        firmware_desc=parsed.firmware_desc,
        version=parsed.version,
        baud_rate=parsed.baud_rate,
    )


def parse_names(names: Iterable[str]) -> List[FirmwareRecord]:
    """Parse names in order, dropping the ones that do not follow the convention."""
    records: List[FirmwareRecord] = []
    for name in names:
        parsed = parse_filename(name)
        if parsed is None:
            log.info("Firmware info did not match pattern: %s", name)
            continue
        log.debug("Parsed %s as %s", name, parsed)
        records.append(build_record(name, parsed))
    return records


class FirmwareCatalog:
    """Build the firmware manifest for a single folder."""

    def __init__(self, directory: Union[str, Path, None] = None) -> None:
        self.directory = resolve_directory(directory)

    def scan(self) -> FirmwareManifest:
        names = list_candidates(self.directory)
        return FirmwareManifest(records=parse_names(names))

    def generate(self, writer: Optional[ManifestWriter] = None) -> FirmwareManifest:
        manifest = self.scan()
        writer = writer or ManifestWriter(self.directory)
        writer.write(manifest)
        return manifest


def generate_manifest(directory: Union[str, Path, None] = None) -> FirmwareManifest:
    return FirmwareCatalog(directory).generate()
