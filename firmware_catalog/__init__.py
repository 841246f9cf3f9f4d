"""Firmware folder catalog and FIRMWARE_LIST.json generator."""

from .catalog import FirmwareCatalog, generate_manifest
from .labels import map_dongle_type, map_firmware_type
from .models import CatalogError, FirmwareManifest, FirmwareRecord, ParsedFilename
from .parser import parse_filename

__all__ = [
    "FirmwareCatalog",
    "generate_manifest",
    "map_dongle_type",
    "map_firmware_type",
    "parse_filename",
    "CatalogError",
    "FirmwareManifest",
    "FirmwareRecord",
    "ParsedFilename",
]
