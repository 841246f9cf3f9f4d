"""Data models for parsed firmware filenames and the generated manifest."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import json


class CatalogError(RuntimeError):
    """Raised when the firmware folder cannot be read or the manifest written."""


@dataclass(frozen=True)
class ParsedFilename:
    """Raw filename tokens. `extension` and `extra` are informational and never reach the manifest."""

    dongle_type: str
    chip_model: Optional[str]
    firmware_type: Optional[str]
    firmware_desc: str
    version: str
    baud_rate: str
    extension: str
    extra: Optional[str] = None


@dataclass
class FirmwareRecord:
    name: str
    dongle_type: str
    chip_model: str
    firmware_type: str
    firmware_desc: str
    version: str
    baud_rate: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "dongleType": self.dongle_type,
            "chipModel": self.chip_model,
            "firmwareType": self.firmware_type,
            "firmwareDesc": self.firmware_desc,
            "version": self.version,
            "baudRate": self.baud_rate,
        }


@dataclass
class FirmwareManifest:
    records: List[FirmwareRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def to_dict(self) -> Dict[str, Any]:
        return {"firmwareList": [record.to_dict() for record in self.records]}

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
