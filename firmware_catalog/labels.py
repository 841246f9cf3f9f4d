"""Display labels for dongle and firmware role codes."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional


UNKNOWN_LABEL = "unknown"
OFFICIAL_LABEL = "Official"
# Chip model whose firmware ships without a role segment.
OFFICIAL_CHIP_MODEL = "esp32"

DONGLE_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "ihost": "iHost",
        "donglee": "ZBDongle-E",
        "donglep": "ZBDongle-P",
        "donglem": "Dongle-M",
        "donglelmg21": "Dongle-LMG21",
        "donglepmg24": "Dongle-PMG24",
    }
)

FIRMWARE_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "zigbee": "Zigbee",
        "zigbeerouter": "Zigbee Router",
        "openthread": "OpenThread",
        "multipan": "MultiPAN",
    }
)


def map_dongle_type(code: Optional[str]) -> str:
    if not code:
        return UNKNOWN_LABEL
    return DONGLE_TYPES.get(code, UNKNOWN_LABEL)


def map_firmware_type(code: Optional[str], chip_model: Optional[str]) -> str:
    """Return the role label, falling back on the chip model when the role is unknown."""
    label = FIRMWARE_TYPES.get(code) if code else None
    if label:
        return label
    if chip_model == OFFICIAL_CHIP_MODEL:
        return OFFICIAL_LABEL
    return UNKNOWN_LABEL
