"""Firmware filename tokenizer.

Naming convention::

    <dongle>_<chip>_[<role>_]<desc>_<version>_<baud>[_<extra>].<bin|gbl|hex>

Examples::

    donglee_mg21_zigbee_stable_6.10.3_115200.gbl
    donglee_mg21_openthread_stable_2.4.4_460800.gbl
    donglep_cc2652p_zigbeerouter_stable_20240703_115200.hex
    unknownvendor_esp32_stable_1.0.0_921600.bin

The chip segment may be empty (``donglee__zigbee_stable_1.0_115200.bin``), in
which case it is reported as absent.
"""
from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

from .models import ParsedFilename


EXTENSIONS = ("bin", "gbl", "hex")

ALNUM = re.compile(r"[A-Za-z0-9]+")
DOTTED = re.compile(r"[0-9.]+")
DIGITS = re.compile(r"[0-9]+")

TOKEN_CLASSES = {
    "firmware_type": ALNUM,
    "firmware_desc": ALNUM,
    "version": DOTTED,
    "baud_rate": DIGITS,
    "extra": DOTTED,
}

# Tried in order, first match wins. A four-field tail is read as role-present
# before it is read as extra-present.
TRAILING_LAYOUTS: Tuple[Tuple[str, ...], ...] = (
    ("firmware_type", "firmware_desc", "version", "baud_rate", "extra"),
    ("firmware_type", "firmware_desc", "version", "baud_rate"),
    ("firmware_desc", "version", "baud_rate", "extra"),
    ("firmware_desc", "version", "baud_rate"),
)


def split_extension(name: str) -> Optional[Tuple[str, str]]:
    stem, dot, extension = name.rpartition(".")
    if not dot or extension not in EXTENSIONS:
        return None
    return stem, extension


def split_fields(stem: str) -> Optional[Tuple[str, Optional[str], List[str]]]:
    """Split a stem into ``(dongle, chip, trailing fields)``.

    The second field is always the chip slot; an empty slot yields ``None``.
    """
    fields = stem.split("_")
    if len(fields) < 2:
        return None
    dongle, chip, trailing = fields[0], fields[1], fields[2:]
    if not ALNUM.fullmatch(dongle):
        return None
    if chip and not ALNUM.fullmatch(chip):
        return None
    return dongle, chip or None, trailing


def resolve_trailing(fields: List[str]) -> Optional[Dict[str, str]]:
    for layout in TRAILING_LAYOUTS:
        if len(layout) != len(fields):
            continue
        if all(TOKEN_CLASSES[key].fullmatch(value) for key, value in zip(layout, fields)):
            return dict(zip(layout, fields))
    return None


def parse_filename(name: str) -> Optional[ParsedFilename]:
    """Decompose a firmware filename, or return ``None`` if it does not conform."""
    split = split_extension(name)
    if split is None:
        return None
    stem, extension = split

    head = split_fields(stem)
    if head is None:
        return None
    dongle, chip, trailing = head

    tokens = resolve_trailing(trailing)
    if tokens is None:
        return None

    return ParsedFilename(
        dongle_type=dongle,
        chip_model=chip,
        firmware_type=tokens.get("firmware_type"),
        firmware_desc=tokens["firmware_desc"],
        version=tokens["version"],
        baud_rate=tokens["baud_rate"],
        extension=extension,
        extra=tokens.get("extra"),
    )
