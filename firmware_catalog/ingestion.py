from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Union

from .models import CatalogError


OUTPUT_JSON_NAME = "FIRMWARE_LIST.json"
IGNORED_NAMES = frozenset({".DS_Store", OUTPUT_JSON_NAME})
DEFAULT_FIRMWARE_DIR = Path(__file__).resolve().parent.parent / "firmware-build"

log = logging.getLogger(__name__)


def resolve_directory(directory: Union[str, Path, None] = None) -> Path:
    if directory is None:
        return DEFAULT_FIRMWARE_DIR
    return Path(directory).expanduser().resolve()


def list_candidates(directory: Union[str, Path]) -> List[str]:
    """Return folder entries in listing order, minus OS metadata and the manifest."""
    path = Path(directory)
    try:
        entries = os.listdir(path)
    except OSError as exc:
        raise CatalogError(f"Failed to read firmware folder: {path}") from exc

    candidates = []
    for entry in entries:
        if entry in IGNORED_NAMES:
            log.debug("Ignoring %s", entry)
            continue
        candidates.append(entry)
    return candidates
