"""Manifest writer."""
from __future__ import annotations

import logging
import os
from pathlib import Path

from .ingestion import OUTPUT_JSON_NAME
from .models import CatalogError, FirmwareManifest

log = logging.getLogger(__name__)


class ManifestWriter:
    def __init__(self, directory: Path, filename: str = OUTPUT_JSON_NAME):
        self.directory = Path(directory)
        self.filename = filename

    @property
    def path(self) -> Path:
        return self.directory / self.filename

    @property
    def staging_path(self) -> Path:
        return self.directory / f"{self.filename}.tmp"

    def render(self, manifest: FirmwareManifest) -> str:
        return manifest.to_json(indent=2)

    def write(self, manifest: FirmwareManifest) -> Path:
        # The manifest only replaces the existing file once it is fully on disk.
        text = self.render(manifest)
        staging = self.staging_path
        try:
            staging.write_text(text, encoding="utf-8")
            os.replace(staging, self.path)
        except OSError as exc:
            staging.unlink(missing_ok=True)
            raise CatalogError(f"Failed to write JSON file: {self.path}") from exc
        log.info("Generated JSON file: %s", self.filename)
        return self.path
