"""Image format detection and best-version storage."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Dict, Optional

from filetype import guess

from .models import ImageVersion, SaveResult, SaveStatus
from .sizes import categorize
from .utils import derive_filename, domain_of

logger = logging.getLogger("imgcrawl")

ALLOWED_IMAGE_TYPES = {"jpg", "gif"}


def detect_image_format(data: bytes) -> Optional[str]:
    """Detect image type using filetype; returns lowercase extension."""
    kind = guess(data)
    if kind and kind.mime.startswith("image/"):
        ext = kind.extension.lower()
        if ext == "jpeg":
            return "jpg"
        return ext
    return None


def _write_file(destination: Path, data: bytes) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(data)


class ImageStore:
    """Persists the largest observed copy of each derived filename.

    Files land in ``<root>/<ext>/<domain>/<size category>/<filename>``. The
    version table holds the winning size and bytes per filename; lookup,
    update and file write for a save run under one lock so that two larger
    copies arriving out of order cannot leave the smaller one on disk.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        self.versions: Dict[str, ImageVersion] = {}
        self.written_count = 0
        self._lock = asyncio.Lock()

    def destination_for(self, url: str, extension: str, byte_size: int, filename: str) -> Path:
        category = categorize(byte_size)
        return self.root / extension / domain_of(url) / category.value / filename

    async def save(self, url: str, data: bytes) -> SaveResult:
        extension = detect_image_format(data)
        if extension not in ALLOWED_IMAGE_TYPES:
            logger.debug("Skipping %s: unsupported image type (%s)", url, extension)
            return SaveResult(SaveStatus.SKIPPED_UNSUPPORTED)

        filename = derive_filename(url, extension)
        size = len(data)
        async with self._lock:
            current = self.versions.get(filename)
            if current is not None and current.byte_size >= size:
                logger.debug(
                    "Skipping %s: %s already stored with %d bytes (offered %d)",
                    url,
                    filename,
                    current.byte_size,
                    size,
                )
                return SaveResult(SaveStatus.SKIPPED_SMALLER, filename)
            self.versions[filename] = ImageVersion(size, data)
            destination = self.destination_for(url, extension, size, filename)
            await asyncio.to_thread(_write_file, destination, data)
            self.written_count += 1

        logger.info("Saved %s (%d bytes)", destination, size)
        return SaveResult(SaveStatus.WRITTEN, filename, destination)
