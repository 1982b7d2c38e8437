"""Index rebuild exceptions."""

from __future__ import annotations

from pathlib import Path

from blurhash_map.exceptions.base import BlurHashMapError


class SidecarMissing(BlurHashMapError, FileNotFoundError):
    """Raised when an in-scope image has no side-car during an index rebuild."""

    def __init__(self, image_path: Path, short_path: str | None = None) -> None:
        super().__init__(f"Hash file not found for: {short_path or image_path}")
        self.image_path = image_path
