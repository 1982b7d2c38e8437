"""Encoder subprocess exceptions."""

from __future__ import annotations

from pathlib import Path

from blurhash_map.exceptions.base import BlurHashMapError


class EncodingFailed(BlurHashMapError, RuntimeError):
    """Raised when the encoder process fails or prints no hash."""

    def __init__(self, image_path: Path, message: str, *, returncode: int | None = None) -> None:
        super().__init__(f"{message}: {image_path}")
        self.image_path = image_path
        self.returncode = returncode
