"""Image extension universe and side-car naming."""

from __future__ import annotations

ALLOWED_IMAGE_TYPES: tuple[str, ...] = ("jpg", "jpeg", "png", "bmp", "webp")
SIDECAR_EXTENSION: str = ".hash"
INDEX_EXTENSION: str = ".json"
EXTENSION_LIST_SEPARATOR: str = ","
