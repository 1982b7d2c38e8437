"""Filesystem classification and discovery for the asset tree."""

from __future__ import annotations

from .discovery import discover_images, discover_sidecars
from .paths import PathClassifier, image_path_for, sidecar_path_for

__all__ = ["PathClassifier", "discover_images", "discover_sidecars", "image_path_for", "sidecar_path_for"]
