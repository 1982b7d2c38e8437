"""Root exception type."""

from __future__ import annotations


class BlurHashMapError(Exception):
    """Base class for all blurhash-map errors."""
