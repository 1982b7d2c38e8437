"""Shared exception hierarchy for blurhash-map."""

from __future__ import annotations

from .base import BlurHashMapError
from .config import ConfigError, InvalidConfiguration
from .encoding import EncodingFailed
from .index import SidecarMissing

__all__ = [
    "BlurHashMapError",
    "ConfigError",
    "EncodingFailed",
    "InvalidConfiguration",
    "SidecarMissing",
]
