"""Configuration loading, validation, and normalization for blurhash-map.

The package facade re-exports the public names so callers can write
``from blurhash_map.config import ...``.
"""

from __future__ import annotations

from blurhash_map.config.extensions import parse_extension_list, validate_image_extensions
from blurhash_map.config.loader import load_config
from blurhash_map.config.model import BlurHashMapConfig, ComponentRatio, EncoderSettings
from blurhash_map.config.validator import _suggest_key, validate_config_file

__all__ = [
    "BlurHashMapConfig",
    "ComponentRatio",
    "EncoderSettings",
    "_suggest_key",
    "load_config",
    "parse_extension_list",
    "validate_config_file",
    "validate_image_extensions",
]
