"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = ".blurhash-map.yaml"
DEFAULT_TARGET_JSON: str = "hashmap.json"

COMPONENT_MIN: int = 1
COMPONENT_MAX: int = 9
DEFAULT_COMPONENT_X: int = 4
DEFAULT_COMPONENT_Y: int = 3

DEFAULT_DEBOUNCE_SECONDS: float = 0.5
