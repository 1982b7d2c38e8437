"""Constants for index and side-car atomic writes."""

from __future__ import annotations

INDEX_TEMP_PREFIX: str = ".hashmap-"
INDEX_TEMP_SUFFIX: str = ".tmp"
SIDECAR_TEMP_PREFIX: str = ".sidecar-"
SIDECAR_TEMP_SUFFIX: str = ".tmp"
