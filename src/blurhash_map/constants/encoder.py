"""Defaults for locating and building the external encoder binary."""

from __future__ import annotations

ENCODER_BINARY_NAME: str = "blurhash_encoder"
ENCODER_SOURCE_DIR: str = "src/C"
ENCODER_BUILD_COMMAND: tuple[str, ...] = ("make", ENCODER_BINARY_NAME)
