"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "blurhash-map"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ BLURHASH-MAP",
    "     // placeholder hashes for image assets",
)
SYNC_SUMMARY_TITLE: str = "Sync summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} asset watcher"))
