"""Filesystem watch integration delivering change batches."""

from __future__ import annotations

from .batcher import ChangeBatcher
from .handler import AssetEventHandler
from .watcher import process_batch, watch_assets

__all__ = ["AssetEventHandler", "ChangeBatcher", "process_batch", "watch_assets"]
