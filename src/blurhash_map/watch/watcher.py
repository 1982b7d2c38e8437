"""Run the watchdog observer over the asset root."""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from watchdog.observers import Observer

from blurhash_map.constants.config import DEFAULT_DEBOUNCE_SECONDS
from blurhash_map.exceptions import SidecarMissing
from blurhash_map.orchestrator import BlurHashMap
from blurhash_map.watch.batcher import ChangeBatcher
from blurhash_map.watch.handler import AssetEventHandler

logger = logging.getLogger(__name__)


def process_batch(blurhash_map: BlurHashMap, paths: list[Path]) -> None:
    """Reconcile a batch and refresh the index, keeping the watcher alive on failure."""
    report = blurhash_map.on_change_batch(paths)
    if report.failed_paths:
        logger.warning("%d path(s) could not be synchronized", len(report.failed_paths))
    try:
        blurhash_map.rebuild()
    except SidecarMissing as exc:
        logger.error("Index not updated: %s", exc)


def watch_assets(
    blurhash_map: BlurHashMap,
    *,
    debounce: float = DEFAULT_DEBOUNCE_SECONDS,
    stop_event: threading.Event | None = None,
) -> None:
    """Watch the asset root until ``stop_event`` is set or the user interrupts."""
    stop_event = stop_event or threading.Event()
    batcher = ChangeBatcher(lambda paths: process_batch(blurhash_map, paths), debounce)
    handler = AssetEventHandler(batcher, blurhash_map.watched_extensions)
    root = blurhash_map.config.assets_root

    observer = Observer()
    observer.schedule(handler, str(root), recursive=True)
    observer.start()
    logger.info("Now watching for changes: %s", root)

    try:
        while not stop_event.wait(1.0):
            pass
    except KeyboardInterrupt:
        logger.info("Stopping watcher")
    finally:
        observer.stop()
        observer.join()
        batcher.close()
