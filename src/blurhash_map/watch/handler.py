"""Watchdog handler that forwards relevant file events to a batcher."""

from __future__ import annotations

from pathlib import Path

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)

from blurhash_map.watch.batcher import ChangeBatcher

RELEVANT_EVENT_TYPES: frozenset[str] = frozenset(
    {EVENT_TYPE_CREATED, EVENT_TYPE_DELETED, EVENT_TYPE_MODIFIED, EVENT_TYPE_MOVED}
)


class AssetEventHandler(FileSystemEventHandler):
    """Queues created, modified, deleted and moved files with watched extensions."""

    def __init__(self, batcher: ChangeBatcher, extensions: tuple[str, ...]) -> None:
        super().__init__()
        self._batcher = batcher
        self._extensions = frozenset(ext.lower().lstrip(".") for ext in extensions)

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type not in RELEVANT_EVENT_TYPES:
            return
        for raw in (event.src_path, getattr(event, "dest_path", "")):
            if not raw:
                continue
            path = Path(raw.decode() if isinstance(raw, bytes) else raw)
            if path.suffix.lower().lstrip(".") in self._extensions:
                self._batcher.add(path)
