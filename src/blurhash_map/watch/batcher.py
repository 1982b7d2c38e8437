"""Debounced collection of changed paths into batches."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)


class ChangeBatcher:
    """Collects paths and hands them to ``on_batch`` after a quiet period.

    Batches are delivered one at a time, so two batches never run
    concurrently even when a flush is triggered while another is in progress.
    """

    def __init__(self, on_batch: Callable[[list[Path]], None], debounce: float) -> None:
        self._on_batch = on_batch
        self._debounce = debounce
        self._pending: dict[Path, None] = {}
        self._lock = threading.Lock()
        self._process_lock = threading.Lock()
        self._timer: threading.Timer | None = None

    def add(self, path: Path) -> None:
        with self._lock:
            self._pending.pop(path, None)
            self._pending[path] = None
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self._debounce, self.flush)
            self._timer.daemon = True
            self._timer.start()

    def pending(self) -> list[Path]:
        with self._lock:
            return list(self._pending)

    def flush(self) -> None:
        """Deliver everything collected so far as one batch."""
        with self._process_lock:
            with self._lock:
                batch = list(self._pending)
                self._pending.clear()
                self._timer = None
            if batch:
                logger.debug("Processing batch of %d changed path(s)", len(batch))
                self._on_batch(batch)

    def close(self) -> None:
        """Cancel the pending timer and deliver any remaining paths."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        self.flush()
