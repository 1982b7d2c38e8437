"""Build the aggregated ``[relative_path, hash]`` index from side-car files."""

from __future__ import annotations

import logging
from pathlib import Path

from blurhash_map.constants.index import INDEX_TEMP_PREFIX, INDEX_TEMP_SUFFIX
from blurhash_map.exceptions import SidecarMissing
from blurhash_map.io import write_json_atomic
from blurhash_map.scanner import PathClassifier, discover_images, sidecar_path_for
from blurhash_map.sync import SidecarSynchronizer
from blurhash_map.types import HashMapData

logger = logging.getLogger(__name__)


class IndexBuilder:
    """Sole writer of the index file at ``target``."""

    def __init__(self, target: Path, classifier: PathClassifier, synchronizer: SidecarSynchronizer) -> None:
        self._target = target
        self._classifier = classifier
        self._synchronizer = synchronizer
        self.last_pruned: list[Path] = []
        self.last_entry_count = 0

    @property
    def target(self) -> Path:
        return self._target

    def collect_entries(self) -> HashMapData:
        """Pair every in-scope image with its side-car hash, in discovery order.

        Raises :class:`SidecarMissing` on the first image without a valid side-car.
        """
        entries: HashMapData = []
        for image_path in discover_images(self._classifier):
            short_path = self._classifier.short_path(image_path)
            sidecar = sidecar_path_for(image_path)
            if not self._classifier.is_valid_sidecar(sidecar):
                raise SidecarMissing(image_path, short_path)
            try:
                hash_value = sidecar.read_text(encoding="utf-8").strip()
            except (OSError, UnicodeDecodeError) as exc:
                raise SidecarMissing(image_path, short_path) from exc
            entries.append((short_path, hash_value))
        return entries

    def rebuild(self) -> Path:
        """Prune orphans, then rewrite the index; nothing is written on failure."""
        self.last_pruned = self._synchronizer.prune_orphans()
        entries = self.collect_entries()
        self.last_entry_count = len(entries)
        write_json_atomic(
            path=self._target,
            payload=[list(entry) for entry in entries],
            temp_prefix=INDEX_TEMP_PREFIX,
            temp_suffix=INDEX_TEMP_SUFFIX,
        )
        logger.info("Hash map with %d entries written to %s", len(entries), self._target)
        return self._target
