"""Wiring of the full-scan startup pass and change-batch processing.

``BlurHashMap`` is the primary entry point: ``initialize`` runs once at
startup, ``on_change_batch`` handles each batch reported by a watcher and
``rebuild`` rewrites the index whenever the caller decides to.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from blurhash_map.config.extensions import validate_image_extensions
from blurhash_map.config.model import BlurHashMapConfig
from blurhash_map.constants.extensions import SIDECAR_EXTENSION
from blurhash_map.encoder import EncoderInvoker
from blurhash_map.exceptions import InvalidConfiguration
from blurhash_map.index import IndexBuilder
from blurhash_map.model import SyncReport
from blurhash_map.scanner import PathClassifier, discover_images
from blurhash_map.sync import SidecarSynchronizer

logger = logging.getLogger(__name__)


class BlurHashMap:
    """Keeps side-car hashes and the JSON index in sync with an asset tree."""

    def __init__(self, config: BlurHashMapConfig, *, encoder: EncoderInvoker | None = None) -> None:
        self.config = config
        self.classifier = PathClassifier(config)
        self.encoder = encoder or EncoderInvoker(config.encoder, config.components)
        self.synchronizer = SidecarSynchronizer(self.classifier, self.encoder)
        self.index = IndexBuilder(config.target_json, self.classifier, self.synchronizer)
        self.last_report: SyncReport | None = None

    @property
    def hash_map_json_path(self) -> Path:
        return self.config.target_json

    @property
    def executable(self) -> Path:
        return self.encoder.executable

    @property
    def watched_extensions(self) -> tuple[str, ...]:
        """Extensions a watcher must report: the images plus the side-car suffix."""
        return (*self.config.image_extensions, SIDECAR_EXTENSION.lstrip("."))

    def get_short_path(self, path: Path) -> str:
        return self.classifier.short_path(path)

    def initialize(self) -> Path:
        """Validate, bootstrap the encoder, hash what is missing and write the index."""
        validate_image_extensions(self.config.image_extensions)
        if not self.config.assets_root.is_dir():
            raise InvalidConfiguration(f"Assets root does not exist or is not a directory: {self.config.assets_root}")

        if not self.encoder.ensure():
            logger.warning("Encoder is unavailable; hash generation will fail until %s exists", self.executable)

        report = SyncReport()
        for image_path in discover_images(self.classifier):
            report.record(image_path, self.synchronizer.reconcile(image_path, skip_if_sidecar_exists=True))

        path = self.rebuild()
        report.pruned = list(self.index.last_pruned)
        report.index_path = path
        report.index_entries = self.index.last_entry_count
        self.last_report = report
        return path

    def on_change_batch(self, paths: Iterable[Path | str]) -> SyncReport:
        """Reconcile each changed path in order; failures never stop the batch."""
        report = SyncReport()
        for path in paths:
            report.record(Path(path), self.synchronizer.reconcile(path, skip_if_sidecar_exists=False))
        self.last_report = report
        return report

    def rebuild(self) -> Path:
        return self.index.rebuild()
