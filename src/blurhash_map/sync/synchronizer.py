"""Reconcile ``<image>.hash`` side-car files with the images they describe.

The synchronizer is the only writer of side-car files. Each call handles one
path to completion; per-path failures are logged and reported through the
returned action, never raised.

Decision order for ``reconcile(path, skip_if_sidecar_exists)``:

1. ``path`` is a side-car whose image is still in scope but the side-car
   itself is missing or invalid: regenerate it (repair).
2. ``path`` is an in-scope image: generate, unless a valid side-car exists
   and ``skip_if_sidecar_exists`` is set.
3. Anything else: delete the side-car belonging to ``path`` if there is one.
"""

from __future__ import annotations

import logging
from pathlib import Path

from blurhash_map.constants.index import SIDECAR_TEMP_PREFIX, SIDECAR_TEMP_SUFFIX
from blurhash_map.encoder import EncoderInvoker
from blurhash_map.exceptions import EncodingFailed
from blurhash_map.io import write_text_atomic
from blurhash_map.scanner import PathClassifier, discover_sidecars, image_path_for, sidecar_path_for
from blurhash_map.scanner.paths import is_sidecar_name
from blurhash_map.types import SyncAction

logger = logging.getLogger(__name__)


class SidecarSynchronizer:
    """Creates, regenerates and deletes side-car hash files."""

    def __init__(self, classifier: PathClassifier, encoder: EncoderInvoker) -> None:
        self._classifier = classifier
        self._encoder = encoder

    def reconcile(self, path: Path | str, skip_if_sidecar_exists: bool = False) -> SyncAction:
        """Bring the side-car state for ``path`` in line with the filesystem."""
        path = Path(path).absolute()
        classifier = self._classifier

        if is_sidecar_name(path):
            image_path = image_path_for(path)
            if classifier.is_in_scope_image(image_path) and not classifier.is_valid_sidecar(path):
                logger.warning("Image still exists, hash file is regenerated: %s", classifier.short_path(image_path))
                action = self._generate(image_path)
                return "repaired" if action == "generated" else action

        if classifier.is_in_scope_image(path):
            if skip_if_sidecar_exists and classifier.is_valid_sidecar(sidecar_path_for(path)):
                return "skipped"
            return self._generate(path)

        return self._remove_sidecar_of(path)

    def prune_orphans(self) -> list[Path]:
        """Delete every side-car under the root whose image is no longer in scope."""
        removed: list[Path] = []
        for sidecar in discover_sidecars(self._classifier):
            if self._classifier.is_in_scope_image(image_path_for(sidecar)):
                continue
            if self._delete(sidecar, reason="Useless hash removed"):
                removed.append(sidecar)
        return removed

    def _generate(self, image_path: Path) -> SyncAction:
        classifier = self._classifier
        # Classification may have changed since the path was queued.
        if not classifier.is_in_scope_image(image_path):
            return self._remove_sidecar_of(image_path)
        if not image_path.exists():
            logger.warning("NOT_FOUND: %s", image_path)
            return "failed"
        if not classifier.is_under_root(image_path):
            logger.warning("WRONG_PATH: %s is not in %s", image_path, classifier.root)
            return "failed"

        try:
            hash_value = self._encoder.compute_hash(image_path)
        except EncodingFailed as exc:
            logger.error("Hash generation failed: %s", exc)
            return "failed"

        sidecar = sidecar_path_for(image_path)
        try:
            write_text_atomic(
                path=sidecar,
                text=hash_value,
                temp_prefix=SIDECAR_TEMP_PREFIX,
                temp_suffix=SIDECAR_TEMP_SUFFIX,
            )
        except OSError as exc:
            logger.error("Cannot write %s: %s", classifier.short_path(sidecar), exc)
            return "failed"

        logger.info("%s has been created", classifier.short_path(sidecar))
        return "generated"

    def _remove_sidecar_of(self, path: Path) -> SyncAction:
        sidecar = sidecar_path_for(path)
        if not self._classifier.is_valid_sidecar(sidecar):
            return "unchanged"
        return "deleted" if self._delete(sidecar, reason="Deleted") else "failed"

    def _delete(self, sidecar: Path, *, reason: str) -> bool:
        try:
            sidecar.unlink()
        except FileNotFoundError:
            logger.debug("Already gone: %s", sidecar)
            return True
        except OSError as exc:
            logger.warning("Cannot delete %s: %s", self._classifier.short_path(sidecar), exc)
            return False
        logger.info("%s: %s", reason, self._classifier.short_path(sidecar))
        return True
