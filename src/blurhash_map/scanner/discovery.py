"""Enumeration of images and side-cars below the asset root."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from blurhash_map.scanner.paths import PathClassifier, is_sidecar_name

logger = logging.getLogger(__name__)


def _walk_files(root: Path) -> Iterator[Path]:
    """Yield regular files below ``root`` in filesystem enumeration order."""
    if not root.is_dir():
        logger.warning("Assets root is not a directory: %s", root)
        return
    for path in root.rglob("*"):
        try:
            if path.is_file():
                yield path
        except OSError as exc:
            logger.debug("Skipping unreadable entry %s: %s", path, exc)


def discover_images(classifier: PathClassifier) -> list[Path]:
    """Return every in-scope image under the root, unsorted."""
    return [path for path in _walk_files(classifier.root) if classifier.is_in_scope_image(path)]


def discover_sidecars(classifier: PathClassifier) -> list[Path]:
    """Return every existing side-car file under the root, unsorted."""
    return [path for path in _walk_files(classifier.root) if is_sidecar_name(path)]
