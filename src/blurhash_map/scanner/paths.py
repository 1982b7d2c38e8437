"""Pure predicates classifying paths relative to the asset root.

None of these raise for missing or unreadable paths; such paths simply
classify as ``False``.
"""

from __future__ import annotations

from pathlib import Path

from blurhash_map.config.model import BlurHashMapConfig
from blurhash_map.constants.extensions import SIDECAR_EXTENSION


def sidecar_path_for(image_path: Path) -> Path:
    """Return the side-car location for ``image_path`` (``<image>.hash``)."""
    return image_path.with_name(image_path.name + SIDECAR_EXTENSION)


def image_path_for(sidecar_path: Path) -> Path:
    """Strip a trailing side-car suffix; other paths are returned unchanged."""
    if sidecar_path.name.endswith(SIDECAR_EXTENSION):
        return sidecar_path.with_name(sidecar_path.name[: -len(SIDECAR_EXTENSION)])
    return sidecar_path


def is_sidecar_name(path: Path) -> bool:
    """Return True if ``path`` carries the side-car suffix (existence not checked)."""
    return path.suffix == SIDECAR_EXTENSION


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


class PathClassifier:
    """Answers whether paths are in-scope images or valid side-cars."""

    def __init__(self, config: BlurHashMapConfig) -> None:
        self._root = config.assets_root
        self._extensions = frozenset(config.image_extensions)

    @property
    def root(self) -> Path:
        return self._root

    def is_under_root(self, path: Path) -> bool:
        """Return True if ``path`` resolves to the asset root or below it."""
        try:
            path.resolve().relative_to(self._root)
        except (OSError, RuntimeError, ValueError):
            return False
        return True

    def has_image_extension(self, path: Path) -> bool:
        return path.suffix.lower().lstrip(".") in self._extensions

    def is_in_scope_image(self, path: Path) -> bool:
        """Existing file, allowed extension (case-insensitive), under the root."""
        return self.has_image_extension(path) and _is_file(path) and self.is_under_root(path)

    def is_valid_sidecar(self, path: Path) -> bool:
        """Existing file, exact side-car suffix, under the root."""
        return is_sidecar_name(path) and _is_file(path) and self.is_under_root(path)

    def short_path(self, path: Path) -> str:
        """Render ``path`` relative to the asset root with a leading ``/``."""
        try:
            relative = path.absolute().relative_to(self._root)
        except ValueError:
            try:
                relative = path.resolve().relative_to(self._root)
            except (OSError, RuntimeError, ValueError):
                return path.as_posix()
        return "/" + relative.as_posix()
