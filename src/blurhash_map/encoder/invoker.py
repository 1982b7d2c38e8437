"""Bootstrap and invocation of the external encoder binary.

The encoder is called as ``<binary> <componentX> <componentY> <image>`` and
must print the hash on stdout and exit 0. Calls block until the process
exits; no timeout is applied.
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

from blurhash_map.config.model import ComponentRatio, EncoderSettings
from blurhash_map.exceptions import EncodingFailed

logger = logging.getLogger(__name__)


class EncoderInvoker:
    """Runs the encoder binary described by :class:`EncoderSettings`."""

    def __init__(self, settings: EncoderSettings, components: ComponentRatio) -> None:
        self._settings = settings
        self._components = components

    @property
    def executable(self) -> Path:
        return self._settings.executable

    def ensure(self) -> bool:
        """Make sure the encoder binary is in place, building it if needed.

        Returns ``False`` (after logging) when the binary cannot be produced.
        Hash generation then fails per file instead of aborting the run.
        """
        settings = self._settings
        if settings.executable.is_file():
            logger.debug("Encoder found at %s", settings.executable)
            return True

        if settings.built_executable.is_file():
            return self._move_into_place()

        if not settings.source_dir.is_dir():
            logger.error("Encoder missing and source directory not found: %s", settings.source_dir)
            return False

        logger.info("Building encoder: %s (in %s)", " ".join(settings.build_command), settings.source_dir)
        try:
            subprocess.run(
                list(settings.build_command),
                cwd=settings.source_dir,
                check=True,
                capture_output=True,
                text=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            stderr = getattr(exc, "stderr", None)
            logger.error("Encoder build failed: %s%s", exc, f"\n{stderr.strip()}" if stderr else "")
            return False

        return self._move_into_place()

    def _move_into_place(self) -> bool:
        settings = self._settings
        try:
            settings.executable.parent.mkdir(parents=True, exist_ok=True)
            os.replace(settings.built_executable, settings.executable)
        except OSError as exc:
            logger.error("Cannot move encoder %s to %s: %s", settings.built_executable, settings.executable, exc)
            return False
        logger.info("Encoder ready at %s", settings.executable)
        return True

    def compute_hash(self, image_path: Path) -> str:
        """Return the blur hash printed by the encoder for ``image_path``."""
        command = [
            str(self._settings.executable),
            str(self._components.x),
            str(self._components.y),
            str(image_path),
        ]
        try:
            completed = subprocess.run(command, capture_output=True, check=False)
        except OSError as exc:
            raise EncodingFailed(image_path, f"cannot run encoder {self._settings.executable} ({exc})") from exc

        if completed.returncode != 0:
            detail = completed.stderr.decode("utf-8", errors="replace").strip()
            message = f"encoder exited with status {completed.returncode}"
            if detail:
                message = f"{message} ({detail})"
            raise EncodingFailed(image_path, message, returncode=completed.returncode)

        try:
            hash_value = completed.stdout.decode("utf-8").strip()
        except UnicodeDecodeError as exc:
            raise EncodingFailed(
                image_path, f"encoder output is not valid UTF-8 ({exc})", returncode=completed.returncode
            ) from exc
        if not hash_value:
            raise EncodingFailed(image_path, "encoder produced no output", returncode=completed.returncode)
        return hash_value
