"""JSON and text write helpers with atomic persistence."""

from __future__ import annotations

import json
import os
import stat
import tempfile
from collections.abc import Callable
from contextlib import suppress
from pathlib import Path
from typing import TextIO


def write_json_atomic(
    *,
    path: Path,
    payload: object,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Persist JSON atomically by writing to a temp file then renaming."""

    def _dump(handle: TextIO) -> None:
        json.dump(payload, handle, indent=2, ensure_ascii=False)
        handle.write("\n")

    _write_atomic(path, _dump, temp_prefix=temp_prefix, temp_suffix=temp_suffix)


def write_text_atomic(
    *,
    path: Path,
    text: str,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Replace the content of ``path`` with ``text`` in one rename."""
    _write_atomic(path, lambda handle: handle.write(text), temp_prefix=temp_prefix, temp_suffix=temp_suffix)


def _write_atomic(
    path: Path,
    write: Callable[[TextIO], object],
    *,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            write(handle)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    try:
        os.chmod(temp_name, _target_mode(path))
        os.replace(temp_name, path)
    except OSError:
        with suppress(FileNotFoundError):
            Path(temp_name).unlink()
        raise


def _target_mode(path: Path) -> int:
    """Keep the mode of an existing target, else the umask default for new files."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
