"""Tests for atomic JSON and text writers."""

from __future__ import annotations

import json
import os
import stat
from collections.abc import Iterator
from pathlib import Path

import pytest

from blurhash_map.io import write_json_atomic, write_text_atomic


@pytest.fixture()
def umask_022() -> Iterator[None]:
    previous = os.umask(0o022)
    try:
        yield
    finally:
        os.umask(previous)


def _mode(path: Path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


def test_write_json_atomic_cleans_temp_file_on_error(tmp_path: Path) -> None:
    out_path = tmp_path / "hashmap.json"
    temp_prefix = ".tmp-"
    temp_suffix = ".json"

    with pytest.raises(TypeError):
        write_json_atomic(
            path=out_path,
            payload=[["/a.jpg", object()]],
            temp_prefix=temp_prefix,
            temp_suffix=temp_suffix,
        )

    leftovers = [
        item for item in tmp_path.iterdir() if item.name.startswith(temp_prefix) and item.name.endswith(temp_suffix)
    ]
    assert not leftovers
    assert not out_path.exists()


def test_write_json_atomic_creates_parent_dirs(tmp_path: Path) -> None:
    out_path = tmp_path / "nested" / "hashmap.json"

    write_json_atomic(path=out_path, payload=[["/ä.jpg", "L00"]], temp_prefix=".tmp-", temp_suffix=".json")

    assert json.loads(out_path.read_text(encoding="utf-8")) == [["/ä.jpg", "L00"]]
    assert out_path.read_text(encoding="utf-8").endswith("]\n")


def test_write_text_atomic_replaces_content(tmp_path: Path) -> None:
    target = tmp_path / "a.jpg.hash"
    target.write_text("a much longer previous hash value", encoding="utf-8")

    write_text_atomic(path=target, text="LNEW", temp_prefix=".sidecar-", temp_suffix=".tmp")

    assert target.read_text(encoding="utf-8") == "LNEW"
    assert [item.name for item in tmp_path.iterdir()] == ["a.jpg.hash"]


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
@pytest.mark.usefixtures("umask_022")
def test_new_files_follow_umask(tmp_path: Path) -> None:
    sidecar = tmp_path / "a.jpg.hash"
    index = tmp_path / "hashmap.json"

    write_text_atomic(path=sidecar, text="LNEW", temp_prefix=".sidecar-", temp_suffix=".tmp")
    write_json_atomic(path=index, payload=[], temp_prefix=".tmp-", temp_suffix=".json")

    assert _mode(sidecar) == 0o644
    assert _mode(index) == 0o644


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
@pytest.mark.usefixtures("umask_022")
def test_rewrite_keeps_existing_mode(tmp_path: Path) -> None:
    index = tmp_path / "hashmap.json"
    index.write_text("[]\n", encoding="utf-8")
    index.chmod(0o664)

    write_json_atomic(path=index, payload=[["/a.jpg", "L00"]], temp_prefix=".tmp-", temp_suffix=".json")

    assert _mode(index) == 0o664
