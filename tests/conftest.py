"""Shared pytest fixtures: temporary asset trees and stand-in encoders."""

from __future__ import annotations

import hashlib
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from blurhash_map.config import BlurHashMapConfig, ComponentRatio, EncoderSettings
from blurhash_map.encoder import EncoderInvoker
from blurhash_map.exceptions import EncodingFailed
from blurhash_map.scanner import PathClassifier
from blurhash_map.sync import SidecarSynchronizer

FAKE_ENCODER_BODY = """
import hashlib
import sys

x, y, path = sys.argv[1:4]
with open(path, "rb") as handle:
    digest = hashlib.sha256(handle.read()).hexdigest()[:16]
print(f"L{x}{y}{digest}")
"""


def fake_hash(image_path: Path, x: int = 4, y: int = 3) -> str:
    """Hash the fake encoder prints for ``image_path``."""
    return f"L{x}{y}{hashlib.sha256(image_path.read_bytes()).hexdigest()[:16]}"


def write_script(path: Path, body: str) -> Path:
    """Write an executable Python script run by the current interpreter."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"#!{sys.executable}\n{body}", encoding="utf-8")
    path.chmod(0o755)
    return path


class RecordingEncoder(EncoderInvoker):
    """Encoder stand-in that records calls instead of spawning a process."""

    def __init__(self, settings: EncoderSettings, components: ComponentRatio) -> None:
        super().__init__(settings, components)
        self.calls: list[Path] = []
        self.fail_for: set[str] = set()

    def ensure(self) -> bool:
        return True

    def compute_hash(self, image_path: Path) -> str:
        self.calls.append(image_path)
        if image_path.name in self.fail_for:
            raise EncodingFailed(image_path, "encoder exited with status 1", returncode=1)
        return f"HASH-{image_path.name}"


@pytest.fixture()
def assets_root(tmp_path: Path) -> Path:
    root = tmp_path / "assets"
    root.mkdir()
    return root.resolve()


@pytest.fixture()
def fake_encoder(tmp_path: Path) -> Path:
    return write_script(tmp_path / "bin" / "blurhash_encoder", FAKE_ENCODER_BODY)


@pytest.fixture()
def write_file() -> Callable[..., Path]:
    def _write(path: Path, content: bytes = b"\x89PNG fake image bytes") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture()
def make_config(tmp_path: Path, assets_root: Path, fake_encoder: Path) -> Callable[..., BlurHashMapConfig]:
    def _make(**overrides: object) -> BlurHashMapConfig:
        values: dict[str, object] = {
            "assets_root": assets_root,
            "target_json": tmp_path / "out" / "hashmap.json",
            "encoder": EncoderSettings(executable=fake_encoder, source_dir=tmp_path / "encoder-src"),
        }
        values.update(overrides)
        return BlurHashMapConfig(**values)  # type: ignore[arg-type]

    return _make


@pytest.fixture()
def config(make_config: Callable[..., BlurHashMapConfig]) -> BlurHashMapConfig:
    return make_config()


@pytest.fixture()
def classifier(config: BlurHashMapConfig) -> PathClassifier:
    return PathClassifier(config)


@pytest.fixture()
def recording_encoder(config: BlurHashMapConfig) -> RecordingEncoder:
    return RecordingEncoder(config.encoder, config.components)


@pytest.fixture()
def synchronizer(classifier: PathClassifier, recording_encoder: RecordingEncoder) -> SidecarSynchronizer:
    return SidecarSynchronizer(classifier, recording_encoder)


@pytest.fixture()
def expected_hash() -> Callable[..., str]:
    return fake_hash


@pytest.fixture()
def make_script() -> Callable[[Path, str], Path]:
    return write_script
