"""Immutable run configuration for blurhash-map."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from blurhash_map.config.extensions import validate_image_extensions
from blurhash_map.constants.config import (
    COMPONENT_MAX,
    COMPONENT_MIN,
    DEFAULT_COMPONENT_X,
    DEFAULT_COMPONENT_Y,
    DEFAULT_TARGET_JSON,
)
from blurhash_map.constants.encoder import ENCODER_BINARY_NAME, ENCODER_BUILD_COMMAND, ENCODER_SOURCE_DIR
from blurhash_map.constants.extensions import ALLOWED_IMAGE_TYPES, INDEX_EXTENSION
from blurhash_map.exceptions import InvalidConfiguration


def component_violations(x: object, y: object) -> list[str]:
    """Return one message per component value outside ``[1, 9]``."""
    violations: list[str] = []
    for name, value in (("x", x), ("y", y)):
        if isinstance(value, bool) or not isinstance(value, int):
            violations.append(f"component {name} must be an integer, got {value!r}")
        elif not COMPONENT_MIN <= value <= COMPONENT_MAX:
            violations.append(f"component {name} must be between {COMPONENT_MIN} and {COMPONENT_MAX}, got {value}")
    return violations


@dataclass(frozen=True)
class ComponentRatio:
    """Horizontal and vertical blur hash component counts."""

    x: int = DEFAULT_COMPONENT_X
    y: int = DEFAULT_COMPONENT_Y

    def __post_init__(self) -> None:
        violations = component_violations(self.x, self.y)
        if violations:
            raise InvalidConfiguration("; ".join(violations), tuple(violations))


@dataclass(frozen=True)
class EncoderSettings:
    """Where the encoder binary lives and how to build it when it is missing."""

    executable: Path
    source_dir: Path
    build_command: tuple[str, ...] = ENCODER_BUILD_COMMAND

    @classmethod
    def default(cls, base: Path | None = None) -> EncoderSettings:
        """Return settings relative to ``base`` (the working directory by default)."""
        base = (base or Path.cwd()).resolve()
        return cls(executable=base / ENCODER_BINARY_NAME, source_dir=base / ENCODER_SOURCE_DIR)

    @property
    def built_executable(self) -> Path:
        """Path the build step leaves the freshly compiled binary at."""
        return self.source_dir / self.executable.name


@dataclass(frozen=True)
class BlurHashMapConfig:
    """Resolved configuration shared by every component of a run."""

    assets_root: Path
    image_extensions: tuple[str, ...] = ALLOWED_IMAGE_TYPES
    components: ComponentRatio = ComponentRatio()
    target_json: Path = Path(DEFAULT_TARGET_JSON)
    encoder: EncoderSettings = field(default_factory=EncoderSettings.default)

    def __post_init__(self) -> None:
        object.__setattr__(self, "assets_root", Path(self.assets_root).resolve())
        object.__setattr__(self, "image_extensions", validate_image_extensions(self.image_extensions))
        target = Path(self.target_json).resolve()
        if target.suffix != INDEX_EXTENSION:
            raise InvalidConfiguration(f"target must be a {INDEX_EXTENSION} file, got {target.name!r}")
        object.__setattr__(self, "target_json", target)
