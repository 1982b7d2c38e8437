"""Config loading and normalization for blurhash-map runs."""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import Any

import yaml

from blurhash_map.config.extensions import validate_image_extensions
from blurhash_map.config.model import BlurHashMapConfig, ComponentRatio, EncoderSettings
from blurhash_map.config.validator import resolve_config_path, validate_config_mapping
from blurhash_map.constants.config import DEFAULT_COMPONENT_X, DEFAULT_COMPONENT_Y, DEFAULT_TARGET_JSON
from blurhash_map.constants.extensions import ALLOWED_IMAGE_TYPES, EXTENSION_LIST_SEPARATOR
from blurhash_map.exceptions import InvalidConfiguration
from blurhash_map.exceptions.validation import format_errors, sort_errors


def load_config(
    cwd: Path | None = None,
    config_path: Path | None = None,
    *,
    assets: Path | None = None,
    extensions: tuple[str, ...] | None = None,
    component_x: int | None = None,
    component_y: int | None = None,
    target: Path | None = None,
    encoder_executable: Path | None = None,
) -> BlurHashMapConfig:
    """Load ``.blurhash-map.yaml`` (or an explicit file) and apply keyword overrides.

    Keyword arguments win over file values. Relative paths found in the file
    resolve against the file's directory; relative overrides resolve against
    the working directory. Every violation is collected before raising
    :class:`InvalidConfiguration`.
    """
    cwd = (cwd or Path.cwd()).resolve()
    raw = _read_config_mapping(resolve_config_path(cwd, config_path), explicit=config_path is not None)
    base = resolve_config_path(cwd, config_path).parent

    assets_value = _pick_path(assets, raw.get("assets"), cwd=cwd, base=base)
    if assets_value is None:
        raise InvalidConfiguration("Please define the assets path to be watched")

    extensions_value = extensions if extensions is not None else _raw_extensions(raw.get("extensions"))

    components_raw = raw.get("components") or {}
    components = ComponentRatio(
        x=component_x if component_x is not None else components_raw.get("x", DEFAULT_COMPONENT_X),
        y=component_y if component_y is not None else components_raw.get("y", DEFAULT_COMPONENT_Y),
    )

    target_value = _pick_path(target, raw.get("target"), cwd=cwd, base=base) or (cwd / DEFAULT_TARGET_JSON)

    return BlurHashMapConfig(
        assets_root=assets_value,
        image_extensions=validate_image_extensions(extensions_value),
        components=components,
        target_json=target_value,
        encoder=_build_encoder_settings(raw.get("encoder") or {}, cwd=cwd, base=base, executable=encoder_executable),
    )


def _read_config_mapping(path: Path, *, explicit: bool) -> dict[str, Any]:
    """Read and validate the YAML mapping at ``path``; a missing default file is empty."""
    if not path.exists():
        if explicit:
            raise InvalidConfiguration(f"Config file not found: {path}")
        return {}

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise InvalidConfiguration(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise InvalidConfiguration(f"Config file at {path} must be a YAML mapping")

    errors = sort_errors(validate_config_mapping(raw, str(path)))
    if errors:
        raise InvalidConfiguration(format_errors(errors), tuple(error.format() for error in errors))
    return raw


def _pick_path(override: Path | None, raw_value: Any, *, cwd: Path, base: Path) -> Path | None:
    if override is not None:
        return override if override.is_absolute() else cwd / override
    if isinstance(raw_value, str) and raw_value.strip():
        candidate = Path(raw_value).expanduser()
        return candidate if candidate.is_absolute() else base / candidate
    return None


def _raw_extensions(value: Any) -> tuple[str, ...]:
    if value is None:
        return ALLOWED_IMAGE_TYPES
    if isinstance(value, str):
        return tuple(token for token in value.split(EXTENSION_LIST_SEPARATOR) if token.strip())
    return tuple(value)


def _build_encoder_settings(
    raw: dict[str, Any],
    *,
    cwd: Path,
    base: Path,
    executable: Path | None,
) -> EncoderSettings:
    """Build EncoderSettings from the ``encoder`` block and an optional executable override."""
    defaults = EncoderSettings.default(cwd)
    build_command = raw.get("build_command", defaults.build_command)
    if isinstance(build_command, str):
        build_command = shlex.split(build_command)
    return EncoderSettings(
        executable=_pick_path(executable, raw.get("executable"), cwd=cwd, base=base) or defaults.executable,
        source_dir=_pick_path(None, raw.get("source_dir"), cwd=cwd, base=base) or defaults.source_dir,
        build_command=tuple(build_command),
    )
