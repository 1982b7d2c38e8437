"""Config file validation for blurhash-map runs."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from blurhash_map.config.extensions import normalize_extension
from blurhash_map.config.model import component_violations
from blurhash_map.constants.config import CONFIG_FILENAME
from blurhash_map.constants.extensions import ALLOWED_IMAGE_TYPES, EXTENSION_LIST_SEPARATOR, INDEX_EXTENSION
from blurhash_map.constants.validation import (
    ALLOWED_COMPONENT_KEYS,
    ALLOWED_CONFIG_KEYS,
    ALLOWED_ENCODER_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    CFG009,
)
from blurhash_map.exceptions.validation import ValidationError


def resolve_config_path(cwd: Path, config_path: Path | None = None) -> Path:
    """Return the explicit config path, or the default file inside ``cwd``."""
    return config_path.resolve() if config_path else (cwd.resolve() / CONFIG_FILENAME)


def validate_config_file(
    cwd: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a ``.blurhash-map.yaml`` file and return all validation errors.

    Shared by ``blurhash-map validate-config`` and the preflight of ``build``
    and ``watch``. It never raises; every problem comes back as a
    :class:`ValidationError`.
    """
    errors: list[ValidationError] = []
    path = resolve_config_path(cwd, config_path)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    errors.extend(validate_config_mapping(raw, path_str))
    return errors


def validate_config_mapping(raw: dict[str, Any], path_str: str = "") -> list[ValidationError]:
    """Validate an already-parsed config mapping."""
    errors: list[ValidationError] = []

    for key in sorted(str(key) for key in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    if "assets" in raw and not isinstance(raw["assets"], str):
        errors.append(_type_error(path_str, "assets", "expected a directory path string"))

    if "target" in raw:
        val = raw["target"]
        if not isinstance(val, str):
            errors.append(_type_error(path_str, "target", "expected a file path string"))
        elif Path(val).suffix != INDEX_EXTENSION:
            errors.append(
                ValidationError(
                    code=CFG009,
                    path=path_str,
                    field="target",
                    message=f"`target` must end with {INDEX_EXTENSION}, got {val!r}",
                )
            )

    _validate_extensions(raw, path_str, errors)
    _validate_components_block(raw, path_str, errors)
    _validate_encoder_block(raw, path_str, errors)
    return errors


def _validate_extensions(raw: dict[str, Any], path_str: str, errors: list[ValidationError]) -> None:
    """Validate ``extensions`` as a list of strings or a comma separated string."""
    if "extensions" not in raw or raw["extensions"] is None:
        return
    val = raw["extensions"]
    if isinstance(val, str):
        values = [token for token in val.split(EXTENSION_LIST_SEPARATOR) if token.strip()]
    elif isinstance(val, (list, tuple)) and all(isinstance(item, str) for item in val):
        values = list(val)
    else:
        errors.append(_type_error(path_str, "extensions", "expected a list of strings or a comma separated string"))
        return

    if not values:
        errors.append(
            ValidationError(
                code=CFG008,
                path=path_str,
                field="extensions",
                message="`extensions` cannot be empty",
                hint=f"allowed: {', '.join(ALLOWED_IMAGE_TYPES)}",
            )
        )
        return

    for value in values:
        if normalize_extension(value) not in ALLOWED_IMAGE_TYPES:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field="extensions",
                    message=f"unsupported image extension {value!r}",
                    hint=f"allowed: {', '.join(ALLOWED_IMAGE_TYPES)}",
                )
            )


def _validate_components_block(raw: dict[str, Any], path_str: str, errors: list[ValidationError]) -> None:
    """Validate the ``components`` nested mapping."""
    if "components" not in raw or raw["components"] is None:
        return
    block = raw["components"]
    if not isinstance(block, dict):
        errors.append(_type_error(path_str, "components", "expected a mapping with `x` and `y`"))
        return

    for key in sorted(str(key) for key in block):
        if key not in ALLOWED_COMPONENT_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=f"components.{key}",
                    message=f"unknown key `components.{key}`",
                    hint=_suggest_key(key, ALLOWED_COMPONENT_KEYS),
                )
            )

    for message in component_violations(block.get("x", 4), block.get("y", 3)):
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field="components",
                message=message,
            )
        )


def _validate_encoder_block(raw: dict[str, Any], path_str: str, errors: list[ValidationError]) -> None:
    """Validate the ``encoder`` nested mapping."""
    if "encoder" not in raw or raw["encoder"] is None:
        return
    block = raw["encoder"]
    if not isinstance(block, dict):
        errors.append(_type_error(path_str, "encoder", "expected a mapping"))
        return

    for key in sorted(str(key) for key in block):
        if key not in ALLOWED_ENCODER_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=f"encoder.{key}",
                    message=f"unknown key `encoder.{key}`",
                    hint=_suggest_key(key, ALLOWED_ENCODER_KEYS),
                )
            )

    for key in ("executable", "source_dir"):
        if key in block and not isinstance(block[key], str):
            errors.append(_type_error(path_str, f"encoder.{key}", "expected a path string"))

    if "build_command" in block:
        val = block["build_command"]
        is_list = isinstance(val, (list, tuple)) and bool(val) and all(isinstance(item, str) for item in val)
        if not (isinstance(val, str) and val.strip()) and not is_list:
            errors.append(
                _type_error(path_str, "encoder.build_command", "expected a command string or list of strings")
            )


def _type_error(path_str: str, field: str, hint: str) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path_str,
        field=field,
        message=f"invalid type for `{field}`",
        hint=hint,
    )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
