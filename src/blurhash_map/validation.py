"""Preflight validation shared by ``validate-config``, ``build`` and ``watch``."""

from __future__ import annotations

from pathlib import Path

from blurhash_map.config import validate_config_file
from blurhash_map.constants.validation import CFG010
from blurhash_map.exceptions.validation import ValidationError, sort_errors


def preflight_validate(
    cwd: Path,
    config_path: Path | None = None,
    *,
    assets: Path | None = None,
) -> list[ValidationError]:
    """Run all preflight checks and return errors in deterministic order.

    Returns an empty list when everything is valid.
    """
    errors: list[ValidationError] = []
    if assets is not None:
        resolved = (assets if assets.is_absolute() else cwd / assets).resolve()
        if not resolved.is_dir():
            errors.append(
                ValidationError(
                    code=CFG010,
                    path=str(resolved),
                    field="assets",
                    message=f"assets directory does not exist: {resolved}",
                )
            )

    errors.extend(validate_config_file(cwd, config_path, config_explicit=config_path is not None))
    return sort_errors(errors)
