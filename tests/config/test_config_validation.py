"""Tests for collect-all config validation (codes, messages, ordering)."""

from __future__ import annotations

from pathlib import Path

import pytest

from blurhash_map.config import _suggest_key, validate_config_file
from blurhash_map.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    CFG009,
    CFG010,
)
from blurhash_map.exceptions.validation import ValidationError, format_errors, sort_errors
from blurhash_map.validation import preflight_validate


def _write_config(tmp_path: Path, content: str) -> Path:
    cfg = tmp_path / ".blurhash-map.yaml"
    cfg.write_text(content, encoding="utf-8")
    return cfg


def _codes(errors: list[ValidationError]) -> list[str]:
    return [error.code for error in errors]


def test_validation_error_format_with_all_fields() -> None:
    err = ValidationError(
        code=CFG004,
        path="/repo/.blurhash-map.yaml",
        field="asets",
        message="unknown key `asets`",
        hint="did you mean `assets`?",
    )

    assert err.format() == "[CFG004] /repo/.blurhash-map.yaml asets: unknown key `asets` (did you mean `assets`?)"


def test_validation_error_format_without_optional_fields() -> None:
    err = ValidationError(code=CFG003, path="/repo/.blurhash-map.yaml", field="", message="config must be a mapping")

    assert err.format() == "[CFG003] /repo/.blurhash-map.yaml config must be a mapping"


def test_sort_and_format_are_deterministic() -> None:
    errors = [
        ValidationError(code=CFG006, path="p", field="extensions", message="b"),
        ValidationError(code=CFG004, path="p", field="zz", message="a"),
    ]

    assert _codes(sort_errors(errors)) == [CFG004, CFG006]
    assert format_errors(errors).splitlines()[0].startswith("[CFG004]")


def test_missing_default_file_is_valid(tmp_path: Path) -> None:
    assert validate_config_file(tmp_path) == []


def test_missing_explicit_file(tmp_path: Path) -> None:
    errors = validate_config_file(tmp_path, tmp_path / "nope.yaml", config_explicit=True)

    assert _codes(errors) == [CFG001]


def test_invalid_yaml(tmp_path: Path) -> None:
    _write_config(tmp_path, "assets: [oops\n")

    assert _codes(validate_config_file(tmp_path)) == [CFG002]


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    _write_config(tmp_path, "- jpg\n- png\n")

    errors = validate_config_file(tmp_path)

    assert _codes(errors) == [CFG003]
    assert "list" in errors[0].message


def test_empty_file_is_valid(tmp_path: Path) -> None:
    _write_config(tmp_path, "")

    assert validate_config_file(tmp_path) == []


def test_unknown_key_gets_suggestion(tmp_path: Path) -> None:
    _write_config(tmp_path, "asets: images\n")

    errors = validate_config_file(tmp_path)

    assert _codes(errors) == [CFG004]
    assert errors[0].hint == "did you mean `assets`?"


def test_extension_outside_universe(tmp_path: Path) -> None:
    _write_config(tmp_path, "extensions: [jpg, txt, gif]\n")

    errors = validate_config_file(tmp_path)

    assert _codes(errors) == [CFG006, CFG006]
    assert {error.message for error in errors} == {
        "unsupported image extension 'txt'",
        "unsupported image extension 'gif'",
    }


def test_extensions_as_comma_string(tmp_path: Path) -> None:
    _write_config(tmp_path, "extensions: 'jpg, PNG'\n")

    assert validate_config_file(tmp_path) == []


@pytest.mark.parametrize(
    ("content", "code"),
    [
        pytest.param("extensions: []\n", CFG008, id="empty-extensions"),
        pytest.param("extensions: 12\n", CFG005, id="extensions-type"),
        pytest.param("assets: 12\n", CFG005, id="assets-type"),
        pytest.param("target: map.txt\n", CFG009, id="target-extension"),
        pytest.param("target: [a]\n", CFG005, id="target-type"),
        pytest.param("components: 4\n", CFG005, id="components-type"),
        pytest.param("components: {x: 10, y: 3}\n", CFG007, id="component-range"),
        pytest.param("components: {z: 1}\n", CFG004, id="component-unknown-key"),
        pytest.param("encoder: yes\n", CFG005, id="encoder-type"),
        pytest.param("encoder: {executable: 3}\n", CFG005, id="encoder-executable-type"),
        pytest.param("encoder: {build_command: []}\n", CFG005, id="encoder-build-command"),
        pytest.param("encoder: {binary: x}\n", CFG004, id="encoder-unknown-key"),
    ],
)
def test_single_violation_codes(tmp_path: Path, content: str, code: str) -> None:
    _write_config(tmp_path, content)

    assert _codes(validate_config_file(tmp_path)) == [code]


def test_full_valid_config(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        "assets: public\n"
        "extensions: [jpg, jpeg]\n"
        "components: {x: 9, y: 1}\n"
        "target: out/hashmap.json\n"
        "encoder:\n"
        "  executable: bin/enc\n"
        "  source_dir: native\n"
        "  build_command: [make, enc]\n",
    )

    assert validate_config_file(tmp_path) == []


def test_suggest_key_without_close_match() -> None:
    assert _suggest_key("zzzzzz", ALLOWED_CONFIG_KEYS) == ""


def test_preflight_reports_missing_assets_dir(tmp_path: Path) -> None:
    errors = preflight_validate(tmp_path, assets=Path("missing"))

    assert _codes(errors) == [CFG010]


def test_preflight_combines_assets_and_config_errors(tmp_path: Path) -> None:
    _write_config(tmp_path, "extensions: [txt]\n")

    errors = preflight_validate(tmp_path, assets=tmp_path / "missing")

    assert _codes(errors) == [CFG006, CFG010]


def test_preflight_clean(tmp_path: Path) -> None:
    (tmp_path / "assets").mkdir()

    assert preflight_validate(tmp_path, assets=tmp_path / "assets") == []
