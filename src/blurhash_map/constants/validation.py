"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # extension outside the allowed universe
CFG007: str = "CFG007"  # value out of range
CFG008: str = "CFG008"  # empty extension list
CFG009: str = "CFG009"  # invalid target file extension
CFG010: str = "CFG010"  # assets root not found

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "assets",
        "extensions",
        "components",
        "target",
        "encoder",
    }
)

ALLOWED_COMPONENT_KEYS: frozenset[str] = frozenset({"x", "y"})
ALLOWED_ENCODER_KEYS: frozenset[str] = frozenset({"executable", "source_dir", "build_command"})
