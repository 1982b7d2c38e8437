"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

SyncAction: TypeAlias = Literal["generated", "repaired", "skipped", "deleted", "failed", "unchanged"]

HashMapEntry: TypeAlias = tuple[str, str]
HashMapData: TypeAlias = list[HashMapEntry]
