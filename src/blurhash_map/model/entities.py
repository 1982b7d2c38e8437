"""Result records produced by sync passes."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from blurhash_map.types import SyncAction


@dataclass
class SyncReport:
    """Outcome of reconciling a batch of paths (or a full scan)."""

    actions: Counter[str] = field(default_factory=Counter)
    failed_paths: list[Path] = field(default_factory=list)
    pruned: list[Path] = field(default_factory=list)
    index_path: Path | None = None
    index_entries: int = 0

    def record(self, path: Path, action: SyncAction) -> None:
        self.actions[action] += 1
        if action == "failed":
            self.failed_paths.append(path)

    def count(self, action: SyncAction) -> int:
        return self.actions.get(action, 0)

    @property
    def processed(self) -> int:
        return sum(self.actions.values())
