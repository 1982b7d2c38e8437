"""Tests for the sync summary reporter."""

from __future__ import annotations

from pathlib import Path

from blurhash_map.model import SyncReport
from blurhash_map.reporting import StdoutReporter


def _report() -> SyncReport:
    report = SyncReport()
    report.record(Path("/assets/a.jpg"), "generated")
    report.record(Path("/assets/b.jpg"), "skipped")
    report.record(Path("/assets/c.jpg"), "failed")
    report.pruned = [Path("/assets/old.jpg.hash")]
    report.index_path = Path("/out/hashmap.json")
    report.index_entries = 2
    return report


def test_render_plain_summary() -> None:
    output = StdoutReporter(_report(), color=False).render()

    assert "Images      3 processed" in output
    assert "Actions     generated=1, skipped=1, failed=1" in output
    assert "Pruned      1 orphaned hash file(s)" in output
    assert "Index       2 entries -> /out/hashmap.json" in output
    assert "Failed      1" in output
    assert "\033[" not in output


def test_verbose_lists_paths() -> None:
    output = StdoutReporter(_report(), color=False, verbose=True).render()

    assert "    - /assets/c.jpg" in output
    assert "    - /assets/old.jpg.hash" in output


def test_color_output_uses_ansi() -> None:
    output = StdoutReporter(_report(), color=True).render()

    assert "\033[32;1mgenerated=1\033[0m" in output


def test_empty_report() -> None:
    output = StdoutReporter(SyncReport(), color=False).render()

    assert "Actions     none" in output
    assert "Index" not in output.split("Pruned")[1]
