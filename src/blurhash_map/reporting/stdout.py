"""Stdout reporter for sync results."""

from __future__ import annotations

from blurhash_map.constants.branding import ASCII_LOGO_LINES, SYNC_SUMMARY_TITLE
from blurhash_map.constants.reporting import ACTION_COLORS, ACTION_ORDER, ANSI_DIM, ANSI_RESET
from blurhash_map.model import SyncReport


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats a :class:`SyncReport` as a short terminal summary."""

    def __init__(self, report: SyncReport, *, color: bool = True, verbose: bool = False) -> None:
        self._report = report
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        r = self._report
        sep = "  " + "─" * 38
        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {SYNC_SUMMARY_TITLE}",
            sep,
            "",
            f"  Images      {r.processed} processed",
            f"  Actions     {self._format_actions()}",
            f"  Pruned      {len(r.pruned)} orphaned hash file(s)",
        ]
        if r.index_path is not None:
            lines.append(f"  Index       {r.index_entries} entries -> {r.index_path}")

        if r.failed_paths:
            lines.append(f"  Failed      {len(r.failed_paths)}")
            if self._verbose:
                lines.extend(f"    - {path}" for path in r.failed_paths)

        if self._verbose and r.pruned:
            lines.append("")
            lines.append("  Removed hash files:")
            lines.extend(f"    - {path}" for path in r.pruned)

        lines.append("")
        return "\n".join(lines)

    def _format_actions(self) -> str:
        parts: list[str] = []
        for action in ACTION_ORDER:
            count = self._report.actions.get(action, 0)
            if not count:
                continue
            text = f"{action}={count}"
            color = ACTION_COLORS.get(action, "")
            parts.append(_colorize(text, color) if self._color and color else text)
        if not parts:
            return _colorize("none", ANSI_DIM) if self._color else "none"
        return ", ".join(parts)
