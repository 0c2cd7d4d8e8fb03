"""Build banner and summary: status output on stderr.

Detects ``NO_COLOR`` / ``TERM`` for safe fallback to plain text.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from errpages.config import ErrorPagesConfig
    from errpages.export.build import BuildResult
    from errpages.observability.collector import BuildCollector


# ---------------------------------------------------------------------------
# ANSI helpers: respect NO_COLOR (https://no-color.org)
# ---------------------------------------------------------------------------

def _supports_color() -> bool:
    """Return True if the terminal supports ANSI colors."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


_COLOR = _supports_color()

_RESET = "\033[0m" if _COLOR else ""
_BOLD = "\033[1m" if _COLOR else ""
_DIM = "\033[2m" if _COLOR else ""
_GREEN = "\033[32m" if _COLOR else ""
_YELLOW = "\033[33m" if _COLOR else ""


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def _format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    return f"{size / 1024:.1f} KiB"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def print_banner(
    config: ErrorPagesConfig,
    template_count: int,
    page_count: int,
    *,
    stream: TextIO | None = None,
) -> None:
    """Print the build banner.

    Args:
        config: Resolved configuration.
        template_count: Number of templates loaded.
        page_count: Number of error codes in the catalog.
        stream: Output stream (stderr by default).

    """
    from errpages import __version__

    badge = f"{_YELLOW}[build]{_RESET}"
    lines: list[str] = [
        "",
        f"  {_BOLD}errpages{_RESET} {_DIM}v{__version__}{_RESET}  {badge}",
        f"  {_DIM}{'─' * 43}{_RESET}",
        f"  {_DIM}├─{_RESET} {_plural(template_count, 'template')} loaded",
        f"  {_DIM}├─{_RESET} {_plural(page_count, 'error code')}",
    ]
    if config.generate_index:
        lines.append(f"  {_DIM}├─{_RESET} index: {_GREEN}on{_RESET}")
    lines.append(f"  {_DIM}└─{_RESET} output: {_DIM}{config.output_path}{_RESET}")
    lines.append("")

    print("\n".join(lines), file=stream or sys.stderr)


def print_build_summary(
    result: BuildResult,
    *,
    collector: BuildCollector | None = None,
    stream: TextIO | None = None,
) -> None:
    """Print build completion summary.

    With a *collector*, per-template byte totals and the slowest page are
    listed from the recorded build events.

    """
    lines = [
        "─" * 41,
        f"  Wrote {_plural(result.total_pages, 'page')}"
        f" across {_plural(len(result.history), 'template')}",
    ]
    if collector is not None:
        for template, size in collector.bytes_by_template().items():
            lines.append(f"    {_DIM}{template}:{_RESET} {_format_size(size)}")
        slowest = collector.slowest_page()
        if slowest is not None:
            lines.append(
                f"  Slowest: {slowest.template}/{slowest.code}.html"
                f" {_DIM}({slowest.duration_ms:.1f}ms){_RESET}"
            )
    if result.index_path is not None:
        lines.append(f"  Index: {result.index_path}")
    lines.append(f"  Output: {result.output_dir}")
    lines.append(f"  Done in {result.duration_ms:.0f}ms")

    print("\n".join(lines), file=stream or sys.stderr)
