"""Export layer: static output generation.

Writes the rendered error page matrix as plain HTML files, plus an
optional index document.
"""

from errpages.export.build import (
    BuildOrchestrator,
    BuildResult,
    HistoryItem,
    build,
    ensure_directory,
)

__all__ = ["BuildOrchestrator", "BuildResult", "HistoryItem", "build", "ensure_directory"]
