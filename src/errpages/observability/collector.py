"""Build collector: records build events into an event log.

The orchestrator calls the ``record_*`` methods while it builds; the CLI
reads the per-template totals back for its summary.
"""

from __future__ import annotations

from errpages.observability.events import (
    BuildFinished,
    IndexWritten,
    PageWritten,
    now_ns,
)
from errpages.observability.log import EventLog


class BuildCollector:
    """Event collector for the build pipeline.

    Args:
        log: The EventLog to store events in.

    """

    __slots__ = ("_log",)

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    def record_page(
        self,
        template: str,
        code: str,
        target: str,
        *,
        size_bytes: int = 0,
        duration_ms: float = 0.0,
    ) -> None:
        """Record a written error page."""
        self._log.append(
            PageWritten(
                template=template,
                code=code,
                target=target,
                size_bytes=size_bytes,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_index(
        self,
        target: str,
        *,
        templates: int = 0,
        entries: int = 0,
        duration_ms: float = 0.0,
    ) -> None:
        """Record the written index document."""
        self._log.append(
            IndexWritten(
                target=target,
                templates=templates,
                entries=entries,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_finished(
        self,
        output_dir: str,
        *,
        pages: int = 0,
        duration_ms: float = 0.0,
    ) -> None:
        """Record a completed build."""
        self._log.append(
            BuildFinished(
                output_dir=output_dir,
                pages=pages,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

    def bytes_by_template(self) -> dict[str, int]:
        """Total bytes written per template, in first-write order."""
        totals: dict[str, int] = {}
        for event in self._log.events(PageWritten):
            totals[event.template] = totals.get(event.template, 0) + event.size_bytes
        return totals

    def slowest_page(self) -> PageWritten | None:
        """The page that took longest to render and write, if any."""
        pages = self._log.events(PageWritten)
        if not pages:
            return None
        return max(pages, key=lambda event: event.duration_ms)
