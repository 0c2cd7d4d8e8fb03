"""Build observability: frozen event records and a bounded event log.

Quick Start:
    >>> from errpages.observability import BuildCollector, EventLog
    >>> log = EventLog()
    >>> collector = BuildCollector(log)
    >>> # Pass collector to BuildOrchestrator(..., collector=collector)
    >>> # then read collector.bytes_by_template() after the build

"""

from errpages.observability.collector import BuildCollector
from errpages.observability.events import (
    BuildFinished,
    BuildStackEvent,
    IndexWritten,
    PageWritten,
    now_ns,
)
from errpages.observability.log import EventLog

__all__ = [
    "BuildCollector",
    "BuildFinished",
    "BuildStackEvent",
    "EventLog",
    "IndexWritten",
    "PageWritten",
    "now_ns",
]
