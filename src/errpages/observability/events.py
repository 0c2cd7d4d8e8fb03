"""Build event model.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

"""

import time
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PageWritten:
    """A rendered page was written to disk.

    Attributes:
        template: Template name.
        code: Status code of the page.
        target: Path of the written file.
        size_bytes: Size of the written file in bytes.
        duration_ms: Time taken to render and write the page.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    template: str
    code: str
    target: str
    size_bytes: int
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class IndexWritten:
    """The index document was rendered and written.

    Attributes:
        target: Path of the written index file.
        templates: Number of template sections in the index.
        entries: Total number of links in the index.
        duration_ms: Time taken to render and write the index.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    target: str
    templates: int
    entries: int
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class BuildFinished:
    """A build completed successfully."""

    output_dir: str
    pages: int
    duration_ms: float
    timestamp_ns: int


type BuildStackEvent = PageWritten | IndexWritten | BuildFinished


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
