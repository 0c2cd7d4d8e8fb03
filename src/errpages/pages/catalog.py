"""Page catalog: per-status-code message and description.

The catalog is pure data: it knows nothing about templates.  Codes keep
the order in which they were first added, which is the order pages are
rendered in.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class PageDescriptor:
    """Data for one HTTP error page.

    Attributes:
        code: Status code as a string (e.g. ``"404"``).
        message: Short human-readable message (e.g. ``"Not Found"``).
        description: Longer explanation shown on the page.

    """

    code: str
    message: str
    description: str = ""


class PageCatalog:
    """Mapping from error code to its :class:`PageDescriptor`."""

    __slots__ = ("_pages",)

    def __init__(self) -> None:
        self._pages: dict[str, PageDescriptor] = {}

    @classmethod
    def from_mapping(cls, pages: Mapping[str, Any]) -> PageCatalog:
        """Build a catalog from ``{code: {"message": ..., "description": ...}}``.

        Values may also be ready-made :class:`PageDescriptor` instances.
        """
        catalog = cls()
        for code, value in pages.items():
            if isinstance(value, PageDescriptor):
                catalog.add_page(str(code), value.message, value.description)
            else:
                catalog.add_page(
                    str(code),
                    str(value.get("message", "")),
                    str(value.get("description", "")),
                )
        return catalog

    def add_page(self, code: str, message: str, description: str) -> None:
        """Insert or overwrite the descriptor for *code*."""
        self._pages[code] = PageDescriptor(code, message, description)

    def get(self, code: str) -> PageDescriptor | None:
        return self._pages.get(code)

    def codes(self) -> list[str]:
        """Codes in insertion order."""
        return list(self._pages)

    def __getitem__(self, code: str) -> PageDescriptor:
        return self._pages[code]

    def __contains__(self, code: object) -> bool:
        return code in self._pages

    def __iter__(self) -> Iterator[PageDescriptor]:
        return iter(self._pages.values())

    def __len__(self) -> int:
        return len(self._pages)
