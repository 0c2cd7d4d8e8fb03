"""Build orchestration: write every rendered error page to disk.

One call to :meth:`BuildOrchestrator.build` is one linear pipeline:

    1. Prepare the output directory
    2. Render and write every (template, code) page
    3. Sort the per-template history by code (index only)
    4. Render and write ``index.html`` (index only)

The pipeline is fail-fast.  Files written before a failure stay on disk.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError

from errpages._errors import (
    ConfigError,
    DirectoryError,
    RenderError,
    TemplateParseError,
    WriteError,
)
from errpages.pages.error_pages import ErrorPageSet
from errpages.theme import INDEX_TEMPLATE_NAME, bundled_index_template, get_index_template_path

if TYPE_CHECKING:
    from errpages.config import ErrorPagesConfig
    from errpages.observability.collector import BuildCollector
    from errpages.pages.catalog import PageCatalog
    from errpages.pages.registry import TemplateRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HistoryItem:
    """One index entry.

    Attributes:
        code: Status code of the page.
        message: Page message, read back from the catalog.
        path: POSIX path relative to the output directory
              (``"<template>/<code>.html"``).

    """

    code: str
    message: str
    path: str


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Aggregate result of a build.

    Attributes:
        files: Every page file written, in write order.
        history: Index entries per template name.
        index_path: The written index file, or ``None``.
        duration_ms: Total wall-clock time for the build.
        output_dir: The output directory.

    """

    files: tuple[Path, ...]
    history: dict[str, tuple[HistoryItem, ...]]
    index_path: Path | None
    duration_ms: float
    output_dir: Path

    @property
    def total_pages(self) -> int:
        return len(self.files)


def ensure_directory(path: Path) -> None:
    """Create *path* recursively unless it already is a directory.

    Raises:
        DirectoryError: If *path* exists and is not a directory, or cannot
            be created.

    """
    if path.exists():
        if not path.is_dir():
            raise DirectoryError(path, "is not a directory")
        return

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryError(path, str(exc)) from exc


def write_file(path: Path, content: bytes) -> int:
    """Write *content* to *path*, replacing any existing file.

    Returns the number of bytes written.

    Raises:
        WriteError: If the file cannot be written.

    """
    try:
        path.write_bytes(content)
    except OSError as exc:
        raise WriteError(path, exc) from exc
    return len(content)


class BuildOrchestrator:
    """Writes the error page matrix to ``<output>/<template>/<code>.html``.

    Holds no state between builds: history and timing live only for the
    duration of one :meth:`build` call.

    Args:
        catalog: Per-code page data.
        registry: Compiled page templates.
        collector: Optional event collector.
        index_template: Index template file (bundled template when ``None``).

    """

    def __init__(
        self,
        catalog: PageCatalog,
        registry: TemplateRegistry,
        *,
        collector: BuildCollector | None = None,
        index_template: Path | None = None,
    ) -> None:
        self._catalog = catalog
        self._page_set = ErrorPageSet(catalog, registry)
        self._collector = collector
        self._index_template = index_template or bundled_index_template()

    def build(self, output_dir: Path, *, generate_index: bool = False) -> BuildResult:
        """Run the build pipeline and return the result.

        Raises:
            DirectoryError: If an output directory cannot be prepared.
            NoTemplatesError: If no templates are registered.
            RenderError: If a page or the index fails to render.
            WriteError: If a file cannot be written.

        """
        start = time.perf_counter()
        output_dir = Path(output_dir)

        logger.debug("preparing the output directory %s", output_dir)
        ensure_directory(output_dir)

        history: dict[str, list[HistoryItem]] = {}
        files: list[Path] = []

        logger.info("saving the error pages")
        page_start = time.perf_counter()

        def visit(template: str, code: str, content: bytes) -> None:
            nonlocal page_start

            if template not in history:
                ensure_directory(output_dir / template)
                history[template] = []

            file_name = f"{code}.html"
            target = output_dir / template / file_name
            size = write_file(target, content)
            files.append(target)

            history[template].append(HistoryItem(
                code=code,
                message=self._catalog[code].message,
                path=PurePosixPath(template, file_name).as_posix(),
            ))

            elapsed = (time.perf_counter() - page_start) * 1000
            logger.debug("saved %s (%d bytes)", target, size)
            if self._collector is not None:
                self._collector.record_page(
                    template, code, str(target),
                    size_bytes=size, duration_ms=elapsed,
                )
            page_start = time.perf_counter()

        self._page_set.iterate_pages(visit)

        logger.debug(
            "saved %d pages in %.0fms",
            len(files), (time.perf_counter() - start) * 1000,
        )

        index_path: Path | None = None
        if generate_index:
            for items in history.values():
                items.sort(key=lambda item: item.code)

            logger.info("index file generation")
            index_path = self._write_index(output_dir / INDEX_TEMPLATE_NAME, history)

        elapsed = (time.perf_counter() - start) * 1000
        if self._collector is not None:
            self._collector.record_finished(
                str(output_dir), pages=len(files), duration_ms=elapsed,
            )

        return BuildResult(
            files=tuple(files),
            history={name: tuple(items) for name, items in history.items()},
            index_path=index_path,
            duration_ms=elapsed,
            output_dir=output_dir,
        )

    def _write_index(
        self,
        path: Path,
        history: dict[str, list[HistoryItem]],
    ) -> Path:
        """Render the index over *history* and write it to *path*.

        Template sections are ordered by template name.

        """
        t0 = time.perf_counter()

        try:
            source = self._index_template.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"cannot load index template {self._index_template}: {exc}"
            raise ConfigError(msg) from exc

        env = Environment(
            undefined=StrictUndefined,
            autoescape=True,
            keep_trailing_newline=True,
        )
        try:
            template = env.from_string(source)
        except TemplateSyntaxError as exc:
            raise TemplateParseError(INDEX_TEMPLATE_NAME, exc) from exc

        sections = [(name, history[name]) for name in sorted(history)]
        try:
            html = template.render(history=sections)
        except Exception as exc:
            raise RenderError(INDEX_TEMPLATE_NAME, None, exc) from exc

        write_file(path, html.encode("utf-8"))

        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("index file generated in %.0fms", elapsed)
        if self._collector is not None:
            self._collector.record_index(
                str(path),
                templates=len(sections),
                entries=sum(len(items) for _, items in sections),
                duration_ms=elapsed,
            )
        return path


def build(
    config: ErrorPagesConfig,
    *,
    collector: BuildCollector | None = None,
) -> BuildResult:
    """Build the error pages described by *config*.

    Raises:
        ErrorPagesError: Any error from loading templates or the build itself.

    """
    page_set = ErrorPageSet.from_config(config)
    orchestrator = BuildOrchestrator(
        page_set.catalog,
        page_set.registry,
        collector=collector,
        index_template=get_index_template_path(config),
    )
    return orchestrator.build(config.output_path, generate_index=config.generate_index)
