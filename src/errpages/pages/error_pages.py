"""Error page set: the (template x code) production.

Composes a :class:`PageCatalog` with a :class:`TemplateRegistry` and renders
every combination exactly once: templates in the order they were added, then
codes in the order they were added.  Rendering is pull-based, so at most one
rendered page is held in memory at a time.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from errpages._errors import NoTemplatesError
from errpages.pages.catalog import PageCatalog
from errpages.pages.registry import TemplateRegistry

if TYPE_CHECKING:
    from errpages._types import VisitFunc
    from errpages.config import ErrorPagesConfig


@dataclass(frozen=True, slots=True)
class RenderedPage:
    """One rendered page, consumed immediately by the caller.

    Attributes:
        template_name: Name of the template that produced the page.
        code: Status code of the rendered page.
        content: Rendered HTML, UTF-8 encoded.

    """

    template_name: str
    code: str
    content: bytes


class ErrorPageSet:
    """Renders a page catalog through every registered template.

    Args:
        catalog: Per-code page data.
        registry: Compiled templates.

    """

    __slots__ = ("_catalog", "_registry")

    def __init__(
        self,
        catalog: PageCatalog | None = None,
        registry: TemplateRegistry | None = None,
    ) -> None:
        self._catalog = catalog if catalog is not None else PageCatalog()
        self._registry = registry if registry is not None else TemplateRegistry()

    @classmethod
    def from_config(cls, config: ErrorPagesConfig) -> ErrorPageSet:
        """Build the page set from loaded configuration.

        Raises:
            ConfigError: If a template file cannot be read.
            TemplateParseError: If a template is not valid syntax.

        """
        page_set = cls()
        for name, content in config.load_templates().items():
            page_set.add_template(name, content)
        for page in config.pages.values():
            page_set.add_page(page.code, page.message, page.description)
        return page_set

    @property
    def catalog(self) -> PageCatalog:
        return self._catalog

    @property
    def registry(self) -> TemplateRegistry:
        return self._registry

    def add_template(self, name: str, raw_text: str) -> None:
        """Compile and register a template (last write wins)."""
        self._registry.add_template(name, raw_text)

    def add_page(self, code: str, message: str, description: str) -> None:
        """Insert or overwrite the page for *code*."""
        self._catalog.add_page(code, message, description)

    def iterate_pages(self, visit: VisitFunc) -> None:
        """Render every (template, code) pair and pass it to *visit*.

        The first exception, whether raised while rendering or by *visit*
        itself, propagates and no further pairs are visited.

        Raises:
            NoTemplatesError: If no templates are registered.
            RenderError: If a template fails to render a page.

        """
        for page in self.pages():
            visit(page.template_name, page.code, page.content)

    def pages(self) -> Iterator[RenderedPage]:
        """Lazily yield every rendered page.

        Each call returns a fresh generator.  A generator that raised is
        finished and must not be reused.

        Raises:
            NoTemplatesError: On first ``next()`` if no templates are registered.

        """
        if not len(self._registry):
            raise NoTemplatesError()

        names = self._registry.names()
        descriptors = list(self._catalog)

        for name in names:
            for page in descriptors:
                yield RenderedPage(
                    template_name=name,
                    code=page.code,
                    content=self._registry.render(name, page),
                )
