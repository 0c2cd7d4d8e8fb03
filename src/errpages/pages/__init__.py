"""Page model: catalog, template registry and their cross-product."""

from errpages.pages.catalog import PageCatalog, PageDescriptor
from errpages.pages.error_pages import ErrorPageSet, RenderedPage
from errpages.pages.registry import TemplateRegistry

__all__ = [
    "ErrorPageSet",
    "PageCatalog",
    "PageDescriptor",
    "RenderedPage",
    "TemplateRegistry",
]
