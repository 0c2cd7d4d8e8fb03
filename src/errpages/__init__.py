"""errpages: static HTTP error pages generator.

Renders every configured error code through every configured template and
writes the result as a directory tree ready to be served statically.

Quick start::

    from pathlib import Path

    from errpages import BuildOrchestrator, PageCatalog, TemplateRegistry

    registry = TemplateRegistry()
    registry.add_template("plain", "{{ code }} {{ message }}")
    catalog = PageCatalog()
    catalog.add_page("404", "Not Found", "")

    BuildOrchestrator(catalog, registry).build(Path("dist"), generate_index=True)

From a config file::

    from errpages import build, load_config

    build(load_config("errpages.yaml"))

"""

__version__ = "0.1.0"
__all__ = [
    "BuildOrchestrator",
    "ErrorPageSet",
    "ErrorPagesConfig",
    "PageCatalog",
    "TemplateRegistry",
    "__version__",
    "build",
    "load_config",
]

_LAZY = {
    "BuildOrchestrator": "errpages.export.build",
    "build": "errpages.export.build",
    "ErrorPageSet": "errpages.pages.error_pages",
    "PageCatalog": "errpages.pages.catalog",
    "TemplateRegistry": "errpages.pages.registry",
    "ErrorPagesConfig": "errpages.config",
    "load_config": "errpages.config_loader",
}


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import errpages`` fast (no Jinja2 import) while providing a clean
    top-level API.
    """
    module_name = _LAZY.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
