"""Shared test fixtures for errpages."""

from __future__ import annotations

from pathlib import Path

import pytest

from errpages.pages.catalog import PageCatalog
from errpages.pages.registry import TemplateRegistry

PLAIN_TEMPLATE = "{{ code }} {{ message }}"

GHOST_TEMPLATE = (
    "<!DOCTYPE html>\n<html>\n<head><title>{{ code }}: {{ message }}</title></head>\n"
    "<body><h1>{{ message }}</h1><p>{{ description }}</p></body>\n</html>\n"
)


@pytest.fixture
def catalog() -> PageCatalog:
    """Catalog with codes deliberately added out of numeric order."""
    pages = PageCatalog()
    pages.add_page("500", "Server Error", "Something went wrong")
    pages.add_page("404", "Not Found", "The page does not exist")
    return pages


@pytest.fixture
def registry() -> TemplateRegistry:
    templates = TemplateRegistry()
    templates.add_template("plain", PLAIN_TEMPLATE)
    return templates


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """A project directory with a YAML config and a template file.

    Layout::

        project/
            errpages.yaml
            templates/ghost.html

    """
    root = tmp_path / "project"
    templates = root / "templates"
    templates.mkdir(parents=True)
    (templates / "ghost.html").write_text(GHOST_TEMPLATE, encoding="utf-8")
    (root / "errpages.yaml").write_text(
        "templates:\n"
        "  - path: ./templates/ghost.html\n"
        "  - name: plain\n"
        "    content: \"{{ code }} {{ message }}\"\n"
        "\n"
        "pages:\n"
        "  500:\n"
        "    message: Internal Server Error\n"
        "    description: The server has encountered a situation it doesn't know how to handle\n"
        "  404:\n"
        "    message: Not Found\n"
        "    description: The server can not find the requested page\n"
        "  403:\n"
        "    message: Forbidden\n"
        "    description: Access is forbidden to the requested page\n",
        encoding="utf-8",
    )
    return root
