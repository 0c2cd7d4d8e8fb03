"""Bundled theme: the index document template and its fallback chain.

A custom ``index_template`` from the configuration takes priority.  When
none is configured the template shipped inside the package is used.

"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from errpages.config import ErrorPagesConfig

INDEX_TEMPLATE_NAME = "index.html"


def _bundled_theme_path() -> Path:
    """Return the absolute path to the bundled theme."""
    return Path(__file__).parent


def bundled_index_template() -> Path:
    """Path to the index template shipped with errpages."""
    return _bundled_theme_path() / "templates" / INDEX_TEMPLATE_NAME


def get_index_template_path(config: ErrorPagesConfig | None = None) -> Path:
    """Return the index template to use for *config*.

    The user template is returned even if it does not exist, so that a
    misconfigured path fails loudly at index generation instead of silently
    falling back.

    """
    if config is not None and config.index_template_path is not None:
        return config.index_template_path
    return bundled_index_template()
