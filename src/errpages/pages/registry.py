"""Template registry: named, compiled Jinja2 renderers.

Each template is compiled once when it is added and is immutable afterward.
Rendering uses ``StrictUndefined`` so a template referring to a field the
page context does not carry fails loudly instead of producing blank output.
"""

from __future__ import annotations

from collections.abc import Iterator

from jinja2 import Environment, StrictUndefined, Template, TemplateSyntaxError

from errpages._errors import RenderError, TemplateParseError
from errpages.pages.catalog import PageDescriptor


def _create_environment() -> Environment:
    """Jinja2 environment shared by every template in a registry."""
    return Environment(
        undefined=StrictUndefined,
        autoescape=False,
        keep_trailing_newline=True,
    )


class TemplateRegistry:
    """Mapping from template name to a compiled renderer.

    Names keep the order in which they were first added.  Adding a template
    under an existing name replaces its renderer (last write wins), matching
    the map-based insertion of the configuration loader.

    """

    __slots__ = ("_env", "_templates")

    def __init__(self, env: Environment | None = None) -> None:
        self._env = env if env is not None else _create_environment()
        self._templates: dict[str, Template] = {}

    @property
    def env(self) -> Environment:
        """The Jinja2 environment templates are compiled with."""
        return self._env

    def add_template(self, name: str, raw_text: str) -> None:
        """Compile *raw_text* and register it under *name*.

        Raises:
            TemplateParseError: If *raw_text* is not valid Jinja2 syntax.

        """
        try:
            compiled = self._env.from_string(raw_text)
        except TemplateSyntaxError as exc:
            raise TemplateParseError(name, exc) from exc
        self._templates[name] = compiled

    def get(self, name: str) -> Template | None:
        return self._templates.get(name)

    def names(self) -> list[str]:
        """Template names in insertion order."""
        return list(self._templates)

    def render(self, name: str, page: PageDescriptor) -> bytes:
        """Render *page* through the template registered as *name*.

        The page's code, message and description form the rendering context.

        Raises:
            KeyError: If no template named *name* is registered.
            RenderError: If the template fails at render time.

        """
        template = self._templates[name]
        try:
            html = template.render(
                code=page.code,
                message=page.message,
                description=page.description,
            )
        except Exception as exc:
            raise RenderError(name, page.code, exc) from exc
        return html.encode("utf-8")

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)
