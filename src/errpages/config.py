"""errpages configuration.

ErrorPagesConfig is the explicit configuration value passed to the build
entry point, frozen after creation.
"""

from dataclasses import dataclass, field
from pathlib import Path

from errpages._errors import ConfigError
from errpages.pages.catalog import PageDescriptor


@dataclass(frozen=True, slots=True)
class TemplateSource:
    """Where the text of one template comes from.

    Exactly one of ``path`` and ``content`` is set.  When ``name`` is empty
    and ``path`` is set, the file stem is used (``ghost.html`` -> ``ghost``).

    """

    name: str = ""
    path: Path | None = None
    content: str | None = None

    @property
    def resolved_name(self) -> str:
        if self.name:
            return self.name
        if self.path is not None:
            return self.path.stem
        return ""


@dataclass(frozen=True, slots=True)
class ErrorPagesConfig:
    """Configuration for an error pages build.

    Attributes:
        root: Directory relative paths are resolved against.
              Always resolved to an absolute path on construction.
        templates: Template sources in declaration order.
        pages: Page descriptors keyed by code, in declaration order.
        output: Output directory for the build.
        generate_index: Write ``index.html`` next to the template directories.
        index_template: Custom index template (bundled one when ``None``).

    """

    root: Path = field(default_factory=Path.cwd)
    templates: tuple[TemplateSource, ...] = ()
    pages: dict[str, PageDescriptor] = field(default_factory=dict)
    output: Path = field(default_factory=lambda: Path("dist"))
    generate_index: bool = False
    index_template: Path | None = None

    def __post_init__(self) -> None:
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())

    @property
    def output_path(self) -> Path:
        """Absolute path to output directory."""
        if self.output.is_absolute():
            return self.output
        return self.root / self.output

    @property
    def index_template_path(self) -> Path | None:
        """Absolute path to a custom index template, if configured."""
        if self.index_template is None:
            return None
        if self.index_template.is_absolute():
            return self.index_template
        return self.root / self.index_template

    def validate(self) -> None:
        """Check the configuration is usable for a build.

        Raises:
            ConfigError: On the first problem found.

        """
        if not self.templates:
            msg = "at least one template must be configured"
            raise ConfigError(msg)

        for i, source in enumerate(self.templates):
            if (source.path is None) == (source.content is None):
                msg = f"template #{i}: exactly one of 'path' or 'content' is required"
                raise ConfigError(msg)
            if not source.resolved_name:
                msg = f"template #{i}: name is required"
                raise ConfigError(msg)

        for code in self.pages:
            if not code.strip():
                msg = "page code must not be empty"
                raise ConfigError(msg)

    def load_templates(self) -> dict[str, str]:
        """Read every template source into ``{name: text}``.

        Later sources with the same name replace earlier ones.

        Raises:
            ConfigError: If a template file cannot be read.

        """
        templates: dict[str, str] = {}
        for source in self.templates:
            if source.content is not None:
                templates[source.resolved_name] = source.content
                continue

            path = source.path if source.path is not None else Path()
            if not path.is_absolute():
                path = self.root / path
            try:
                templates[source.resolved_name] = path.read_text(encoding="utf-8")
            except OSError as exc:
                msg = f"cannot load template {source.resolved_name!r} from {path}: {exc}"
                raise ConfigError(msg) from exc
        return templates
