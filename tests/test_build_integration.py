"""Integration tests for the config-driven build pipeline.

Loads a realistic project (YAML config, file and inline templates) and runs
the full build through the module-level ``build`` entry point.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from errpages._errors import TemplateParseError
from errpages.config_loader import load_config
from errpages.export.build import build
from errpages.observability import BuildCollector, BuildFinished


class TestConfigBuild:
    """build(config): end to end from a config file."""

    def test_full_matrix_written(self, config_dir: Path) -> None:
        config = load_config(config_dir / "errpages.yaml", index=True)
        result = build(config)

        out = config_dir / "dist"
        for template in ("ghost", "plain"):
            for code in ("403", "404", "500"):
                assert (out / template / f"{code}.html").is_file()
        assert result.total_pages == 6
        assert (out / "index.html").is_file()

    def test_ghost_template_renders_description(self, config_dir: Path) -> None:
        build(load_config(config_dir / "errpages.yaml"))
        html = (config_dir / "dist" / "ghost" / "404.html").read_text(encoding="utf-8")
        assert "<title>404: Not Found</title>" in html
        assert "The server can not find the requested page" in html
        assert html.endswith("</html>\n")

    def test_index_groups_by_template(self, config_dir: Path) -> None:
        build(load_config(config_dir / "errpages.yaml", index=True))
        index = (config_dir / "dist" / "index.html").read_text(encoding="utf-8")

        ghost_at = index.index("<code>ghost</code>")
        plain_at = index.index("<code>plain</code>")
        assert ghost_at < plain_at
        ghost_section = index[ghost_at:plain_at]
        assert ghost_section.index("ghost/403.html") < ghost_section.index("ghost/404.html")
        assert ghost_section.index("ghost/404.html") < ghost_section.index("ghost/500.html")
        assert "<strong>500</strong>: Internal Server Error" in ghost_section

    def test_rebuild_is_byte_identical(self, config_dir: Path) -> None:
        config = load_config(config_dir / "errpages.yaml", index=True)
        out = config_dir / "dist"

        build(config)
        first = {p.relative_to(out): p.read_bytes() for p in out.rglob("*.html")}
        build(config)
        second = {p.relative_to(out): p.read_bytes() for p in out.rglob("*.html")}

        assert first == second

    def test_collector_sees_finished_build(self, config_dir: Path) -> None:
        collector = BuildCollector()
        build(load_config(config_dir / "errpages.yaml"), collector=collector)
        (finished,) = collector.log.events(BuildFinished)
        assert finished.pages == 6

    def test_custom_index_template_from_config(self, tmp_path: Path) -> None:
        (tmp_path / "index.j2").write_text(
            "{% for name, items in history %}[{{ name }}:{{ items | length }}]{% endfor %}",
            encoding="utf-8",
        )
        path = tmp_path / "errpages.yaml"
        path.write_text(
            "templates:\n"
            "  - {name: a, content: '{{ code }}'}\n"
            "  - {name: b, content: '{{ message }}'}\n"
            "pages:\n"
            "  404: {message: Not Found}\n"
            "index: true\n"
            "index_template: index.j2\n",
            encoding="utf-8",
        )
        build(load_config(path))
        assert (tmp_path / "dist" / "index.html").read_text() == "[a:1][b:1]"

    def test_broken_template_file(self, config_dir: Path) -> None:
        (config_dir / "templates" / "ghost.html").write_text("{% if code %}", encoding="utf-8")
        with pytest.raises(TemplateParseError) as exc_info:
            build(load_config(config_dir / "errpages.yaml"))
        assert exc_info.value.template == "ghost"
        assert not (config_dir / "dist").exists()
