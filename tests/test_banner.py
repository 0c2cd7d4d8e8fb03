"""Tests for errpages.banner: build banner and summary output."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from unittest.mock import patch

from errpages.banner import print_banner, print_build_summary
from errpages.config import ErrorPagesConfig
from errpages.export.build import BuildResult, HistoryItem
from errpages.observability import BuildCollector


class TestPrintBanner:
    """Tests for the build banner."""

    def _capture_banner(self, config: ErrorPagesConfig, **kwargs: object) -> str:
        """Call print_banner and capture stderr output."""
        buf = io.StringIO()
        with patch.object(sys, "stderr", buf):
            print_banner(config, **kwargs)  # type: ignore[arg-type]
        return buf.getvalue()

    def test_counts_and_output(self) -> None:
        config = ErrorPagesConfig(root=Path("/tmp/test-site"))
        output = self._capture_banner(config, template_count=3, page_count=12)

        assert "errpages" in output
        assert "3 templates loaded" in output
        assert "12 error codes" in output
        assert "output:" in output
        assert str(Path("/tmp/test-site/dist")) in output

    def test_singular(self) -> None:
        config = ErrorPagesConfig(root=Path("/tmp/test-site"))
        output = self._capture_banner(config, template_count=1, page_count=1)
        assert "1 template loaded" in output
        assert "1 error code\n" in output

    def test_index_flag_shown(self) -> None:
        config = ErrorPagesConfig(root=Path("/tmp/test-site"), generate_index=True)
        output = self._capture_banner(config, template_count=1, page_count=1)
        assert "index:" in output

    def test_explicit_stream(self) -> None:
        buf = io.StringIO()
        print_banner(ErrorPagesConfig(), 2, 2, stream=buf)
        assert "2 templates loaded" in buf.getvalue()


class TestPrintBuildSummary:
    """Tests for the build summary."""

    def test_summary(self) -> None:
        result = BuildResult(
            files=(Path("/out/plain/404.html"),),
            history={"plain": (HistoryItem("404", "Not Found", "plain/404.html"),)},
            index_path=Path("/out/index.html"),
            duration_ms=12.4,
            output_dir=Path("/out"),
        )
        buf = io.StringIO()
        print_build_summary(result, stream=buf)
        output = buf.getvalue()

        assert "Wrote 1 page across 1 template" in output
        assert "Index:" in output
        assert "Done in 12ms" in output

    def test_summary_without_index(self) -> None:
        result = BuildResult(
            files=(), history={}, index_path=None, duration_ms=0.0, output_dir=Path("/out"),
        )
        buf = io.StringIO()
        print_build_summary(result, stream=buf)
        assert "Index:" not in buf.getvalue()
        assert "Wrote 0 pages across 0 templates" in buf.getvalue()

    def test_summary_with_collector(self) -> None:
        collector = BuildCollector()
        collector.record_page("plain", "404", "/out/plain/404.html", size_bytes=13)
        collector.record_page("plain", "500", "/out/plain/500.html", size_bytes=16)
        collector.record_page(
            "ghost", "404", "/out/ghost/404.html", size_bytes=3072, duration_ms=7.25,
        )
        result = BuildResult(
            files=(), history={}, index_path=None, duration_ms=9.0, output_dir=Path("/out"),
        )
        buf = io.StringIO()
        print_build_summary(result, collector=collector, stream=buf)
        output = buf.getvalue()

        assert "plain: 29 B" in output
        assert "ghost: 3.0 KiB" in output
        assert output.index("plain:") < output.index("ghost:")
        assert "Slowest: ghost/404.html" in output
        assert "7.2ms" in output or "7.3ms" in output

    def test_summary_with_empty_collector(self) -> None:
        result = BuildResult(
            files=(), history={}, index_path=None, duration_ms=0.0, output_dir=Path("/out"),
        )
        buf = io.StringIO()
        print_build_summary(result, collector=BuildCollector(), stream=buf)
        assert "Slowest" not in buf.getvalue()
