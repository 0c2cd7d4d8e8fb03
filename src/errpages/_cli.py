"""errpages CLI: errpages build.

Entry point for the ``errpages`` command-line interface.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from errpages._errors import ConfigError, ErrorPagesError


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the errpages CLI."""
    parser = argparse.ArgumentParser(
        prog="errpages",
        description="Static HTTP error pages generator.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # errpages build
    build_parser = subparsers.add_parser(
        "build",
        aliases=["b"],
        help="Build the error pages",
    )
    build_parser.add_argument("output", help="Output directory")
    build_parser.add_argument(
        "--config", "-c", default=None,
        help="Path to the config file (default: errpages.yaml in the current directory)",
    )
    build_parser.add_argument(
        "--index", "-i", action="store_true", help="Generate index page",
    )
    build_parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging",
    )

    return parser


def _get_version() -> str:
    """Get the package version."""
    from errpages import __version__

    return __version__


def _run_build(args: argparse.Namespace) -> None:
    from errpages.banner import print_banner, print_build_summary
    from errpages.config_loader import find_config, load_config
    from errpages.export.build import build
    from errpages.observability import BuildCollector

    config_path = Path(args.config) if args.config else find_config(Path.cwd())
    if config_path is None:
        msg = "path to the config file is required for this command"
        raise ConfigError(msg)

    config = load_config(
        config_path,
        output=Path(args.output).resolve(),
        index=True if args.index else None,
    )

    print_banner(config, len(config.templates), len(config.pages))
    collector = BuildCollector()
    result = build(config, collector=collector)
    print_build_summary(result, collector=collector)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    try:
        if args.command in ("build", "b"):
            _run_build(args)
    except ErrorPagesError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
