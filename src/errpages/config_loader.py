"""Load ErrorPagesConfig from an errpages.yaml / errpages.toml file.

Merges file config with CLI overrides. Overrides take precedence.
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from errpages._errors import ConfigError
from errpages.config import ErrorPagesConfig, TemplateSource
from errpages.pages.catalog import PageDescriptor

DEFAULT_CONFIG_NAMES = ("errpages.yaml", "errpages.yml", "errpages.toml")


def find_config(root: Path) -> Path | None:
    """Return the first default config file present in *root*."""
    for name in DEFAULT_CONFIG_NAMES:
        path = root / name
        if path.is_file():
            return path
    return None


def load_config(path: str | Path, **overrides: object) -> ErrorPagesConfig:
    """Load and validate the configuration stored at *path*.

    Relative template, output and index-template paths resolve against the
    directory containing the file.  ``None`` overrides are ignored.

    Raises:
        ConfigError: If the file is missing, malformed or invalid.

    """
    path = Path(path)
    if not path.is_file():
        msg = f"config file not found: {path}"
        raise ConfigError(msg)

    data = _read_file(path)
    merged: dict[str, Any] = {**data, **{k: v for k, v in overrides.items() if v is not None}}

    config = ErrorPagesConfig(
        root=path.parent,
        templates=_parse_templates(merged.get("templates") or []),
        pages=_parse_pages(merged.get("pages") or {}),
        output=Path(str(merged.get("output") or "dist")),
        generate_index=_parse_index_flag(merged),
        index_template=(
            Path(str(merged["index_template"])) if merged.get("index_template") else None
        ),
    )
    config.validate()
    return config


def _read_file(path: Path) -> dict[str, Any]:
    """Parse YAML or TOML by file extension."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"cannot read config file {path}: {exc}"
        raise ConfigError(msg) from exc

    try:
        if path.suffix == ".toml":
            data = tomllib.loads(text)
        else:
            data = yaml.safe_load(text) or {}
    except (yaml.YAMLError, tomllib.TOMLDecodeError) as exc:
        msg = f"cannot parse config file {path}: {exc}"
        raise ConfigError(msg) from exc

    if not isinstance(data, dict):
        msg = f"config file {path} must contain a mapping at the top level"
        raise ConfigError(msg)
    return data


def _parse_templates(raw: object) -> tuple[TemplateSource, ...]:
    if not isinstance(raw, list):
        msg = "'templates' must be a list"
        raise ConfigError(msg)

    sources: list[TemplateSource] = []
    for i, item in enumerate(raw):
        if not isinstance(item, Mapping):
            msg = f"template #{i} must be a mapping"
            raise ConfigError(msg)
        path = item.get("path")
        content = item.get("content")
        sources.append(TemplateSource(
            name=str(item.get("name") or ""),
            path=Path(str(path)) if path else None,
            content=str(content) if content is not None else None,
        ))
    return tuple(sources)


def _parse_pages(raw: object) -> dict[str, PageDescriptor]:
    if not isinstance(raw, Mapping):
        msg = "'pages' must be a mapping of code to page"
        raise ConfigError(msg)

    pages: dict[str, PageDescriptor] = {}
    for code, item in raw.items():
        # YAML reads unquoted 404 as an int
        key = str(code)
        if not isinstance(item, Mapping):
            msg = f"page {key!r} must be a mapping"
            raise ConfigError(msg)
        pages[key] = PageDescriptor(
            code=key,
            message=str(item.get("message", "")),
            description=str(item.get("description", "")),
        )
    return pages


def _parse_index_flag(data: Mapping[str, Any]) -> bool:
    value = data.get("index", data.get("generate_index"))
    if value is None:
        return False
    if not isinstance(value, bool):
        msg = f"'index' must be true or false, got {value!r}"
        raise ConfigError(msg)
    return value
