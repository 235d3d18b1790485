import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import make_config_error

MANIFEST_NAME = "bindspec.toml"
DEFAULT_SOURCE_PATTERNS = ["*.bind"]


@dataclass
class SourcesConfig:
    """Where binding files live, as glob patterns relative to the project root."""

    paths: list[str] = field(default_factory=lambda: list(DEFAULT_SOURCE_PATTERNS))


@dataclass
class ParserConfig:
    """Parser behaviour."""

    recover: bool = False  # Skip broken declarations and keep parsing


@dataclass
class ProjectManifest:
    """Project configuration loaded from bindspec.toml.

    Example:

        [project]
        name = "geometry"

        [sources]
        paths = ["bindings/*.bind"]

        [parser]
        recover = false
    """

    name: str
    root: Path
    sources: SourcesConfig = field(default_factory=SourcesConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)


def load_manifest(path: Path) -> ProjectManifest:
    """
    Load a bindspec.toml manifest.

    Args:
        path: Manifest file, or a directory containing bindspec.toml

    Raises:
        ConfigError: If the file is missing, not valid TOML, or has
            values of the wrong type
    """
    if path.is_dir():
        path = path / MANIFEST_NAME
    if not path.exists():
        raise make_config_error("manifest not found", path)

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise make_config_error(f"invalid TOML: {e}", path) from e

    root = path.parent
    project = _table(data, "project", path)
    sources = _table(data, "sources", path)
    parser = _table(data, "parser", path)

    name = project.get("name", root.resolve().name)
    if not isinstance(name, str):
        raise make_config_error("[project] name must be a string", path)

    paths = sources.get("paths", list(DEFAULT_SOURCE_PATTERNS))
    if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
        raise make_config_error("[sources] paths must be a list of strings", path)

    recover = parser.get("recover", False)
    if not isinstance(recover, bool):
        raise make_config_error("[parser] recover must be true or false", path)

    return ProjectManifest(
        name=name,
        root=root,
        sources=SourcesConfig(paths=paths),
        parser=ParserConfig(recover=recover),
    )


def _table(data: dict[str, Any], key: str, path: Path) -> dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise make_config_error(f"[{key}] must be a table", path)
    return value
