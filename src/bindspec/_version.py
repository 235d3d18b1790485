"""Single source of truth for the bindspec version."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).parent.parent.parent / "pyproject.toml"


def get_version() -> str:
    """Get version from pyproject.toml (source checkout) or installed metadata."""
    if _PYPROJECT.exists():
        with _PYPROJECT.open("rb") as f:
            project = tomllib.load(f).get("project", {})
        if project.get("name") == "bindspec" and "version" in project:
            return str(project["version"])
    try:
        return _metadata_version("bindspec")
    except PackageNotFoundError:
        return "0.0.0"
