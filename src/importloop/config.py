"""Project configuration: exclude patterns and display name."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

logger = logging.getLogger(__name__)


def _load_toml(path: Path) -> dict | None:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Could not parse %s: %s", path.name, e)
        return None


def read_config_exclude(project_dir: Path) -> list[str]:
    """Read exclude patterns from .importloop.toml or pyproject.toml."""
    # Try .importloop.toml first
    importloop_toml = project_dir / ".importloop.toml"
    if importloop_toml.exists():
        data = _load_toml(importloop_toml)
        if data is not None:
            return _as_patterns(_table(data, "importloop").get("exclude"))

    # Fall back to [tool.importloop] in pyproject.toml
    pyproject = project_dir / "pyproject.toml"
    if pyproject.exists():
        data = _load_toml(pyproject)
        if data is not None:
            return _as_patterns(_table(data, "tool", "importloop").get("exclude"))

    return []


def _table(data: dict, *keys: str) -> dict:
    """Return the nested table at *keys*, or an empty one if it is missing or not a table."""
    table = data
    for key in keys:
        table = table.get(key, {})
        if not isinstance(table, dict):
            logger.warning("Ignoring [%s]: expected a table", ".".join(keys))
            return {}
    return table


def _as_patterns(value: object) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        logger.warning("Ignoring exclude setting: expected a list of strings")
        return []
    return list(value)


def guess_project_name(project_dir: Path) -> str:
    """Guess the project display name from pyproject.toml, pixi.toml or the directory."""
    for toml_name in ("pyproject.toml", "pixi.toml"):
        toml_path = project_dir / toml_name
        if toml_path.exists():
            data = _load_toml(toml_path)
            name = _table(data, "project").get("name") if data else None
            if isinstance(name, str) and name:
                return name

    return project_dir.name
