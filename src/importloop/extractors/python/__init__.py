"""Python extractors — shared helpers."""

from __future__ import annotations

from pathlib import Path

_PROJECT_FILES = ("pyproject.toml", "setup.py", "setup.cfg", "pixi.toml")


def is_python_project(project_dir: Path) -> bool:
    """Return True if *project_dir* looks like it holds Python code."""
    if any((project_dir / name).exists() for name in _PROJECT_FILES):
        return True
    return any(
        is_python_file(child) or is_package(child) for child in project_dir.iterdir()
    )


def is_package(path: Path) -> bool:
    """Return True if *path* is a directory containing an ``__init__.py``."""
    return path.is_dir() and (path / "__init__.py").is_file()


def is_python_file(path: Path) -> bool:
    """Return True for ``.py`` files; ``__init__.py`` is not counted as a module."""
    return path.is_file() and path.suffix == ".py" and path.name != "__init__.py"


def is_hidden(path: Path) -> bool:
    return path.name.startswith(".")


def module_id(path: Path, root: Path) -> str:
    """Convert *path* to a dotted module name relative to *root*.

    ``root/pkg/sub/mod.py`` becomes ``pkg.sub.mod``; a package directory
    ``root/pkg/sub`` becomes ``pkg.sub``.
    """
    relative = path.relative_to(root)
    return ".".join(relative.parts).removesuffix(".py")
