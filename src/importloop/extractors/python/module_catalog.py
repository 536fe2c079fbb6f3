"""Build a module catalog by walking a Python project's packages."""

from __future__ import annotations

import logging
from collections import Counter
from fnmatch import fnmatchcase
from pathlib import Path

from importloop.extractors.python import (
    is_hidden,
    is_package,
    is_python_file,
    is_python_project,
    module_id,
)
from importloop.extractors.python.imports import find_imports
from importloop.model import Catalog

logger = logging.getLogger(__name__)


class ModuleCatalogExtractor:
    """Collect every module of a project together with its raw imports."""

    def __init__(
        self,
        *,
        exclude: list[str] | None = None,
    ):
        self._exclude = exclude or []

    def can_handle(self, project_dir: Path) -> bool:
        return is_python_project(project_dir)

    def extract(self, project_dir: Path) -> Catalog:
        catalog = self._walk(project_dir, project_dir)

        # src-layout: packages below src/ are named relative to src/
        src_dir = project_dir / "src"
        if src_dir.is_dir() and not is_package(src_dir):
            catalog.merge(self._walk(src_dir, src_dir))

        _warn_duplicates(catalog)
        logger.debug("Discovered %d modules in %s", len(catalog), project_dir)
        return catalog

    def _walk(self, directory: Path, root: Path) -> Catalog:
        """Return the catalog of *directory*, descending into sub-packages."""
        catalog = Catalog()
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            logger.warning("Could not list %s: %s", directory, e)
            return catalog

        for path in entries:
            if is_hidden(path):
                continue
            if path.is_dir():
                if not is_package(path):
                    continue
                if self._is_excluded(module_id(path, root)):
                    logger.debug("Excluding package %s", path)
                    continue
                catalog.merge(self._walk(path, root))
            elif is_python_file(path):
                name = module_id(path, root)
                if self._is_excluded(name):
                    logger.debug("Excluding module %s", name)
                    continue
                catalog.append(name, find_imports(path))
        return catalog

    def _is_excluded(self, name: str) -> bool:
        return any(fnmatchcase(name, pattern) for pattern in self._exclude)


def _warn_duplicates(catalog: Catalog) -> None:
    for name, count in Counter(catalog.names()).items():
        if count > 1:
            logger.warning(
                "Module name %s found %d times; imports of it resolve to the first",
                name,
                count,
            )
