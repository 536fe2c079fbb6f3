"""Extractor protocol — all extractors conform to this interface."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from importloop.model import Catalog


class Extractor(Protocol):
    """Protocol for module catalog extractors."""

    def can_handle(self, project_dir: Path) -> bool:
        """Return True if this extractor applies to the given project."""
        ...

    def extract(self, project_dir: Path) -> Catalog:
        """Return the catalog of modules discovered under *project_dir*."""
        ...
