"""Find circular imports in Python projects."""

from importloop.analysis import find_cycles
from importloop.model import Catalog, Cycle, Module, Report

__all__ = ["Catalog", "Cycle", "Module", "Report", "find_cycles"]
