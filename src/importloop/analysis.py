"""Post-extraction graph analysis (cycle detection)."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from importloop.model import Catalog, Cycle

logger = logging.getLogger(__name__)


def find_cycles(catalog: Catalog) -> list[Cycle]:
    """Return every import cycle found by a depth-first walk of *catalog*.

    Each cycle is a list of module names that starts and ends with the same
    module, e.g. ``["pkg.a", "pkg.b", "pkg.a"]``; a module importing itself
    gives ``["pkg.a", "pkg.a"]``.  Imports that do not resolve to a module in
    the catalog are ignored.

    Roots are tried in catalog order and imports are followed in the order
    they were recorded, so the output is deterministic.  A node is explored
    only once per call: a back-edge into a node already finished by an
    earlier traversal, but no longer on the current path, does not yield a
    cycle.
    """
    return _CycleSearch(catalog).run()


class _CycleSearch:
    """Traversal state for a single :func:`find_cycles` call."""

    def __init__(self, catalog: Catalog):
        self._catalog = catalog
        self._path: list[int] = []
        self._finished: set[int] = set()
        self._cycles: list[Cycle] = []

    def run(self) -> list[Cycle]:
        for module in self._catalog:
            if module.index not in self._finished:
                self._visit(module.index)
        logger.debug(
            "Searched %d modules, found %d cycles",
            len(self._catalog),
            len(self._cycles),
        )
        return self._cycles

    def _visit(self, root: int) -> None:
        # Explicit stack of (node, remaining targets); mirrors self._path.
        stack = [self._enter(root)]
        while stack:
            _v, targets = stack[-1]
            for t in targets:
                if t not in self._finished:
                    stack.append(self._enter(t))
                    break
                if t in self._path:
                    self._emit(t)
            else:
                stack.pop()
                self._path.pop()

    def _enter(self, v: int) -> tuple[int, Iterator[int]]:
        self._finished.add(v)
        self._path.append(v)
        return v, iter(self._catalog.targets(v))

    def _emit(self, t: int) -> None:
        start = self._path.index(t)
        chain = [self._catalog[i].name for i in self._path[start:]]
        chain.append(self._catalog[t].name)
        logger.debug("Cycle: %s", " -> ".join(chain))
        self._cycles.append(chain)
