"""Data model for module import graphs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace

# A closed import chain: ["a", "b", "a"] reads "a imports b imports a".
Cycle = list[str]


@dataclass(frozen=True)
class Module:
    """A source module and the raw import references found in it."""

    name: str
    imports: tuple[str, ...] = ()
    index: int = 0


@dataclass
class Catalog:
    """Densely indexed collection of modules; ``catalog[i].index == i``."""

    modules: list[Module] = field(default_factory=list)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, Iterable[str]]]) -> Catalog:
        catalog = cls()
        for name, imports in pairs:
            catalog.append(name, imports)
        return catalog

    def __len__(self) -> int:
        return len(self.modules)

    def __iter__(self) -> Iterator[Module]:
        return iter(self.modules)

    def __getitem__(self, index: int) -> Module:
        return self.modules[index]

    def names(self) -> list[str]:
        return [m.name for m in self.modules]

    def append(self, name: str, imports: Iterable[str]) -> Module:
        """Add a module at the end of the catalog and return it."""
        module = Module(name=name, imports=tuple(imports), index=len(self.modules))
        self.modules.append(module)
        return module

    def merge(self, other: Catalog) -> None:
        """Move every module of *other* to the end of this catalog.

        Indices are reassigned from the final position; the modules held by
        *other* are not modified, and *other* is left empty.  Merging a
        catalog into itself leaves it unchanged.
        """
        incoming, other.modules = other.modules, []
        offset = len(self.modules)
        self.modules.extend(
            replace(module, index=offset + i) for i, module in enumerate(incoming)
        )

    def resolve(self, raw_import: str) -> int | None:
        """Return the index of the module named exactly *raw_import*, if any."""
        for module in self.modules:
            if module.name == raw_import:
                return module.index
        return None

    def targets(self, index: int) -> list[int]:
        """Resolved import targets of module *index*, in import order, no repeats."""
        seen: list[int] = []
        for raw_import in self.modules[index].imports:
            target = self.resolve(raw_import)
            if target is not None and target not in seen:
                seen.append(target)
        return seen


@dataclass
class Report:
    """Result of analysing one project."""

    project_name: str
    module_count: int
    cycles: list[Cycle] = field(default_factory=list)
