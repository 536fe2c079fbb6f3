"""Lexical extraction of raw import references from Python source."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

_IMPORT_KEYWORDS = ("import", "from")


def parse_import_line(line: str) -> str | None:
    """Return the module token of an unindented ``import``/``from`` line.

    Only the first name is taken: ``import a, b`` gives ``a`` and
    ``from pkg.mod import thing`` gives ``pkg.mod``.  Aliases and the
    imported names of a ``from`` statement are ignored.
    """
    if not line.startswith(_IMPORT_KEYWORDS):
        return None
    parts = line.split()
    if len(parts) < 2 or parts[0] not in _IMPORT_KEYWORDS:
        return None
    return parts[1].rstrip(",") or None


def find_imports(file_path: Path) -> list[str]:
    """Return the raw import references of *file_path*, in source order."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read %s: %s", file_path, e)
        return []

    imports: list[str] = []
    for line in text.splitlines():
        name = parse_import_line(line)
        if name is not None:
            imports.append(name)
    return imports
