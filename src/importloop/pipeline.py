"""Orchestrator: configure → extract → detect → render."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from importloop.analysis import find_cycles
from importloop.config import guess_project_name, read_config_exclude
from importloop.extractors.base import Extractor
from importloop.extractors.python.module_catalog import ModuleCatalogExtractor
from importloop.model import Report
from importloop.renderer import render

logger = logging.getLogger(__name__)


def run(
    project_dir: Path,
    *,
    output: Path | None = None,
    fmt: str = "text",
    exclude: list[str] | None = None,
) -> Report:
    """Analyse *project_dir*, write the rendered report, and return it.

    The report goes to *output* when given, otherwise to stdout.
    """
    project_dir = project_dir.resolve()
    if not project_dir.is_dir():
        logger.error("Not a directory: %s", project_dir)
        sys.exit(2)

    project_name = guess_project_name(project_dir)
    patterns = read_config_exclude(project_dir) + list(exclude or [])
    logger.debug("Project: %s, exclude: %s", project_name, patterns)

    extractor: Extractor = ModuleCatalogExtractor(exclude=patterns)
    if not extractor.can_handle(project_dir):
        logger.warning("%s does not look like a Python project", project_dir)

    catalog = extractor.extract(project_dir)
    cycles = find_cycles(catalog)
    logger.debug("Cycles detected: %d", len(cycles))

    report = Report(
        project_name=project_name,
        module_count=len(catalog),
        cycles=cycles,
    )
    rendered = render(report, fmt)

    if output is None:
        sys.stdout.write(rendered)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered)
        logger.info("Generated %s", output)

    return report
