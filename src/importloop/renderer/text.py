"""Render a Report as plain text."""

from __future__ import annotations

from importloop.model import Cycle, Report


def format_cycle(cycle: Cycle) -> str:
    return " -> ".join(cycle)


def render_text(report: Report) -> str:
    lines = [f"{report.project_name}: {report.module_count} modules"]
    if not report.cycles:
        lines.append("No circular imports found.")
    else:
        lines.append(f"Found {len(report.cycles)} circular import(s):")
        lines.extend(f"  {format_cycle(cycle)}" for cycle in report.cycles)
    return "\n".join(lines) + "\n"
