"""Render a Report as JSON or YAML."""

from __future__ import annotations

import json

import yaml

from importloop.model import Report


def _report_to_dict(report: Report) -> dict:
    return {
        "project": report.project_name,
        "modules": report.module_count,
        "cycles": [list(cycle) for cycle in report.cycles],
    }


def render_json(report: Report) -> str:
    return json.dumps(_report_to_dict(report), indent=2) + "\n"


def render_yaml(report: Report) -> str:
    return yaml.safe_dump(_report_to_dict(report), sort_keys=False)
