"""Output renderers for cycle reports."""

from __future__ import annotations

from importloop.model import Report
from importloop.renderer.structured import render_json, render_yaml
from importloop.renderer.text import render_text

RENDERERS = {
    "text": render_text,
    "json": render_json,
    "yaml": render_yaml,
}


def render(report: Report, fmt: str = "text") -> str:
    """Render *report* in the output format named *fmt*."""
    try:
        renderer = RENDERERS[fmt]
    except KeyError:
        raise ValueError(f"Unknown output format: {fmt!r}") from None
    return renderer(report)
