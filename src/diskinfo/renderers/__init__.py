"""Report renderers: text, JSON and HTML."""

from typing import Callable, Dict

from .html_report import render_html
from .json_report import render_json
from .text_report import render_text

RENDERERS: Dict[str, Callable] = {
    "text": render_text,
    "json": render_json,
    "html": render_html,
}


def get_renderer(name: str) -> Callable:
    """Renderer for an output format, text for unknown names."""
    return RENDERERS.get(name, render_text)


__all__ = [
    "RENDERERS",
    "get_renderer",
    "render_html",
    "render_json",
    "render_text",
]
