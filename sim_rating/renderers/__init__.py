"""Renderers — HTML, SVG and JSON output strategies for a rating tally.

Each strategy is a pure function of a RatingCalculator and an effective
RenderConfig; the registry picks one per output format.
"""

from .interactive import html_interactive_script, svg_interactive_script
from .markup import render_bar, render_bars, render_html, render_stars, render_summary
from .registry import RendererDefinition, RendererRegistry, get_renderer_registry
from .schemas import RenderConfig, RenderFormat
from .structured import render_json
from .vector import parse_size, render_svg

__all__ = [
    "RenderConfig",
    "RenderFormat",
    "RendererDefinition",
    "RendererRegistry",
    "get_renderer_registry",
    "html_interactive_script",
    "svg_interactive_script",
    "parse_size",
    "render_bar",
    "render_bars",
    "render_html",
    "render_json",
    "render_stars",
    "render_summary",
    "render_svg",
]
