"""SVG renderer — a self-contained star image with an optional text label.

Stars are drawn from a single 24x24 path scaled to the configured size and
laid out left to right with a gap of 0.3 star widths.
"""

import math
import re
from html import escape
from typing import Optional, Union

from ..formatting import format_number as _n
from ..formatting import to_fixed
from ..ratings.calculator import RatingCalculator, star_split
from .interactive import svg_interactive_script
from .schemas import DEFAULT_COLOR, RenderConfig

STAR_PATH = (
    "M12 17.27L18.18 21l-1.64-7.03L22 9.24l-7.19-.61L12 2 "
    "9.19 8.63 2 9.24l5.46 4.73L5.82 21z"
)
DEFAULT_STAR_SIZE = 24.0
STAR_SPACING = 0.3
EMPTY_STROKE = "#ddd"
TEXT_FILL = "#666"

_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_size(size: Optional[Union[str, float]]) -> float:
    """Leading number of ``size`` ('32px' -> 32.0); 24.0 when absent or zero."""
    if size is None:
        return DEFAULT_STAR_SIZE
    if isinstance(size, (int, float)):
        value = float(size)
    else:
        match = _LEADING_NUMBER.match(size)
        value = float(match.group(1)) if match else 0.0
    if not value or math.isnan(value):
        return DEFAULT_STAR_SIZE
    return value


def _star(x_pos: float, scale: float, value: int, paint: str) -> str:
    return (
        f'<path d="{STAR_PATH}" data-rating-value="{value}" {paint} '
        f'transform="translate({_n(x_pos)},0) scale({_n(scale)})"/>'
    )


def render_svg(calculator: RatingCalculator, config: RenderConfig) -> str:
    """Render the tally as an SVG document fragment."""
    average = calculator.get_average()
    total = calculator.get_total()
    size = parse_size(config.size)
    color = escape(config.color or DEFAULT_COLOR)
    show_average = config.show_average is not False
    show_total = config.show_total is not False
    show_text = show_average or show_total

    star_size = size
    spacing = star_size * STAR_SPACING
    width = star_size * 5 + spacing * 4 + (size * 4 if show_text else 0)
    height = star_size * 1.2
    scale = star_size / 24

    full_stars, has_half_star, empty_stars = star_split(average)

    elements = []
    x_pos = 0.0
    value = 1
    for _ in range(full_stars):
        elements.append(_star(x_pos, scale, value, f'fill="{color}"'))
        x_pos += star_size + spacing
        value += 1

    if has_half_star:
        elements.append(
            "<defs>"
            '<linearGradient id="half-star" x1="0" x2="100%" y1="0" y2="0">'
            f'<stop offset="50%" stop-color="{color}"/>'
            '<stop offset="50%" stop-color="transparent" stop-opacity="0"/>'
            "</linearGradient>"
            "</defs>"
        )
        elements.append(
            _star(
                x_pos,
                scale,
                value,
                f'fill="url(#half-star)" stroke="{color}" stroke-width="1"',
            )
        )
        x_pos += star_size + spacing
        value += 1

    for _ in range(empty_stars):
        elements.append(
            _star(
                x_pos,
                scale,
                value,
                f'fill="transparent" stroke="{EMPTY_STROKE}" stroke-width="1"',
            )
        )
        x_pos += star_size + spacing
        value += 1

    if show_text:
        text = []
        if show_average:
            text.append(to_fixed(average, 1))
        if show_total:
            text.append(f"({_n(total)} ratings)")
        elements.append(
            f'<text x="{_n(x_pos + size * 0.5)}" y="{_n(size * 0.6)}" '
            f'font-family="Arial, sans-serif" font-size="{_n(size * 0.6)}" '
            f'fill="{TEXT_FILL}">{" ".join(text)}</text>'
        )

    if config.interactive:
        elements.append(svg_interactive_script())

    return (
        f'<svg class="sim-rating-svg" width="{_n(width)}" height="{_n(height)}" '
        f'viewBox="0 0 {_n(width)} {_n(height)}" '
        'xmlns="http://www.w3.org/2000/svg">\n'
        + "\n".join(elements)
        + "\n</svg>"
    )
