"""HTML markup renderer — star glyph row or bar chart."""

from html import escape

from ..formatting import format_number, to_fixed
from ..ratings.calculator import RatingCalculator, star_split
from ..ratings.schemas import STAR_LABELS
from .interactive import html_interactive_script
from .schemas import DEFAULT_COLOR, DEFAULT_SIZE, RenderConfig

FULL_STAR = "★"
HALF_STAR = "½"
EMPTY_STAR = "☆"


def _css(value) -> str:
    if isinstance(value, str):
        return escape(value)
    return format_number(value)


def render_html(calculator: RatingCalculator, config: RenderConfig) -> str:
    """Render the markup for a tally."""
    if config.type == "bars":
        return render_bars(calculator, config)

    average = calculator.get_average()
    total = calculator.get_total()

    parts = [
        f'<div class="sim-rating" style="font-size: {_css(config.size or DEFAULT_SIZE)}">',
        render_stars(average, config),
    ]
    if config.show_average:
        parts.append(
            f'<span class="sim-rating-average">{to_fixed(average, 1)}</span>'
        )
    if config.show_total:
        parts.append(
            f'<span class="sim-rating-total">({format_number(total)} ratings)</span>'
        )
    if config.interactive:
        parts.append(html_interactive_script())
    parts.append("</div>")
    return "\n".join(parts)


def render_stars(average: float, config: RenderConfig) -> str:
    """Full, half and empty glyphs; each carries its star value."""
    full_stars, has_half_star, empty_stars = star_split(average)
    color = _css(config.color or DEFAULT_COLOR)

    glyphs = []
    value = 1
    for _ in range(full_stars):
        glyphs.append(
            f'<span data-rating-value="{value}" style="color: {color}">{FULL_STAR}</span>'
        )
        value += 1
    if has_half_star:
        glyphs.append(
            f'<span data-rating-value="{value}" style="color: {color}">{HALF_STAR}</span>'
        )
        value += 1
    for _ in range(empty_stars):
        glyphs.append(f'<span data-rating-value="{value}">{EMPTY_STAR}</span>')
        value += 1
    return "".join(glyphs)


def render_bars(calculator: RatingCalculator, config: RenderConfig) -> str:
    """One row per bucket, five star first, plus an optional summary."""
    distribution = calculator.get_distribution()
    ratings = calculator.ratings

    rows = [
        render_bar(label, distribution[key], ratings[key], config)
        for key, label in STAR_LABELS.items()
    ]
    if config.show_summary:
        rows.append(render_summary(calculator))
    return (
        '<div class="sim-rating-bars" style="width:100%">\n'
        + "\n".join(rows)
        + "\n</div>"
    )


def render_bar(label: str, percentage: float, count, config: RenderConfig) -> str:
    """A labeled bar whose fill width is the bucket's percentage."""
    radius = _css(config.bar_border_radius)
    row = [
        f'<div class="sim-rating-bar-container" style="margin-bottom:{_css(config.bar_spacing)}">',
        f'<div class="sim-rating-bar-label" style="width:80px">{label}: {format_number(count)}</div>',
        f'<div class="sim-rating-bar-bg" style="height:{_css(config.bar_height)};'
        f"background:#f0f0f0;border-radius:{radius};width:100%;overflow:hidden\">",
        f'<div class="sim-rating-bar-fill" style="width:{format_number(percentage)}%;'
        f"height:100%;background:{_css(config.color or DEFAULT_COLOR)};border-radius:{radius};"
        f'transition:width 0.3s ease"></div>',
        "</div>",
    ]
    if config.bar_show_percentages:
        text = to_fixed(percentage, config.bar_percentage_precision)
        row.append(
            '<div class="sim-rating-bar-percent" style="width:50px;text-align:right">'
            f"{text}{escape(config.bar_percentage_suffix)}</div>"
        )
    row.append("</div>")
    return "\n".join(row)


def render_summary(calculator: RatingCalculator) -> str:
    """'Average: X from Y ratings' line under the bar chart."""
    average = to_fixed(calculator.get_average(), 1)
    total = format_number(calculator.get_total())
    return (
        '<div class="sim-rating-summary" style="margin-top:12px">'
        f"Average: <strong>{average}</strong> from <strong>{total}</strong> ratings"
        "</div>"
    )
