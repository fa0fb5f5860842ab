"""Demo page — one tally rendered every way on a single HTML document.

The interactive section carries a listener that writes
"User rated: N stars" into #interactive-output when a star is clicked,
so the page doubles as a manual check of the click script.
"""

import logging
from html import escape
from typing import Any, Mapping

from .rating import Rating

logger = logging.getLogger(__name__)

DEMO_RATINGS: dict[str, int] = {
    "oneStar": 10,
    "twoStar": 20,
    "threeStar": 15,
    "fourStar": 30,
    "fiveStar": 50,
}

_OUTPUT_LISTENER = """
<script>
  document.getElementById('interactive-rating').addEventListener('rating-change', (e) => {
    document.getElementById('interactive-output').textContent =
      'User rated: ' + e.detail.rating + ' stars';
  });
</script>
"""


def build_demo_page(
    ratings: Mapping[str, Any] = DEMO_RATINGS,
    title: str = "Sim Rating Demo",
) -> str:
    """Build a full HTML document showing each render of ``ratings``.

    Raises:
        ValidationError: If ``ratings`` is not a valid tally.
    """
    rating = Rating(ratings)
    sections = [
        ("vanilla-rating", "Stars", rating.render("html")),
        ("module-rating", "Bars", rating.render("html", {"type": "bars"})),
        (
            "interactive-rating",
            "Interactive",
            rating.render("html", {"interactive": True}),
        ),
        ("svg-rating", "SVG", rating.render("svg", {"size": "32px"})),
    ]

    body = []
    for element_id, heading, content in sections:
        body.append(f"<h2>{heading}</h2>")
        body.append(f'<div id="{element_id}">{content}</div>')
    body.append('<p id="interactive-output"></p>')
    body.append(_OUTPUT_LISTENER)

    logger.debug(f"Built demo page for {rating!r}")

    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="UTF-8">\n'
        f"<title>{escape(title)}</title>\n"
        "</head>\n"
        "<body>\n"
        f"<h1>{escape(title)}</h1>\n"
        + "\n".join(body)
        + "\n<pre id=\"json-rating\">"
        + escape(rating.render("json"))
        + "</pre>\n</body>\n</html>\n"
    )
