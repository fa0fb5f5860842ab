"""Rating — the public calculator-and-renderer.

A Rating is built once from a tally and optional render options:

    rating = Rating({"oneStar": 4, "twoStar": 8, "threeStar": 15,
                     "fourStar": 27, "fiveStar": 42}, {"type": "bars"})
    rating.get_average()      # 3.81
    rating.render("svg")      # '<svg class="sim-rating-svg" ...'

Construction raises ValidationError for a bad tally or bad options.
render() never raises: a failing renderer is logged and yields "".
"""

import logging
from typing import Any, Mapping, Optional, Union

import pydantic

from .ratings.calculator import RatingCalculator
from .ratings.errors import InvalidOptionError
from .ratings.schemas import RatingSummary
from .renderers.registry import RendererRegistry, get_renderer_registry
from .renderers.schemas import RenderConfig, RenderFormat

logger = logging.getLogger(__name__)


class Rating:
    """Star rating statistics with HTML, SVG and JSON rendering."""

    def __init__(
        self,
        ratings: Mapping[str, Any],
        options: Optional[Mapping[str, Any]] = None,
        *,
        diagnostics: Optional[logging.Logger] = None,
        registry: Optional[RendererRegistry] = None,
    ):
        self._calculator = RatingCalculator(ratings)
        try:
            self._options = RenderConfig.from_options(options)
        except pydantic.ValidationError as e:
            raise InvalidOptionError(f"Invalid render options: {e}") from e
        self._diagnostics = diagnostics if diagnostics is not None else logger
        self._registry = registry if registry is not None else get_renderer_registry()

    def __repr__(self) -> str:
        counts = ", ".join(f"{k}={v}" for k, v in self.ratings.items())
        return f"Rating({counts})"

    @property
    def ratings(self) -> Mapping[str, Any]:
        """The canonical tally (read-only)."""
        return self._calculator.ratings

    @property
    def options(self) -> RenderConfig:
        """Instance render options (defaults merged with constructor options)."""
        return self._options

    # -- Statistics --

    def get_average(self) -> float:
        return self._calculator.get_average()

    def get_total(self) -> Union[int, float]:
        return self._calculator.get_total()

    def get_distribution(self) -> dict[str, float]:
        return self._calculator.get_distribution()

    def summary(self) -> RatingSummary:
        """RatingSummary with average, total and distribution."""
        return self._calculator.summary()

    # -- Rendering --

    def media_type(self, render_format: Union[str, RenderFormat, None] = "html") -> str:
        """Media type of what render(render_format) returns."""
        return self._registry.resolve(render_format).media_type

    def render(
        self,
        render_format: Union[str, RenderFormat, None] = "html",
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Render as 'html', 'svg' or 'json'; unknown formats render html.

        ``overrides`` are layered over the instance options for this call
        only. Any failure while rendering is logged as a warning and an
        empty string is returned.
        """
        try:
            renderer = self._registry.resolve(render_format)
            # Style-free renderers never see the overrides
            config = (
                self._options.merged(overrides)
                if renderer.uses_style_options
                else self._options
            )
            return renderer.render(self._calculator, config)
        except Exception as e:
            self._diagnostics.warning(f"Error rendering rating: {e}", exc_info=True)
            return ""
