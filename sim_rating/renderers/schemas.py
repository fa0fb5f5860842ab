"""Render schemas — output formats and render configuration.

RenderConfig holds every option the renderers read. Options use
snake_case field names with the camelCase spelling as alias, so hosts can
pass either ``showAverage`` or ``show_average``.
"""

from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..ratings.normalize import normalize_keys

DEFAULT_COLOR = "#ffc107"
DEFAULT_SIZE = "1em"


class RenderFormat(str, Enum):
    """Output formats understood by Rating.render()."""

    HTML = "html"
    SVG = "svg"
    JSON = "json"

    @property
    def media_type(self) -> str:
        return _MEDIA_TYPES[self]

    @classmethod
    def parse(cls, value: Union[str, "RenderFormat", None]) -> "RenderFormat":
        """Resolve a format name case-insensitively; unknown names -> HTML."""
        if isinstance(value, RenderFormat):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.HTML


_MEDIA_TYPES = {
    RenderFormat.HTML: "text/html",
    RenderFormat.SVG: "image/svg+xml",
    RenderFormat.JSON: "application/json",
}


class RenderConfig(BaseModel):
    """Effective render options (defaults < instance options < call overrides)."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    type: str = Field(
        default="stars",
        description="Markup mode: 'stars' for glyphs, 'bars' for a bar chart",
    )
    # None falls back to the default color / size when rendered
    color: Optional[str] = Field(
        default=DEFAULT_COLOR,
        description="Fill color for filled stars and bars",
    )
    size: Optional[Union[str, float]] = Field(
        default=DEFAULT_SIZE,
        description="CSS font-size for markup; leading number is the svg star size",
    )
    # Markup hides on any falsy value; svg hides only on an explicit False
    show_average: Optional[bool] = Field(default=True, alias="showAverage")
    show_total: Optional[bool] = Field(default=True, alias="showTotal")
    interactive: bool = Field(
        default=False,
        description="Embed the rating-change click script",
    )
    bar_height: str = Field(default="20px", alias="barHeight")
    bar_spacing: str = Field(default="8px", alias="barSpacing")
    bar_border_radius: str = Field(default="4px", alias="barBorderRadius")
    bar_show_percentages: bool = Field(default=True, alias="barShowPercentages")
    bar_percentage_precision: int = Field(
        default=1,
        ge=0,
        le=100,
        alias="barPercentagePrecision",
    )
    bar_percentage_suffix: str = Field(default="%", alias="barPercentageSuffix")
    show_summary: bool = Field(default=True, alias="showSummary")

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "RenderConfig":
        """Build a config from caller options layered over the defaults."""
        return cls.model_validate(_by_alias(options or {}))

    def merged(self, overrides: Optional[Mapping[str, Any]] = None) -> "RenderConfig":
        """Return a new config with ``overrides`` layered over this one."""
        if not overrides:
            return self
        data = self.model_dump(by_alias=True)
        data.update(_by_alias(overrides))
        return type(self).model_validate(data)


def _by_alias(options: Mapping[str, Any]) -> dict[str, Any]:
    """Normalize option keys to their camelCase alias spelling."""
    return normalize_keys(options)
