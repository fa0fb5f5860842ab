"""Renderer registry — maps each output format to its render strategy.

Follows the same pattern as the other catalogs:
- Lazy loading with _loaded guard
- In-memory dict keyed by RenderFormat
- Global singleton via get_renderer_registry()
- resolve() falls back to the HTML renderer for unknown formats
"""

import logging
from typing import Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..ratings.calculator import RatingCalculator
from .markup import render_html
from .schemas import RenderConfig, RenderFormat
from .structured import render_json
from .vector import render_svg

logger = logging.getLogger(__name__)

RenderFunction = Callable[[RatingCalculator, RenderConfig], str]


class RendererDefinition(BaseModel):
    """A render strategy and what it produces."""

    model_config = ConfigDict(frozen=True)

    format: RenderFormat
    renderer_name: str
    description: str = ""
    uses_style_options: bool = Field(
        default=True,
        description="False when the output ignores RenderConfig entirely",
    )
    render: RenderFunction = Field(exclude=True)

    @property
    def media_type(self) -> str:
        return self.format.media_type


BUILTIN_RENDERERS = (
    RendererDefinition(
        format=RenderFormat.HTML,
        renderer_name="HTML Markup",
        description="Star glyph row, or a bar chart when type='bars'",
        render=render_html,
    ),
    RendererDefinition(
        format=RenderFormat.SVG,
        renderer_name="SVG Image",
        description="Self-contained vector stars with an optional text label",
        render=render_svg,
    ),
    RendererDefinition(
        format=RenderFormat.JSON,
        renderer_name="JSON Summary",
        description="Average, total and distribution as a JSON object",
        uses_style_options=False,
        render=render_json,
    ),
)


class RendererRegistry:
    """Registry of render strategies keyed by output format."""

    def __init__(self, renderers: Optional[tuple[RendererDefinition, ...]] = None):
        self._builtin = BUILTIN_RENDERERS if renderers is None else renderers
        self._renderers: dict[RenderFormat, RendererDefinition] = {}
        self._loaded = False

    def load(self) -> None:
        """Register the renderer definitions."""
        if self._loaded:
            return

        for renderer in self._builtin:
            self._renderers[renderer.format] = renderer
            logger.debug(f"Loaded renderer: {renderer.format.value}")

        self._loaded = True
        logger.debug(f"Loaded {len(self._renderers)} renderer definitions")

    def get(self, render_format: RenderFormat) -> Optional[RendererDefinition]:
        """Get a renderer definition by format."""
        self.load()
        return self._renderers.get(render_format)

    def resolve(
        self, render_format: Union[str, RenderFormat, None]
    ) -> RendererDefinition:
        """Get the renderer for a format name, falling back to HTML."""
        self.load()
        renderer = self._renderers.get(RenderFormat.parse(render_format))
        if renderer is None:
            renderer = self._renderers[RenderFormat.HTML]
        return renderer

    def list_all(self) -> list[RendererDefinition]:
        """List all renderer definitions."""
        self.load()
        return list(self._renderers.values())

    def list_keys(self) -> list[str]:
        """List all format names."""
        self.load()
        return [f.value for f in self._renderers]

    def count(self) -> int:
        """Get total number of renderers."""
        self.load()
        return len(self._renderers)


# Global registry instance
_registry: Optional[RendererRegistry] = None


def get_renderer_registry() -> RendererRegistry:
    """Get the global renderer registry instance."""
    global _registry
    if _registry is None:
        _registry = RendererRegistry()
        _registry.load()
    return _registry
