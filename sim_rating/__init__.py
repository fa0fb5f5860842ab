"""Sim Rating - star rating statistics and renderers.

Turns a one-star..five-star tally into summary statistics and renders it as:
- HTML markup (star glyph row or bar chart)
- a self-contained SVG image
- a compact JSON document
"""

from .rating import Rating
from .ratings.errors import (
    InvalidOptionError,
    InvalidRatingValueError,
    MissingRatingKeysError,
    ValidationError,
)
from .renderers.schemas import RenderConfig, RenderFormat

__version__ = "0.1.0"

__all__ = [
    "Rating",
    "RenderConfig",
    "RenderFormat",
    "ValidationError",
    "MissingRatingKeysError",
    "InvalidRatingValueError",
    "InvalidOptionError",
]
