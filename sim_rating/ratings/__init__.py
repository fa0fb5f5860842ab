"""
Ratings module for Sim Rating

Canonical tally keys, key normalization, validation and the statistics
calculator behind every renderer.
"""

from .calculator import AVERAGE_ADJUSTMENT, RatingCalculator, star_split
from .errors import (
    InvalidOptionError,
    InvalidRatingValueError,
    MissingRatingKeysError,
    ValidationError,
)
from .normalize import normalize_key, normalize_keys
from .schemas import CANONICAL_KEYS, STAR_LABELS, STAR_WEIGHTS, RatingSummary

__all__ = [
    "AVERAGE_ADJUSTMENT",
    "CANONICAL_KEYS",
    "STAR_LABELS",
    "STAR_WEIGHTS",
    "RatingCalculator",
    "RatingSummary",
    "ValidationError",
    "MissingRatingKeysError",
    "InvalidRatingValueError",
    "InvalidOptionError",
    "normalize_key",
    "normalize_keys",
    "star_split",
]
