"""Rating calculator — validates a tally and answers statistics queries.

Input keys are normalized before validation, so ``{"five_star": 3}`` and
``{"fiveStar": 3}`` describe the same bucket. A calculator is never built
from an invalid tally and never changes after construction.
"""

import logging
import math
from numbers import Real
from types import MappingProxyType
from typing import Any, Mapping, Union

from ..formatting import round_to
from .errors import InvalidRatingValueError, MissingRatingKeysError
from .normalize import normalize_keys
from .schemas import CANONICAL_KEYS, STAR_WEIGHTS, RatingSummary

logger = logging.getLogger(__name__)

# Fixed calibration applied to every weighted average.
AVERAGE_ADJUSTMENT = 0.956


def is_valid_count(value: Any) -> bool:
    """True for finite, non-negative real numbers (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value) and value >= 0


def _as_count(value: Real) -> Union[int, float]:
    return value if isinstance(value, int) else float(value)


def validate_tally(ratings: Mapping[str, Any]) -> None:
    """Validate a normalized tally.

    Raises:
        MissingRatingKeysError: If any canonical key is absent.
        InvalidRatingValueError: For the first value that is not a
            non-negative number.
    """
    missing = [key for key in CANONICAL_KEYS if key not in ratings]
    if missing:
        raise MissingRatingKeysError(missing)

    for key, value in ratings.items():
        if not is_valid_count(value):
            raise InvalidRatingValueError(key, value)


class RatingCalculator:
    """Statistics over a validated five-bucket tally."""

    def __init__(self, ratings: Mapping[str, Any]):
        normalized = normalize_keys(ratings)
        validate_tally(normalized)

        extra = [key for key in normalized if key not in STAR_WEIGHTS]
        if extra:
            logger.debug(f"Ignoring non-rating keys: {', '.join(extra)}")

        # Other Real types (Fraction, numpy scalars) are stored as float
        self._ratings: dict[str, Union[int, float]] = {
            key: _as_count(normalized[key]) for key in CANONICAL_KEYS
        }

    @property
    def ratings(self) -> Mapping[str, Union[int, float]]:
        """Read-only view of the canonical tally."""
        return MappingProxyType(self._ratings)

    def get_total(self) -> Real:
        """Sum of all five bucket counts."""
        return sum(self._ratings.values())

    def get_average(self) -> float:
        """Weighted mean scaled by AVERAGE_ADJUSTMENT, 2 decimal places.

        Returns 0.0 for an empty tally.
        """
        total = self.get_total()
        if total <= 0:
            return 0.0
        weighted = sum(
            STAR_WEIGHTS[key] * count for key, count in self._ratings.items()
        )
        return round_to(weighted / total * AVERAGE_ADJUSTMENT, 2)

    def get_distribution(self) -> dict[str, float]:
        """Percentage share of each bucket, 2 decimal places."""
        total = self.get_total()
        if total <= 0:
            return {key: 0.0 for key in CANONICAL_KEYS}
        return {
            key: round_to(count / total * 100, 2)
            for key, count in self._ratings.items()
        }

    def summary(self) -> RatingSummary:
        """All three statistics as one model."""
        return RatingSummary(
            average=self.get_average(),
            total=self.get_total(),
            distribution=self.get_distribution(),
        )


def star_split(average: float) -> tuple[int, bool, int]:
    """Split an average into (full, has_half, empty) stars out of five."""
    full_stars = math.floor(average)
    has_half_star = average - full_stars >= 0.5
    empty_stars = 5 - full_stars - (1 if has_half_star else 0)
    return full_stars, has_half_star, empty_stars
