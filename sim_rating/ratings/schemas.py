"""Rating tally schemas.

The five canonical bucket keys, their star weights and display labels, and
the summary model emitted by the json renderer.
"""

from typing import Union

from pydantic import BaseModel, Field

# Canonical order: one star first
CANONICAL_KEYS: tuple[str, ...] = (
    "oneStar",
    "twoStar",
    "threeStar",
    "fourStar",
    "fiveStar",
)

STAR_WEIGHTS: dict[str, int] = {
    "oneStar": 1,
    "twoStar": 2,
    "threeStar": 3,
    "fourStar": 4,
    "fiveStar": 5,
}

# Bar chart rows, five star first
STAR_LABELS: dict[str, str] = {
    "fiveStar": "5-star",
    "fourStar": "4-star",
    "threeStar": "3-star",
    "twoStar": "2-star",
    "oneStar": "1-star",
}


class RatingSummary(BaseModel):
    """Average, total and percentage distribution of a tally."""

    average: float = Field(
        ..., description="Adjusted weighted average, 2 decimal places"
    )
    total: Union[int, float] = Field(..., description="Sum of all five bucket counts")
    distribution: dict[str, float] = Field(
        ...,
        description="Canonical key -> percentage of total, 2 decimal places",
    )
