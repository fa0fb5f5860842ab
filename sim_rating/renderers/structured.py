"""JSON renderer — average, total and distribution, nothing else."""

from ..ratings.calculator import RatingCalculator
from .schemas import RenderConfig


def render_json(calculator: RatingCalculator, config: RenderConfig) -> str:
    """Serialize the rating summary; style options are ignored."""
    return calculator.summary().model_dump_json()
