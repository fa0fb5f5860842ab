"""Key normalization: 'five_star' / 'five-star' -> 'fiveStar'."""

import logging
import re
from typing import Any, Mapping

logger = logging.getLogger(__name__)

_SEPARATED = re.compile(r"[_-]([A-Za-z0-9])")


def normalize_key(key: str) -> str:
    """Drop each separator and uppercase the character after it."""
    return _SEPARATED.sub(lambda m: m.group(1).upper(), key)


def normalize_keys(values: Mapping[str, Any]) -> dict[str, Any]:
    """Normalize every key of a mapping, keeping input order.

    When two spellings collapse to the same key the later one wins.
    """
    normalized: dict[str, Any] = {}
    for key, value in values.items():
        canonical = normalize_key(str(key))
        if canonical != key:
            logger.debug(f"Normalized rating key {key!r} -> {canonical!r}")
        normalized[canonical] = value
    return normalized
