"""
Rating aggregate arithmetic and rating validation.

The incremental mean update keeps an album's (avg_rating, num_ratings)
pair consistent without re-reading its reviews:
new_avg = (old_avg * old_count + new_rating) / (old_count + 1).

Dependencies: backend.core.exceptions
System role: Aggregate maths shared by the review transaction and seeding
"""

import math
from collections.abc import Iterable
from numbers import Real
from typing import Any

from backend.core.exceptions import ValidationError


def incremental_mean(avg: float, count: int, new_value: float) -> tuple[float, int]:
    """
    Fold one value into an existing (average, count) pair.

    Args:
        avg: Current average (ignored when count is 0)
        count: Number of values already averaged
        new_value: Value to add

    Returns:
        tuple[float, int]: (new_average, new_count)
    """
    new_count = count + 1
    return (avg * count + new_value) / new_count, new_count


def aggregate_ratings(ratings: Iterable[float]) -> tuple[float, int]:
    """
    Average a sequence of ratings with the incremental update.

    Returns:
        tuple[float, int]: (average, count); (0.0, 0) for no ratings
    """
    avg, count = 0.0, 0
    for value in ratings:
        avg, count = incremental_mean(avg, count, value)
    return avg, count


def is_numeric_rating(value: Any) -> bool:
    """True for finite real numbers; bools and strings are not ratings."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(float(value))


def parse_rating(raw: Any) -> float:
    """
    Coerce a submitted form value to a numeric rating.

    Form posts deliver the rating as a string; numbers pass through.

    Args:
        raw: Raw rating value

    Returns:
        float: Parsed rating

    Raises:
        ValidationError: If the value is missing or not numeric
    """
    if is_numeric_rating(raw):
        return float(raw)
    if isinstance(raw, str) and raw.strip():
        try:
            value = float(raw.strip())
        except ValueError:
            value = math.nan
        if math.isfinite(value):
            return value
    raise ValidationError("Review must include a numeric rating field", field="rating")
