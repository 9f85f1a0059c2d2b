"""
Aggregate rating of a movie from its reviews.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from movie_catalog.models import Review

_ONE_DECIMAL = Decimal("0.1")


def aggregate(reviews: Sequence[Review]) -> float:
    """Mean review rating rounded half away from zero to one decimal.

    An empty sequence yields 0, which means "unrated".
    """
    if not reviews:
        return 0.0
    # str() keeps 5.26 as 5.26 instead of its binary expansion
    total = sum(Decimal(str(float(review.rating))) for review in reviews)
    mean = total / len(reviews)
    return float(mean.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))
