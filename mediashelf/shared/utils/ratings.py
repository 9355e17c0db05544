"""
Rating math helpers.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable


def average_score(scores: Iterable[int]) -> tuple[float, int]:
    """
    Mean of the given scores rounded half-up to two decimals.

    Returns:
        (average, count); (0, 0) when there are no scores
    """
    values = list(scores)
    if not values:
        return 0, 0

    mean = Decimal(sum(values)) / Decimal(len(values))
    rounded = mean.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return float(rounded), len(values)
