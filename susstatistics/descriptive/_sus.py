"""
System Usability Scale scoring.

Odd-numbered questions (1, 3, 5, 7, 9) are positively worded and
contribute rating - 1; even-numbered questions (2, 4, 6, 8, 10) are
negatively worded and contribute 5 - rating. The 0-40 sum is scaled by
2.5 to the 0-100 SUS score.

Reference:
    Brooke, J. (1996) "SUS: A 'quick and dirty' usability scale".
"""

from __future__ import annotations

from typing import Sequence

from susstatistics.core.constants import N_ITEMS, RATING_MAX, RATING_MIN, SUS_ITEM_WEIGHT
from susstatistics.core.exceptions import InvalidArgumentError


def sus_score(items: Sequence[float]) -> float:
    """
    SUS score of one respondent.

    Args:
        items: The ten ratings in questionnaire order

    Returns:
        Score in [0, 100]

    Examples:
        >>> sus_score([3] * 10)
        50.0
        >>> sus_score([5, 1, 5, 1, 5, 1, 5, 1, 5, 1])
        100.0
    """
    if items is None or len(items) != N_ITEMS:
        n = 0 if items is None else len(items)
        raise InvalidArgumentError(
            f"items: expected {N_ITEMS} ratings, got {n}"
        )

    total = 0.0
    for i, rating in enumerate(items):
        if i % 2 == 0:
            total += rating - RATING_MIN
        else:
            total += RATING_MAX - rating
    return total * SUS_ITEM_WEIGHT


def sus_scores(rows: Sequence[Sequence[float]]) -> list[float]:
    """SUS score per respondent, in row order."""
    return [sus_score(row) for row in rows]
