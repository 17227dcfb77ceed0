"""
Grouping of validated content into per-system rating matrices.
"""

from __future__ import annotations

from susstatistics.core.constants import N_ITEMS
from susstatistics.ingest._validator import iter_data_rows


def group_rows(content: str) -> dict[str, list[list[float]]]:
    """
    Group respondent ratings by system/variable label.

    Must only be called on content that passed check_content(). Labels
    keep the order in which they first appear; rows within a label keep
    their order in the content.

    Args:
        content: The entire validated file content (header included)

    Returns:
        {label: [ten ratings as float, ...] per respondent}
    """
    groups: dict[str, list[list[float]]] = {}
    for _, fields in iter_data_rows(content.split('\n')):
        label = fields[N_ITEMS]
        ratings = [float(v) for v in fields[:N_ITEMS]]
        groups.setdefault(label, []).append(ratings)
    return groups
