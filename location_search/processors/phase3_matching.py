"""
Phase 3: Approximate Matching

Runs a fresh FuzzyMatcher over the pre-filtered records and returns plain
record copies (no scores) in ranked order.
"""
from typing import Dict, List

from ..levels import Level
from ..utils.matching_utils import FuzzyMatcher


def match_records(
    records: List[Dict[str, str]],
    level: Level,
    query: str,
    threshold: float,
    distance: int = 0
) -> List[Dict[str, str]]:
    """
    Rank records whose `level` field approximately matches the query.

    Args:
        records: Pre-filtered records
        level: Searched level (selects the compared field)
        query: Raw query string
        threshold: 0 = near-exact, larger = more permissive
        distance: Max offset of the matching span inside the field

    Returns:
        Copies of the matched records, best match first
    """
    if not records:
        return []

    matcher = FuzzyMatcher(records, key=level.field_name, threshold=threshold, distance=distance)
    return [dict(result.item) for result in matcher.search(query)]
