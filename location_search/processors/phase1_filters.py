"""
Phase 1: Ancestor Filters

Narrows a level's records by ancestor-level substring constraints, e.g.
"villages whose district contains 'Central'".

Order of application:
- Shallowest depth first (state, then district, ...)
- Within one depth, in the order the filters were given
All filters combine with AND semantics. Filters at or below the searched
depth are ignored.
"""
from typing import Dict, List, Optional, Sequence
import logging

from ..levels import Filter
from ..utils.text_utils import contains_ignore_case

logger = logging.getLogger(__name__)


def apply_filters(
    records: List[Dict[str, str]],
    search_depth: int,
    filters: Optional[Sequence[Filter]] = None
) -> List[Dict[str, str]]:
    """
    Keep only records satisfying every applicable ancestor filter.

    Args:
        records: Records of the searched level
        search_depth: Depth of the searched level
        filters: Ancestor filters (None/empty = no filtering)

    Returns:
        Filtered records in original order (the input list itself if no filters)
    """
    if not filters:
        return records

    for depth in range(search_depth):
        for flt in filters:
            if flt.level.depth != depth:
                continue
            field = flt.level.field_name
            before = len(records)
            records = [
                record for record in records
                if contains_ignore_case(record[field], flt.query)
            ]
            logger.debug(f"[FILTER] {field} ~ '{flt.query}': {before} → {len(records)}")

    return records
