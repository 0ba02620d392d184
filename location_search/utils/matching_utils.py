"""
Approximate matching of a query against one field of a record list.

Scoring (0 = perfect, 1 = completely different):
- The query is compared to spans of the field value, case-insensitively
- A span starts at an offset in [0, distance] and its length is
  len(query) ± slack, where slack = ceil(len(query) * threshold)
- Span score = Jaro-Winkler normalized distance (rapidfuzz)
- Record score = best span score; record matches iff score <= threshold

With threshold 0 the slack is 0, so a match means the field starts with the
query exactly (at offset 0 when distance is 0).

Ranking: score ascending, then Levenshtein distance between query and the
whole field (closest name first), then original order.
"""
import math
import logging
from typing import Any, Dict, List, NamedTuple, Optional

import Levenshtein
from rapidfuzz.distance import JaroWinkler

from .text_utils import fold_case

logger = logging.getLogger(__name__)


class MatchResult(NamedTuple):
    item: Dict[str, Any]
    score: float
    ref_index: int


def span_slack(query_length: int, threshold: float) -> int:
    """
    Number of characters a matching span may be shorter/longer than the query.

    Example:
        >>> span_slack(3, 0.0)
        0
        >>> span_slack(3, 0.1)
        1
    """
    # round() guards against float noise such as 3 * 0.1 = 0.30000000000000004
    return math.ceil(round(query_length * threshold, 9))


def best_span_score(query: str, text: str, threshold: float, distance: int = 0) -> float:
    """
    Best (lowest) Jaro-Winkler distance between `query` and any admissible span of `text`.

    Both strings must already be case-folded.

    Example:
        >>> best_span_score("pun", "pune", 0.0)
        0.0
        >>> round(best_span_score("pue", "pune", 0.1), 3)
        0.067
    """
    if not query or not text:
        return 1.0

    slack = span_slack(len(query), threshold)
    min_len = max(1, len(query) - slack)
    max_len = len(query) + slack

    best = 1.0
    for offset in range(0, min(distance, len(text) - 1) + 1):
        remaining = len(text) - offset
        for length in range(min_len, min(max_len, remaining) + 1):
            span = text[offset:offset + length]
            if span == query:
                return 0.0
            score = JaroWinkler.normalized_distance(query, span)
            if score < best:
                best = score
    return best


class FuzzyMatcher:
    """
    Ranks records by how well one field approximately matches a query.

    Built fresh for each query over the already pre-filtered records;
    instances are not shared between calls.

    Example:
        >>> matcher = FuzzyMatcher([{'district': 'Pune'}], key='district', threshold=0.1)
        >>> [r.item for r in matcher.search('Pue')]
        [{'district': 'Pune'}]
    """

    def __init__(
        self,
        records: List[Dict[str, Any]],
        key: str,
        threshold: float = 0.0,
        distance: int = 0,
        tie_break: Optional[bool] = None,
    ):
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be within [0, 1], got {threshold}")
        if distance < 0:
            raise ValueError(f"distance must be >= 0, got {distance}")

        if tie_break is None:
            from ..config import RANK_TIE_BREAK_EDIT_DISTANCE
            tie_break = RANK_TIE_BREAK_EDIT_DISTANCE

        self.records = records
        self.key = key
        self.threshold = threshold
        self.distance = distance
        self.tie_break = tie_break

    def search(self, query: str) -> List[MatchResult]:
        """
        Return matching records, best first.

        An empty query matches nothing.
        """
        query_folded = query.lower()
        if not query_folded:
            return []

        scored = []
        for idx, record in enumerate(self.records):
            value = fold_case(record[self.key])
            score = best_span_score(query_folded, value, self.threshold, self.distance)
            if score > self.threshold:
                continue
            edit = Levenshtein.distance(query_folded, value) if self.tie_break else 0
            scored.append((score, edit, idx, record))

        scored.sort(key=lambda entry: (entry[0], entry[1], entry[2]))

        logger.debug(
            f"[MATCH] '{query}' on '{self.key}': {len(scored)}/{len(self.records)} matched "
            f"(threshold={self.threshold}, distance={self.distance})"
        )

        return [MatchResult(item=record, score=score, ref_index=idx) for score, _, idx, record in scored]
