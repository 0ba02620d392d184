"""
Location Search Pipeline - Orchestrates all 3 phases

Per query:
records(level) → Phase 1 (ancestor filters) → Phase 2 (trie prefix pre-filter)
→ Phase 3 (approximate matching) → ranked record copies
"""
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union
import time
import logging

from .config import (
    DEBUG_QUERY,
    FUZZY_THRESHOLD,
    PREFIX_BACKOFF_FUZZY,
    PREFIX_LENGTH,
    SEARCH_DISTANCE,
    SEARCH_THRESHOLD,
)
from .levels import Filter, Level, coerce_filters
from .processors import phase1_filters
from .processors import phase2_prefilter
from .processors import phase3_matching
from .utils.data_loader import build_record_store, load_location_tree
from .utils.trie import Trie

logger = logging.getLogger(__name__)


class LocationSearch:
    """
    Search engine over the state → district → subDistrict → village hierarchy.

    The record store and trie are built once in the constructor and never
    modified afterwards, so queries can be issued from several callers.
    """

    def __init__(self, file_path: Union[str, Path, None] = None, tree: Optional[List[Dict[str, Any]]] = None):
        """
        Load the dataset and build the record store and trie.

        Args:
            file_path: Path to the JSON dataset
            tree: Already-parsed dataset (used instead of file_path)

        Raises:
            DatasetError: if the dataset cannot be read or is malformed
        """
        if tree is None:
            if file_path is None:
                raise ValueError("Either file_path or tree is required")
            tree = load_location_tree(file_path)

        self.trie = Trie()
        self.store = build_record_store(tree, self.trie)

    @classmethod
    def from_tree(cls, tree: List[Dict[str, Any]]) -> 'LocationSearch':
        """Build from an already-parsed location tree."""
        return cls(tree=tree)

    def search(self, level: Level, query: str, filters: Optional[Sequence[Filter]] = None) -> List[Dict[str, str]]:
        """
        Near-exact search (threshold 0): the name must start with the query.

        Example:
            >>> engine.search(Level.DISTRICT, 'Pune')
            [{'state': 'Maharashtra', 'district': 'Pune'}]
        """
        return self.run_query(level, query, SEARCH_THRESHOLD, SEARCH_DISTANCE, filters)

    def fuzzy_search(self, level: Level, query: str, filters: Optional[Sequence[Filter]] = None) -> List[Dict[str, str]]:
        """
        Fuzzy search (threshold 0.1), tolerant of small typos.

        Example:
            >>> engine.fuzzy_search(Level.DISTRICT, 'Pue')
            [{'state': 'Maharashtra', 'district': 'Pune'}]
        """
        return self.run_query(
            level, query, FUZZY_THRESHOLD, SEARCH_DISTANCE, filters,
            backoff=PREFIX_BACKOFF_FUZZY
        )

    def run_query(
        self,
        level: Level,
        query: str,
        threshold: float,
        distance: int = 0,
        filters: Optional[Sequence[Filter]] = None,
        backoff: bool = False
    ) -> List[Dict[str, str]]:
        """
        Run one query through all phases.

        Args:
            level: Level to search (must be a Level member)
            query: Raw query string
            threshold: Matcher threshold in [0, 1]
            distance: Max offset of the matching span inside the name
            filters: Ancestor filters
            backoff: Let the prefix pre-filter shorten an unmatched prefix

        Returns:
            Plain record copies, best match first

        Raises:
            TypeError: if `level` is not a Level member
        """
        start_time = time.time()

        records = self.store.records(level)
        total = len(records)

        # Phase 1: ancestor filters
        records = phase1_filters.apply_filters(records, level.depth, coerce_filters(filters))
        after_filters = len(records)

        # Phase 2: trie prefix pre-filter
        records = phase2_prefilter.prefilter_by_prefix(
            records, level, query, self.trie,
            prefix_length=PREFIX_LENGTH, backoff=backoff
        )
        after_prefix = len(records)

        # Phase 3: approximate matching
        results = phase3_matching.match_records(records, level, query, threshold, distance)

        if DEBUG_QUERY:
            elapsed_ms = (time.time() - start_time) * 1000
            logger.debug(
                f"[QUERY] {level.field_name} '{query}' (threshold={threshold}): "
                f"{total} → filters {after_filters} → prefix {after_prefix} → "
                f"matched {len(results)} ({elapsed_ms:.1f}ms)"
            )

        return results

    def stats(self) -> Dict[str, Any]:
        """Record counts per level and number of distinct trie words."""
        return {
            'records': self.store.counts(),
            'trie_words': len(self.trie),
        }
