"""
Utility modules for location search.
"""
from .text_utils import (
    fold_case,
    contains_ignore_case,
    starts_with_any,
)

from .trie import Trie, TrieNode

from .matching_utils import (
    FuzzyMatcher,
    MatchResult,
    best_span_score,
    span_slack,
)

from .data_loader import (
    DatasetError,
    RecordStore,
    build_record_store,
    load_location_tree,
)

__all__ = [
    # Text utilities
    'fold_case',
    'contains_ignore_case',
    'starts_with_any',
    # Trie
    'Trie',
    'TrieNode',
    # Matching utilities
    'FuzzyMatcher',
    'MatchResult',
    'best_span_score',
    'span_slack',
    # Dataset
    'DatasetError',
    'RecordStore',
    'build_record_store',
    'load_location_tree',
]
