"""
Phase 2: Trie Prefix Pre-filter

Cheaply discards records that cannot match before the fuzzy matcher runs:
1. Take the first PREFIX_LENGTH characters of the query (lowercased)
2. Expand them into every stored name with that prefix (trie lookup)
3. Keep records whose field starts with one of those names

With back-off enabled, a prefix that matches no stored name is shortened
one character at a time (down to 1) so a typo in the third character does
not empty the candidate set. A typo that still matches some other stored
name is not recovered.
"""
from typing import Dict, List, Set
import logging

from ..levels import Level
from ..utils.text_utils import fold_case, starts_with_any
from ..utils.trie import Trie

logger = logging.getLogger(__name__)


def candidate_words(trie: Trie, query: str, prefix_length: int = 3, backoff: bool = False) -> Set[str]:
    """
    Stored names sharing the query's leading characters.

    Example:
        >>> trie = Trie(); trie.insert('pune')
        >>> candidate_words(trie, 'Pue')
        set()
        >>> candidate_words(trie, 'Pue', backoff=True)
        {'pune'}
    """
    prefix = query[:prefix_length].lower()
    words = trie.search_prefix(prefix)

    while backoff and not words and len(prefix) > 1:
        prefix = prefix[:-1]
        words = trie.search_prefix(prefix)
        logger.debug(f"[PREFIX] Backed off to '{prefix}': {len(words)} candidate words")

    return words


def prefilter_by_prefix(
    records: List[Dict[str, str]],
    level: Level,
    query: str,
    trie: Trie,
    prefix_length: int = 3,
    backoff: bool = False
) -> List[Dict[str, str]]:
    """
    Keep records whose `level` field (lowercased) starts with a candidate word.

    Args:
        records: Records after ancestor filtering
        level: Searched level
        query: Raw query string
        trie: Trie of all place names
        prefix_length: Query characters used for the trie lookup
        backoff: Shorten the prefix when it matches no stored name

    Returns:
        Admissible records in original order
    """
    words = candidate_words(trie, query, prefix_length, backoff)
    if not words:
        return []

    # Every candidate is at least as long as the prefix actually used
    shortest = min(len(word) for word in words)
    field = level.field_name

    return [
        record for record in records
        if starts_with_any(fold_case(record[field]), words, shortest)
    ]
