"""
Text utilities for case-insensitive comparison of place names.
"""
from functools import lru_cache


@lru_cache(maxsize=None)
def fold_case(text: str) -> str:
    """
    Lowercase a place name for trie keys and comparisons.
    Unbounded cache: only dataset names are passed here, and the dataset is
    fixed after construction. Callers lowercase query strings themselves.

    Example:
        >>> fold_case("Maharashtra")
        'maharashtra'
    """
    return text.lower()


def contains_ignore_case(text: str, fragment: str) -> bool:
    """
    Check whether `fragment` occurs anywhere in `text`, ignoring case.

    Example:
        >>> contains_ignore_case("Central Delhi", "central")
        True
    """
    return fragment.lower() in fold_case(text)


def starts_with_any(text: str, candidates: set, min_length: int = 0) -> bool:
    """
    Check whether `text` starts with any word in `candidates`.

    Walks the prefixes of `text` (shortest first, from `min_length`) and
    tests set membership, so cost is O(len(text)) regardless of how many
    candidates there are.

    Example:
        >>> starts_with_any("pune city", {"pune", "punjab"}, min_length=3)
        True
    """
    if not candidates:
        return False
    for end in range(min_length, len(text) + 1):
        if text[:end] in candidates:
            return True
    return False
