#!/usr/bin/env python3
"""
Test script for the prefix trie used to pre-filter search candidates.
"""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from location_search.utils.trie import Trie

WORDS = ['pune', 'punjab', 'patna', 'pimpri', 'central', 'centre', 'karol bagh']


def build_trie(words=WORDS):
    trie = Trie()
    for word in words:
        trie.insert(word)
    return trie


def test_search_prefix_membership():
    """Every word starting with the prefix is returned, nothing else."""
    trie = build_trie()

    for prefix in ['p', 'pu', 'pun', 'pune', 'cent', 'karol ', 'x', 'punes']:
        expected = {w for w in WORDS if w.startswith(prefix)}
        assert trie.search_prefix(prefix) == expected, prefix


def test_unknown_prefix_is_empty():
    trie = build_trie()
    assert trie.search_prefix('zzz') == set()
    assert trie.search_prefix('pux') == set()


def test_empty_prefix_returns_all_words():
    trie = build_trie()
    assert trie.search_prefix('') == set(WORDS)


def test_duplicate_insert_is_idempotent():
    once = build_trie()
    many = build_trie(WORDS * 3)

    assert len(once) == len(many) == len(WORDS)
    for prefix in ['', 'p', 'pun', 'cen']:
        assert once.search_prefix(prefix) == many.search_prefix(prefix)


def test_prefix_of_word_is_not_a_word():
    """Only complete inserted words are terminal."""
    trie = build_trie()
    assert 'pune' in trie
    assert 'pun' not in trie
    assert 'pun' not in trie.search_prefix('pu')


def test_word_that_is_prefix_of_another():
    trie = build_trie(['pune', 'pune city'])
    assert trie.search_prefix('pune') == {'pune', 'pune city'}
    assert trie.search_prefix('pune ') == {'pune city'}


def test_empty_string_insertion():
    trie = Trie()
    trie.insert('')
    assert '' in trie
    assert trie.search_prefix('') == {''}
    assert len(trie) == 1


def test_long_word_no_recursion_limit():
    word = 'a' * 5000
    trie = build_trie([word, word + 'b'])
    assert trie.search_prefix('a' * 4999) == {word, word + 'b'}


if __name__ == '__main__':
    for name, func in list(globals().items()):
        if name.startswith('test_') and callable(func):
            func()
            print(f"✓ {name}")
    print("✅ All trie tests passed!")
