#!/usr/bin/env python3
"""
Test script for the trie prefix pre-filter (Phase 2).
"""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from location_search.levels import Level
from location_search.processors.phase2_prefilter import candidate_words, prefilter_by_prefix
from location_search.utils.trie import Trie

DISTRICTS = [
    {'state': 'Maharashtra', 'district': 'Pune'},
    {'state': 'Punjab', 'district': 'Ludhiana'},
    {'state': 'Maharashtra', 'district': 'Pune City'},
    {'state': 'Maharashtra', 'district': 'Nashik'},
]


def build_trie():
    trie = Trie()
    for name in ['maharashtra', 'punjab', 'pune', 'pune city', 'ludhiana', 'nashik', 'puebla']:
        trie.insert(name)
    return trie


def test_candidate_words_use_first_three_characters():
    trie = build_trie()
    assert candidate_words(trie, 'Pune Cantonment') == {'pune', 'pune city', 'punjab'}
    assert candidate_words(trie, 'NAS') == {'nashik'}


def test_prefilter_keeps_records_sharing_prefix():
    trie = build_trie()
    result = prefilter_by_prefix(DISTRICTS, Level.DISTRICT, 'Pun', trie)
    assert [r['district'] for r in result] == ['Pune', 'Pune City']


def test_prefilter_looks_at_searched_field_only():
    trie = build_trie()
    # 'Punjab' is a state name; districts under it are not admitted for 'Pun'
    result = prefilter_by_prefix(DISTRICTS, Level.DISTRICT, 'Punjab', trie)
    assert [r['district'] for r in result] == ['Pune', 'Pune City']

    result = prefilter_by_prefix(DISTRICTS, Level.STATE, 'Punjab', trie)
    assert [r['state'] for r in result] == ['Punjab']


def test_short_query_uses_whole_query_as_prefix():
    trie = build_trie()
    result = prefilter_by_prefix(DISTRICTS, Level.DISTRICT, 'Pu', trie)
    assert [r['district'] for r in result] == ['Pune', 'Pune City']


def test_empty_query_keeps_everything():
    trie = build_trie()
    assert prefilter_by_prefix(DISTRICTS, Level.DISTRICT, '', trie) == DISTRICTS


def test_prefix_typo_without_backoff_is_empty():
    trie = build_trie()
    assert prefilter_by_prefix(DISTRICTS, Level.DISTRICT, 'Pnue', trie) == []


def test_backoff_recovers_unmatched_prefix():
    trie = build_trie()
    assert candidate_words(trie, 'Pnu', backoff=True) == {'pune', 'pune city', 'punjab', 'puebla'}

    result = prefilter_by_prefix(DISTRICTS, Level.DISTRICT, 'Pnue', trie, backoff=True)
    assert [r['district'] for r in result] == ['Pune', 'Pune City']


def test_backoff_does_not_fire_when_prefix_matches_other_name():
    """'pue' matches 'puebla', so Pune is still excluded."""
    trie = build_trie()
    assert candidate_words(trie, 'Pue', backoff=True) == {'puebla'}
    assert prefilter_by_prefix(DISTRICTS, Level.DISTRICT, 'Pue', trie, backoff=True) == []


def test_backoff_stops_at_one_character():
    trie = build_trie()
    assert candidate_words(trie, 'Zzz', backoff=True) == set()


if __name__ == '__main__':
    for name, func in list(globals().items()):
        if name.startswith('test_') and callable(func):
            func()
            print(f"✓ {name}")
    print("✅ All prefix pre-filter tests passed!")
