#!/usr/bin/env python3
"""
Test script for the command-line interface (location_search.main).
"""
import io
import json
import sys
from contextlib import redirect_stdout
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from location_search.levels import Filter, Level
from location_search.main import main, parse_filter


def run_cli(*argv):
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        main(list(argv))
    return buffer.getvalue()


def test_parse_filter():
    assert parse_filter('district=Central') == Filter(Level.DISTRICT, 'Central')
    assert parse_filter('SUBDISTRICT=Haveli') == Filter(Level.SUBDISTRICT, 'Haveli')


def test_json_output():
    output = run_cli('-q', 'Pune', '-l', 'district', '--json')
    assert json.loads(output) == [{'state': 'Maharashtra', 'district': 'Pune'}]


def test_text_output_with_filter():
    output = run_cli('-q', 'Pahar', '-f', 'state=manipur')
    assert 'Matches: 1' in output
    assert 'Manipur > Central > Kangpokpi > Pahar Tilla' in output


def test_fuzzy_flag():
    assert json.loads(run_cli('-q', 'Pue', '-l', 'district', '--json')) == []
    fuzzy = json.loads(run_cli('-q', 'Pue', '-l', 'district', '--fuzzy', '--json'))
    assert fuzzy[0]['district'] == 'Pune'


def test_stats():
    stats = json.loads(run_cli('--stats'))
    assert stats['records']['state'] == 4
    assert stats['records']['district'] == 6


def test_missing_query_exits():
    try:
        run_cli()
    except SystemExit as e:
        assert e.code == 1
    else:
        raise AssertionError("Expected SystemExit")


def test_bad_dataset_exits():
    try:
        run_cli('-q', 'x', '-d', '/nonexistent/locations.json')
    except SystemExit as e:
        assert e.code == 1
    else:
        raise AssertionError("Expected SystemExit")


if __name__ == '__main__':
    for name, func in list(globals().items()):
        if name.startswith('test_') and callable(func):
            func()
            print(f"✓ {name}")
    print("✅ All CLI tests passed!")
