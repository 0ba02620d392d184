#!/usr/bin/env python3
"""
Main entry point for location search.

Simple and clean interface:
- Search one level, exact or fuzzy
- Narrow by ancestor filters
- Output as text or JSON
"""
import argparse
import json
import logging
import sys
import time

from .config import DATA_FILE, configure_logging
from .levels import Filter, Level
from .pipeline import LocationSearch
from .utils.data_loader import DatasetError


def parse_filter(value: str) -> Filter:
    """
    Parse a LEVEL=QUERY command-line filter.

    Example:
        >>> parse_filter('district=Central')
        Filter(level=<Level.DISTRICT: ('district', 'state->district', 1)>, query='Central')
    """
    level_name, sep, query = value.partition('=')
    if not sep:
        raise argparse.ArgumentTypeError(f"Filter must look like LEVEL=QUERY, got '{value}'")
    try:
        return Filter(Level.from_name(level_name), query)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def parse_level(value: str) -> Level:
    try:
        return Level.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def run_search(engine: LocationSearch, level: Level, query: str, filters, fuzzy: bool, output_format: str = 'text'):
    """
    Run one query and print the results.

    Args:
        engine: Built LocationSearch
        level: Level to search
        query: Query string
        filters: List of Filter (may be empty)
        fuzzy: Use fuzzy_search instead of search
        output_format: 'text' or 'json'
    """
    start_time = time.time()
    if fuzzy:
        results = engine.fuzzy_search(level, query, filters)
    else:
        results = engine.search(level, query, filters)
    elapsed_ms = (time.time() - start_time) * 1000

    if output_format == 'json':
        print(json.dumps(results, indent=2, ensure_ascii=False))
        return

    mode = 'fuzzy' if fuzzy else 'exact'
    print(f"\nQuery:   {query!r} ({level.field_name}, {mode})")
    if filters:
        print("Filters: " + ', '.join(f"{f.level.field_name}~{f.query!r}" for f in filters))
    print(f"Time:    {elapsed_ms:.1f}ms")
    print(f"Matches: {len(results)}\n")

    for i, record in enumerate(results, 1):
        path = ' > '.join(record[field] for field in level.fields)
        print(f"  {i}. {path}")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Administrative Location Search',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  # Exact district search
  python -m location_search.main -q Pune -l district

  # Fuzzy village search inside a district
  python -m location_search.main -q Koregon -l village -f district=Pune --fuzzy

  # Dataset statistics
  python -m location_search.main --stats
        '''
    )

    parser.add_argument('-q', '--query', help='Text to search for')
    parser.add_argument(
        '-l', '--level',
        type=parse_level,
        default=Level.VILLAGE,
        help='Level to search: state, district, subDistrict, village (default: village)'
    )
    parser.add_argument(
        '-f', '--filter',
        dest='filters',
        type=parse_filter,
        action='append',
        default=[],
        metavar='LEVEL=QUERY',
        help='Ancestor filter, repeatable (e.g. district=Central)'
    )
    parser.add_argument('--fuzzy', action='store_true', help='Tolerate small typos')
    parser.add_argument('--json', action='store_true', help='Output results as JSON')
    parser.add_argument('-d', '--data', default=str(DATA_FILE), help='Path to the JSON dataset')
    parser.add_argument('--stats', action='store_true', help='Print dataset statistics')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')

    args = parser.parse_args(argv)

    if args.query is None and not args.stats:
        parser.print_help()
        print("\nError: Either --query or --stats must be provided")
        sys.exit(1)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        engine = LocationSearch(args.data)
    except DatasetError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.stats:
        print(json.dumps(engine.stats(), indent=2))

    if args.query is not None:
        output_format = 'json' if args.json else 'text'
        run_search(engine, args.level, args.query, args.filters, args.fuzzy, output_format)


if __name__ == '__main__':
    main()
