"""
Flask Web App for Location Search
JSON API over a single LocationSearch engine built at startup
"""
import os
import time
import logging
import traceback

from flask import Flask, current_app, jsonify, request

from location_search.config import DATA_FILE, configure_logging
from location_search.levels import Level, coerce_filters
from location_search.pipeline import LocationSearch

logger = logging.getLogger(__name__)


def create_app(data_file=None, engine=None):
    """
    Build the Flask app.

    Args:
        data_file: Dataset path (default: $LOCATION_DATA_FILE or config.DATA_FILE)
        engine: Prebuilt LocationSearch (skips loading, used by tests)
    """
    app = Flask(__name__)

    if engine is None:
        data_file = data_file or os.environ.get('LOCATION_DATA_FILE') or DATA_FILE
        logger.info(f"Loading location dataset from {data_file}")
        engine = LocationSearch(data_file)

    # Read-only after construction, safe to share across requests
    app.config['LOCATION_ENGINE'] = engine

    register_routes(app)
    return app


def register_routes(app):

    @app.route('/health')
    def health():
        """Engine status and dataset statistics"""
        engine = current_app.config['LOCATION_ENGINE']
        return jsonify({
            'success': True,
            'stats': engine.stats()
        })

    @app.route('/levels')
    def levels():
        """Level descriptors callers can search"""
        return jsonify({
            'success': True,
            'levels': [level.describe() for level in Level]
        })

    @app.route('/search', methods=['POST'])
    def search():
        """API endpoint to search locations"""
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({
                'success': False,
                'error': 'Request body must be a JSON object'
            }), 400

        query = data.get('query')
        if query is None or not isinstance(query, str):
            return jsonify({
                'success': False,
                'error': "'query' is required and must be a string"
            }), 400

        try:
            level = Level.from_name(data.get('level') or 'village')
            filters = data.get('filters') or []
            if not isinstance(filters, list):
                raise ValueError(f"'filters' must be a list: {filters!r}")
            filters = coerce_filters(filters)
        except ValueError as e:
            return jsonify({
                'success': False,
                'error': str(e)
            }), 400

        fuzzy = bool(data.get('fuzzy', False))
        engine = current_app.config['LOCATION_ENGINE']

        start_time = time.time()
        try:
            if fuzzy:
                results = engine.fuzzy_search(level, query, filters)
            else:
                results = engine.search(level, query, filters)
        except Exception as e:
            logger.error(f"Search failed for {query!r}: {e}")
            return jsonify({
                'success': False,
                'error': str(e),
                'traceback': traceback.format_exc()
            }), 500

        return jsonify({
            'success': True,
            'results': results,
            'count': len(results),
            'metadata': {
                'mode': 'fuzzy' if fuzzy else 'exact',
                'level': level.field_name,
                'total_time_ms': round((time.time() - start_time) * 1000, 2)
            }
        })


if __name__ == '__main__':
    configure_logging()
    create_app().run(debug=True, host='0.0.0.0', port=9797)
