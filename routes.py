import asyncio
import logging
from datetime import datetime, timezone

from flask import jsonify, request
from werkzeug.exceptions import HTTPException

from app import app
from cache import get_cache_stats
from scrapers.coordination import VALID_SOURCES, get_trending_outfits, refresh_trending_outfits
from scrapers.exceptions import InvalidSourceError

logger = logging.getLogger(__name__)


def _timestamp():
    return datetime.now(timezone.utc).isoformat()


def _invalid_source():
    return jsonify({
        'error': 'Invalid source parameter',
        'validSources': VALID_SOURCES
    }), 400


@app.route('/health')
def health():
    return jsonify({'status': 'ok'})


@app.route('/api/trending', methods=['GET'])
def trending():
    """
    Trending outfits from one source or all of them

    Query parameters:
    - source: pinterest | hollister | hm | all (default all)
    - category: top | bottom | shoes | outfit (optional filter)
    - maxResults: 1..50 (default 20)
    - keyword: Pinterest search phrase or URL (optional)
    """
    source = request.args.get('source', 'all')
    category = request.args.get('category') or None
    max_results = request.args.get('maxResults')
    keyword = request.args.get('keyword') or None

    logger.info(f"Trending API called: source={source} category={category or 'all'} maxResults={max_results}")

    try:
        results = asyncio.run(get_trending_outfits(
            source,
            category=category,
            max_results=max_results,
            keyword=keyword,
            max_cache_age=app.config.get('TRENDING_CACHE_MAX_AGE', 0),
        ))
    except InvalidSourceError:
        return _invalid_source()
    except Exception as e:
        logger.error(f"Trending API error: {type(e).__name__}: {e}")
        return jsonify({
            'success': False,
            'error': 'Failed to fetch trending outfits',
            'message': str(e),
            'timestamp': _timestamp()
        }), 500

    logger.info(f"Returning {len(results)} trending outfits")
    return jsonify({
        'success': True,
        'count': len(results),
        'source': source,
        'category': category or 'all',
        'timestamp': _timestamp(),
        'data': [record.to_dict() for record in results]
    })


@app.route('/api/trending/refresh', methods=['POST'])
def refresh_trending():
    """Manually re-scrape one source (or all) and rewrite its cache entry"""
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({
            'success': False,
            'error': 'Request body must be a JSON object',
            'timestamp': _timestamp()
        }), 400
    source = data.get('source', 'all')
    max_results = data.get('maxResults')

    logger.info(f"Manual cache refresh requested: source={source} maxResults={max_results}")

    try:
        items_refreshed = asyncio.run(refresh_trending_outfits(source, max_results=max_results))
    except InvalidSourceError:
        return _invalid_source()
    except Exception as e:
        logger.error(f"Cache refresh error: {type(e).__name__}: {e}")
        return jsonify({
            'success': False,
            'error': 'Failed to refresh cache',
            'message': str(e),
            'timestamp': _timestamp()
        }), 500

    logger.info(f"Cache refreshed: {items_refreshed} items")
    return jsonify({
        'success': True,
        'message': 'Cache refreshed successfully',
        'source': source,
        'itemsRefreshed': items_refreshed,
        'timestamp': _timestamp()
    })


@app.route('/api/trending/stats', methods=['GET'])
def trending_stats():
    """Item counts and last update time per cached source"""
    try:
        stats = get_cache_stats()
    except Exception as e:
        logger.error(f"Stats error: {e}")
        return jsonify({
            'success': True,
            'stats': {},
            'message': 'No cache data available yet',
            'timestamp': _timestamp()
        })

    return jsonify({
        'success': True,
        'stats': stats,
        'timestamp': _timestamp()
    })


@app.errorhandler(404)
def not_found_error(error):
    return jsonify({'success': False, 'error': 'Not found'}), 404


@app.errorhandler(Exception)
def handle_exception(e):
    if isinstance(e, HTTPException):
        return e
    logger.error(f"Unhandled exception: {str(e)}")
    return jsonify({
        'success': False,
        'error': 'An unexpected error occurred',
        'message': str(e),
        'timestamp': _timestamp()
    }), 500
