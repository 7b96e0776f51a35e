"""
Coordination module for trending outfit queries
Validates request parameters, picks one source or all of them, and filters the result
"""
import logging
import math
import re
from typing import List, Optional

from models import OutfitRecord
from .exceptions import InvalidSourceError
from .scraper_manager import ScraperManager

logger = logging.getLogger(__name__)

VALID_SOURCES = ['pinterest', 'hollister', 'hm', 'all']
SOURCE_ALIASES = {'h&m': 'hm'}

DEFAULT_MAX_RESULTS = 20
MIN_MAX_RESULTS = 1
MAX_MAX_RESULTS = 50

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def clamp_max_results(value) -> int:
    """Parse the leading integer of a request value and clamp it to [1, 50]; default 20"""
    if isinstance(value, bool):
        parsed = None
    elif isinstance(value, int):
        parsed = value
    elif isinstance(value, float):
        parsed = int(value) if math.isfinite(value) else None
    else:
        match = _LEADING_INT.match(str(value)) if value is not None else None
        parsed = int(match.group(1)) if match else None

    if parsed is None:
        parsed = DEFAULT_MAX_RESULTS
    return min(max(parsed, MIN_MAX_RESULTS), MAX_MAX_RESULTS)


def normalize_source(source: Optional[str]) -> str:
    """Lowercase, resolve aliases and validate; None means all sources"""
    if source is None:
        return 'all'

    key = str(source).strip().lower()
    key = SOURCE_ALIASES.get(key, key)
    if key not in VALID_SOURCES:
        raise InvalidSourceError(source, VALID_SOURCES)
    return key


def filter_by_category(products: List[OutfitRecord], category: Optional[str]) -> List[OutfitRecord]:
    if not category:
        return products

    category_lower = category.strip().lower()
    return [product for product in products if (product.category or '').lower() == category_lower]


async def get_trending_outfits(source: Optional[str] = 'all', category: Optional[str] = None,
                               max_results=DEFAULT_MAX_RESULTS, keyword: Optional[str] = None,
                               max_cache_age: float = 0,
                               manager: Optional[ScraperManager] = None) -> List[OutfitRecord]:
    """
    Main entry point for trending outfit lookups

    "all" concatenates Pinterest, Hollister and H&M results in that order.
    The category filter is applied after the sources are combined.
    """
    site_key = normalize_source(source)
    limit = clamp_max_results(max_results)
    manager = manager or ScraperManager()

    if site_key == 'all':
        all_results = await manager.scrape_all_sites(limit, max_cache_age=max_cache_age)
        products = [product for key in manager.get_available_sites() for product in all_results.get(key, [])]
    elif site_key == 'pinterest' and keyword:
        products = await manager.scrape_single_site(site_key, limit, max_cache_age, target_hint=keyword)
    else:
        products = await manager.scrape_single_site(site_key, limit, max_cache_age)

    filtered = filter_by_category(products, category)
    if category:
        logger.info(f"Filtered to {len(filtered)} items in category: {category}")
    return filtered


async def refresh_trending_outfits(source: Optional[str] = 'all', max_results=DEFAULT_MAX_RESULTS,
                                   manager: Optional[ScraperManager] = None) -> int:
    """Force a live scrape (never served from a fresh cache) and return the number of items refreshed"""
    site_key = normalize_source(source)
    limit = clamp_max_results(max_results)
    manager = manager or ScraperManager()

    if site_key == 'all':
        all_results = await manager.scrape_all_sites(limit)
        return sum(len(products) for products in all_results.values())

    products = await manager.scrape_single_site(site_key, limit)
    return len(products)
