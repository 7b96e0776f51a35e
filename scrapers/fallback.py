"""
Fallback ladder shared by every source: live scrape -> disk cache -> bundled samples
"""
import logging
from typing import Awaitable, Callable, List

from cache import load_from_cache, save_to_cache
from models import OutfitRecord
from .sample_data import get_sample_data

logger = logging.getLogger(__name__)


async def fetch_with_fallback(site_key: str,
                              scrape: Callable[[], Awaitable[List[OutfitRecord]]],
                              max_products: int) -> List[OutfitRecord]:
    """
    Always produce a best-effort, non-empty result for a source

    1. Live scrape (the scraper writes its own results through to the cache)
    2. Whatever is cached for the source, however stale
    3. The bundled sample list, truncated and written to the cache
    """
    try:
        products = await scrape()
        if products:
            return products
        logger.warning(f"Live scrape of {site_key} returned no usable items")
    except Exception as e:
        logger.error(f"Live scrape of {site_key} failed: {type(e).__name__}: {e}")

    logger.info(f"Attempting to load {site_key} from cache...")
    cached = load_from_cache(site_key)
    if cached:
        logger.warning(f"Serving {len(cached)} cached (possibly stale) items for {site_key}")
        return cached

    logger.warning(f"No cache for {site_key}, using sample data as fallback")
    sample = get_sample_data(site_key)[:max_products]
    save_to_cache(site_key, sample)
    return sample
