"""
Scraper manager to coordinate all trending sources
Fans out to every source concurrently and keeps results grouped per source
"""
import asyncio
import logging
from typing import Dict, List

from cache import get_cache_age, load_from_cache
from models import OutfitRecord
from .hm_scraper import HMScraper
from .hollister_scraper import HollisterScraper
from .pinterest_scraper import PinterestScraper

logger = logging.getLogger(__name__)


class ScraperManager:
    def __init__(self):
        # Insertion order is the order sources appear in combined results
        self.scrapers = {
            'pinterest': PinterestScraper(),
            'hollister': HollisterScraper(),
            'hm': HMScraper(),
        }

    async def scrape_all_sites(self, max_products_per_site: int = 20,
                               max_cache_age: float = 0) -> Dict[str, List[OutfitRecord]]:
        """
        Scrape every source concurrently and wait for all of them to settle

        A source that still raises after its own fallbacks (e.g. a Pinterest
        timeout) contributes an empty list; the other sources are unaffected.
        """
        logger.info("Fetching trends from all sources...")
        site_keys = list(self.scrapers)

        outcomes = await asyncio.gather(
            *(self.scrape_single_site(site_key, max_products_per_site, max_cache_age) for site_key in site_keys),
            return_exceptions=True,
        )

        results = {}
        for site_key, outcome in zip(site_keys, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(f"{self.scrapers[site_key].site_name} fetch failed: {type(outcome).__name__}: {outcome}")
                results[site_key] = []
            else:
                results[site_key] = outcome

        total = sum(len(products) for products in results.values())
        logger.info(f"Total items fetched: {total} from {len(site_keys)} sources")
        return results

    async def scrape_single_site(self, site_key: str, max_products: int = 20,
                                 max_cache_age: float = 0, **options) -> List[OutfitRecord]:
        """
        Fetch one source through its fallback ladder

        With max_cache_age > 0 a cache entry younger than that many seconds is
        served without scraping.
        """
        if site_key not in self.scrapers:
            raise KeyError(f"Unknown site: {site_key}")

        if max_cache_age > 0:
            age = get_cache_age(site_key)
            if age is not None and age < max_cache_age:
                cached = load_from_cache(site_key)
                if cached:
                    logger.info(f"Serving {site_key} from cache ({age:.0f}s old)")
                    return cached

        return await self.scrapers[site_key].fetch_trends(max_products, **options)

    def get_available_sites(self) -> List[str]:
        return list(self.scrapers.keys())
