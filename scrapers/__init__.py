"""
Scrapers package - trending outfit sources
Pinterest is browser-driven (Playwright); Hollister and H&M are plain HTTP + BeautifulSoup
"""

from .pinterest_scraper import PinterestScraper
from .hollister_scraper import HollisterScraper
from .hm_scraper import HMScraper
from .scraper_manager import ScraperManager
from .exceptions import ScraperError, ScraperTimeoutError, NoProductsFoundError, InvalidSourceError

__all__ = [
    'PinterestScraper',
    'HollisterScraper',
    'HMScraper',
    'ScraperManager',
    'ScraperError',
    'ScraperTimeoutError',
    'NoProductsFoundError',
    'InvalidSourceError',
]
