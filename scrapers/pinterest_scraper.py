"""
Pinterest scraper for trending outfit pins
Pinterest renders client-side, so the page is driven with headless Chromium
(Playwright) and the rendered HTML is then parsed with BeautifulSoup
"""
import asyncio
import logging
import re
from typing import List, Optional, Tuple
from urllib.parse import quote, urljoin

from bs4 import BeautifulSoup
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from cache import save_to_cache
from models import OutfitRecord, PLACEHOLDER_MARKER, clean_title
from .exceptions import ScraperTimeoutError
from .fallback import fetch_with_fallback

logger = logging.getLogger(__name__)

USER_AGENT = 'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'

BASE_URL = 'https://www.pinterest.com'
DEFAULT_TARGET = 'https://www.pinterest.com/ideas/mens-streetwear/895613796302/'

PIN_SELECTORS = (
    '[data-test-id="pin"]',
    'article[data-test-id="pin"]',
    '[data-test-id="pin-rep"]',
    'div[data-test-id="pin-rep"]',
    'div[role="listitem"]',
    '.pinContainer',
    '.Grid__Item',
)

# Size tokens Pinterest uses for thumbnails and lazy-load stand-ins
LAZY_REJECT_MARKERS = (PLACEHOLDER_MARKER, '1x', '75x')
SRC_REJECT_MARKERS = (PLACEHOLDER_MARKER, '1x', '75x', '236x')

# i.pinimg.com/236x/ab/cd/...jpg -> i.pinimg.com/originals/ab/cd/...jpg
PINIMG_SIZE_SEGMENT = re.compile(r'/\d+x\d*/')


def _absolute(url: Optional[str]) -> str:
    url = (url or '').strip()
    return urljoin(BASE_URL + '/', url) if url else ''


def _full_resolution(image_url: str) -> str:
    if 'i.pinimg.com' in image_url:
        return PINIMG_SIZE_SEGMENT.sub('/originals/', image_url)
    return image_url


def _pick_image(pin) -> Tuple[Optional[object], str]:
    """
    Best image inside a pin:
    1. lazy-load data-src that isn't a thumbnail
    2. src that isn't a thumbnail
    3. anything that isn't a placeholder
    """
    images = pin.find_all('img')

    for img in images:
        data_src = _absolute(img.get('data-src'))
        if data_src and not any(marker in data_src for marker in LAZY_REJECT_MARKERS):
            return img, data_src

    for img in images:
        src = _absolute(img.get('src'))
        if src and not any(marker in src for marker in SRC_REJECT_MARKERS):
            return img, src

    for img in images:
        src = _absolute(img.get('src') or img.get('data-src'))
        if src and PLACEHOLDER_MARKER not in src:
            return img, src

    return None, ''


def find_pin_elements(soup):
    for selector in PIN_SELECTORS:
        pins = soup.select(selector)
        if pins:
            logger.info(f"Found {len(pins)} pins using selector: {selector}")
            return pins
    return []


def parse_pins(html_content: str, page_url: str, max_products: int) -> List[OutfitRecord]:
    """Extract outfit records from rendered Pinterest HTML, in page order"""
    soup = BeautifulSoup(html_content or '', 'html.parser')
    pins = find_pin_elements(soup)
    if not pins:
        logger.warning("Could not find any pin elements on the page")

    outfits = []
    for i, pin in enumerate(pins[:max_products]):
        try:
            img, image_url = _pick_image(pin)
            if not image_url:
                continue

            link = pin.select_one('a[href*="/pin/"]')
            title = (img.get('alt') or '').strip() if img is not None else ''

            outfits.append(OutfitRecord(
                title=clean_title(title or f"Pinterest Outfit {i + 1}"),
                image_url=_full_resolution(image_url),
                price=None,
                category='outfit',
                source='Pinterest',
                link=_absolute(link['href']) if link and link.get('href') else page_url,
            ))
        except Exception as e:
            logger.warning(f"Error processing pin {i}: {e}")

    return outfits


class PinterestScraper:
    site_name = 'Pinterest'
    site_key = 'pinterest'

    # Overall wall-clock budget for one fetch, in seconds
    timeout = 90

    navigation_timeout_ms = 60000
    settle_delay_ms = 5000
    pin_wait_timeout_ms = 10000
    scroll_count = 3
    scroll_delay_ms = 2000

    browser_args = [
        '--no-sandbox',
        '--disable-setuid-sandbox',
        '--disable-dev-shm-usage',
        '--disable-accelerated-2d-canvas',
        '--disable-gpu',
        '--disable-blink-features=AutomationControlled',
    ]

    def get_target_url(self, target_hint: Optional[str] = None) -> str:
        """URLs are used as-is, anything else becomes a pin search"""
        if not target_hint:
            return DEFAULT_TARGET
        if target_hint.startswith('http'):
            return target_hint
        return f"{BASE_URL}/search/pins/?q={quote(target_hint, safe='')}"

    async def fetch_trends(self, max_products: int = 10, target_hint: Optional[str] = None) -> List[OutfitRecord]:
        """
        Live scrape with cache and sample-data fallback, bounded by an overall timeout

        Raises ScraperTimeoutError if the whole operation exceeds `timeout` seconds;
        the browser is still torn down when that happens.
        """
        try:
            return await asyncio.wait_for(
                fetch_with_fallback(self.site_key,
                                    lambda: self.scrape_products(target_hint, max_products),
                                    max_products),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.error(f"Pinterest scraper timed out after {self.timeout} seconds")
            raise ScraperTimeoutError(self.site_name, self.timeout) from None

    async def scrape_products(self, target_hint: Optional[str] = None, max_products: int = 10) -> List[OutfitRecord]:
        target_url = self.get_target_url(target_hint)
        logger.info(f"Starting Pinterest scraper: target={target_url} max={max_products}")

        html_content = await self._render_page(target_url)
        outfits = parse_pins(html_content, target_url, max_products)

        logger.info(f"Scraped {len(outfits)} outfits from Pinterest")
        if outfits:
            save_to_cache(self.site_key, outfits)
        return outfits

    async def _render_page(self, target_url: str) -> str:
        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=True, args=self.browser_args)
            try:
                context = await browser.new_context(
                    user_agent=USER_AGENT,
                    viewport={'width': 1920, 'height': 1080},
                )
                page = await context.new_page()

                logger.info(f"Navigating to: {target_url}")
                await page.goto(target_url, wait_until='domcontentloaded', timeout=self.navigation_timeout_ms)

                # Pins are rendered client-side after the initial document
                await page.wait_for_timeout(self.settle_delay_ms)
                try:
                    await page.wait_for_selector(PIN_SELECTORS[0], timeout=self.pin_wait_timeout_ms)
                except PlaywrightTimeoutError:
                    logger.warning("Standard pin selector not found, trying alternatives")

                # Lazy loading only kicks in as the viewport moves
                for _ in range(self.scroll_count):
                    await page.evaluate("window.scrollBy(0, window.innerHeight)")
                    await page.wait_for_timeout(self.scroll_delay_ms)

                return await page.content()
            finally:
                await self._close_browser(browser)

    async def _close_browser(self, browser):
        try:
            for context in browser.contexts:
                for page in context.pages:
                    await page.close()
            await browser.close()
            logger.info("Browser closed")
        except Exception as e:
            logger.error(f"Error closing browser: {e}")
