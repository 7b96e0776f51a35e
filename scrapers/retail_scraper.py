"""
Base scraper for server-rendered retail "new arrivals" listing pages
Uses a single HTTP request + BeautifulSoup, no browser
"""
import asyncio
import logging
from typing import Dict, List, Optional, Sequence
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup

from cache import save_to_cache
from models import DEFAULT_CATEGORY, OutfitRecord, clean_title, is_placeholder_image
from .categorizer import BASE_KEYWORDS, infer_category
from .exceptions import NoProductsFoundError
from .fallback import fetch_with_fallback

logger = logging.getLogger(__name__)

USER_AGENT = 'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'


class RetailScraper:
    """
    Subclasses describe one retailer: where its listing lives and which
    selectors pick out product tiles, names and prices.
    """
    site_name = ''
    site_key = ''
    base_url = ''
    listing_url = ''

    # Tried in order; the first selector that matches anything wins
    product_selectors: Sequence[str] = ()
    title_selectors = 'h3, h2'
    price_selectors = '.price, [class*="price"]'
    image_attributes = ('src', 'data-src', 'data-original')

    keyword_sets: Dict[str, Sequence[str]] = BASE_KEYWORDS
    default_category = DEFAULT_CATEGORY
    price_placeholder = 'Check site'

    request_timeout = 15

    def __init__(self):
        # HTTP headers to mimic real browser
        self.headers = {
            'User-Agent': USER_AGENT,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.5',
            'Accept-Encoding': 'gzip, deflate, br',
            'Connection': 'keep-alive',
            'Upgrade-Insecure-Requests': '1',
        }

    @property
    def item_label(self):
        return f"{self.site_name} Item"

    async def fetch_trends(self, max_products: int = 20) -> List[OutfitRecord]:
        """Live scrape with cache and sample-data fallback"""
        return await fetch_with_fallback(self.site_key, lambda: self.scrape_products(max_products), max_products)

    async def scrape_products(self, max_products: int = 20) -> List[OutfitRecord]:
        """
        Scrape the listing page once and cache the result
        Raises on HTTP errors or when no product tiles are found
        """
        logger.info(f"Starting {self.site_name} scraper (max {max_products})")
        logger.info(f"Fetching: {self.listing_url}")

        html_content = await asyncio.to_thread(self._fetch_html)
        products = self.parse_products(html_content, max_products)

        logger.info(f"Scraped {len(products)} outfits from {self.site_name}")
        if products:
            save_to_cache(self.site_key, products)
        return products

    def _fetch_html(self) -> str:
        response = requests.get(self.listing_url, headers=self.headers, timeout=self.request_timeout)
        response.raise_for_status()
        return response.text

    def parse_products(self, html_content: str, max_products: int) -> List[OutfitRecord]:
        """Turn listing HTML into outfit records, in page order"""
        soup = BeautifulSoup(html_content or '', 'html.parser')

        containers = self._find_product_containers(soup)
        if not containers:
            raise NoProductsFoundError(f"No products found on {self.site_name} page")

        products = []
        for i, container in enumerate(containers[:max_products]):
            try:
                product = self._parse_container(container, i)
            except Exception as e:
                logger.warning(f"Error processing {self.site_name} item {i}: {e}")
                continue
            if product:
                products.append(product)

        return products

    def _find_product_containers(self, soup):
        for selector in self.product_selectors:
            containers = soup.select(selector)
            if containers:
                logger.info(f"Found {len(containers)} products using selector: {selector}")
                return containers
        return []

    def _parse_container(self, container, index: int) -> Optional[OutfitRecord]:
        image_url = self._extract_image_url(container)
        if is_placeholder_image(image_url):
            return None

        title = self._extract_title(container) or f"{self.item_label} {index + 1}"
        return OutfitRecord(
            title=clean_title(title),
            image_url=image_url,
            price=self._extract_price(container),
            category=infer_category(title, self.keyword_sets, self.default_category),
            source=self.site_name,
            link=self._extract_product_url(container),
        )

    def _extract_title(self, container) -> str:
        name = container.select_one(self.title_selectors)
        if name:
            text = name.get_text(strip=True)
            if text:
                return text

        img = container.find('img')
        if img and img.get('alt'):
            return img['alt'].strip()
        return ''

    def _extract_image_url(self, container) -> str:
        """First non-empty image attribute of the tile's first image, made absolute"""
        img = container.find('img')
        if not img:
            return ''

        for attribute in self.image_attributes:
            value = (img.get(attribute) or '').strip()
            if value:
                return self.absolute_url(value)
        return ''

    def _extract_price(self, container) -> str:
        price = container.select_one(self.price_selectors)
        text = price.get_text(' ', strip=True) if price else ''
        return text or self.price_placeholder

    def _extract_product_url(self, container) -> str:
        link = container.find('a', href=True)
        if link and link['href'].strip():
            return self.absolute_url(link['href'].strip())
        return self.listing_url

    def absolute_url(self, url: str) -> str:
        """Resolve protocol-relative and root-relative URLs against the retailer's domain"""
        if url.startswith('//'):
            return f"https:{url}"
        return urljoin(self.base_url + '/', url)
