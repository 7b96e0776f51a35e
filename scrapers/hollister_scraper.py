"""
Hollister scraper - men's new arrivals listing
"""
from .categorizer import BASE_KEYWORDS
from .retail_scraper import RetailScraper


class HollisterScraper(RetailScraper):
    site_name = 'Hollister'
    site_key = 'hollister'
    base_url = 'https://www.hollisterco.com'
    listing_url = 'https://www.hollisterco.com/shop/us/mens-new-arrivals'

    product_selectors = (
        '.product-tile',
        '.product-card',
        '[data-product-tile]',
        '.product-item',
        'article.product',
    )
    title_selectors = '.product-name, .product-title, h3, h2'
    price_selectors = '.price, .product-price, [class*="price"]'

    keyword_sets = BASE_KEYWORDS
