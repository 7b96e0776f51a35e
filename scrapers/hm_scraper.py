"""
H&M scraper - men's new arrivals listing
"""
from .retail_scraper import RetailScraper


class HMScraper(RetailScraper):
    site_name = 'H&M'
    site_key = 'hm'
    base_url = 'https://www2.hm.com'
    listing_url = 'https://www2.hm.com/en_us/men/new-arrivals.html'

    product_selectors = (
        '.product-item',
        'article.hm-product-item',
        '.hm-product',
        '[data-product]',
        'li.product-item',
    )
    title_selectors = '.item-heading, .product-item-headline, h3, h2'
    price_selectors = '.price, .item-price, [class*="price"]'

    # H&M titles use a few more garment words than Hollister's
    keyword_sets = {
        'top': ('shirt', 'tee', 'hoodie', 'jacket', 'sweater'),
        'bottom': ('jean', 'pant', 'short', 'trouser'),
        'shoes': ('shoe', 'sneaker', 'boot', 'loafer'),
    }
