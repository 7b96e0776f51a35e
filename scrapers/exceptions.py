"""
Error types raised by the trending scrapers
"""


class ScraperError(Exception):
    """Base class for scraping failures"""


class ScraperTimeoutError(ScraperError):
    """The source never answered within the overall time budget"""

    def __init__(self, site_name, timeout):
        self.site_name = site_name
        self.timeout = timeout
        super().__init__(f"{site_name} scraper timed out after {timeout} seconds")


class NoProductsFoundError(ScraperError):
    """The page loaded but none of the known product selectors matched"""


class InvalidSourceError(ScraperError):
    """Requested source is not one of the supported sources"""

    def __init__(self, source, valid_sources):
        self.source = source
        self.valid_sources = list(valid_sources)
        super().__init__(f"Invalid source '{source}', expected one of: {', '.join(self.valid_sources)}")
