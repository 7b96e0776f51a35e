"""
Tests for the query layer: parameter validation, maxResults clamping,
source selection/ordering and category filtering.
"""

import asyncio

import pytest

from models import OutfitRecord
from scrapers.coordination import (
    VALID_SOURCES,
    clamp_max_results,
    filter_by_category,
    get_trending_outfits,
    normalize_source,
    refresh_trending_outfits,
)
from scrapers.exceptions import InvalidSourceError

SOURCE_TAGS = {"pinterest": "Pinterest", "hollister": "Hollister", "hm": "H&M"}
CATEGORIES = {
    "pinterest": ["outfit", "outfit", "top"],
    "hollister": ["top", "bottom", "shoes", "top"],
    "hm": ["bottom", "Top"],
}


def _records(site_key):
    return [
        OutfitRecord(f"{site_key} {i}", f"https://img.example.com/{site_key}/{i}.jpg", None, category,
                     SOURCE_TAGS[site_key], "https://example.com")
        for i, category in enumerate(CATEGORIES[site_key])
    ]


class FakeManager:
    def __init__(self):
        self.calls = []

    def get_available_sites(self):
        return ["pinterest", "hollister", "hm"]

    async def scrape_all_sites(self, max_products_per_site=20, max_cache_age=0):
        self.calls.append(("all", max_products_per_site, max_cache_age, {}))
        # returned out of order on purpose; callers must not rely on dict order
        return {key: _records(key)[:max_products_per_site] for key in ("hm", "pinterest", "hollister")}

    async def scrape_single_site(self, site_key, max_products=20, max_cache_age=0, **options):
        self.calls.append((site_key, max_products, max_cache_age, options))
        return _records(site_key)[:max_products]


@pytest.fixture
def manager():
    return FakeManager()


class TestClampMaxResults:
    @pytest.mark.parametrize("value,expected", [
        (None, 20),
        ("", 20),
        ("abc", 20),
        ("7", 7),
        (" 12abc", 12),
        ("3.9", 3),
        ("0", 1),
        ("-5", 1),
        ("100", 50),
        ("50", 50),
        (30, 30),
        (0, 1),
        (999, 50),
        (3.7, 3),
        (float("inf"), 20),
        (float("-inf"), 20),
        (float("nan"), 20),
        (True, 20),
    ])
    def test_clamp(self, value, expected):
        assert clamp_max_results(value) == expected

    def test_always_in_range(self):
        for value in range(-100, 200, 7):
            assert 1 <= clamp_max_results(value) <= 50


class TestNormalizeSource:
    @pytest.mark.parametrize("value,expected", [
        ("pinterest", "pinterest"),
        ("Hollister", "hollister"),
        (" HM ", "hm"),
        ("h&m", "hm"),
        ("H&M", "hm"),
        ("ALL", "all"),
        (None, "all"),
    ])
    def test_valid(self, value, expected):
        assert normalize_source(value) == expected

    def test_invalid(self):
        with pytest.raises(InvalidSourceError) as excinfo:
            normalize_source("zara")
        assert excinfo.value.valid_sources == VALID_SOURCES


class TestFilterByCategory:
    def test_case_insensitive_exact_match(self):
        products = _records("hm") + _records("hollister")
        tops = filter_by_category(products, "TOP")
        assert [p.title for p in tops] == ["hm 1", "hollister 0", "hollister 3"]

    def test_no_partial_matches(self):
        assert filter_by_category(_records("hollister"), "to") == []

    def test_empty_category_means_no_filter(self):
        products = _records("pinterest")
        assert filter_by_category(products, None) == products
        assert filter_by_category(products, "") == products


class TestGetTrendingOutfits:
    @pytest.mark.parametrize("source", ["pinterest", "hollister", "hm"])
    def test_single_source_provenance(self, manager, source):
        products = asyncio.run(get_trending_outfits(source, manager=manager))
        assert products
        assert all(p.source == SOURCE_TAGS[source] for p in products)

    def test_all_is_ordered_pinterest_hollister_hm(self, manager):
        products = asyncio.run(get_trending_outfits("all", manager=manager))
        assert [p.source for p in products] == ["Pinterest"] * 3 + ["Hollister"] * 4 + ["H&M"] * 2

    def test_category_filter_after_aggregation(self, manager):
        products = asyncio.run(get_trending_outfits("all", category="top", manager=manager))
        assert [p.title for p in products] == ["pinterest 2", "hollister 0", "hollister 3", "hm 1"]
        assert all(p.category.lower() == "top" for p in products)

    def test_limit_is_clamped_before_scraping(self, manager):
        asyncio.run(get_trending_outfits("hm", max_results="500", manager=manager))
        asyncio.run(get_trending_outfits("all", max_results="nope", manager=manager))
        assert manager.calls[0][:2] == ("hm", 50)
        assert manager.calls[1][:2] == ("all", 20)

    def test_keyword_only_goes_to_pinterest(self, manager):
        asyncio.run(get_trending_outfits("pinterest", keyword="linen outfits", manager=manager))
        asyncio.run(get_trending_outfits("hm", keyword="linen outfits", manager=manager))
        assert manager.calls[0][3] == {"target_hint": "linen outfits"}
        assert manager.calls[1][3] == {}

    def test_cache_age_is_forwarded(self, manager):
        asyncio.run(get_trending_outfits("hollister", max_cache_age=600, manager=manager))
        assert manager.calls[0][2] == 600

    def test_invalid_source_rejected_before_scraping(self, manager):
        with pytest.raises(InvalidSourceError):
            asyncio.run(get_trending_outfits("amazon", manager=manager))
        assert manager.calls == []


class TestRefreshTrendingOutfits:
    def test_refresh_all_counts_every_source(self, manager):
        assert asyncio.run(refresh_trending_outfits("all", manager=manager)) == 3 + 4 + 2

    def test_refresh_single(self, manager):
        assert asyncio.run(refresh_trending_outfits("h&m", max_results=1, manager=manager)) == 1
        assert manager.calls == [("hm", 1, 0, {})]

    def test_refresh_never_uses_cache_shortcut(self, manager):
        asyncio.run(refresh_trending_outfits("all", manager=manager))
        assert manager.calls[0][2] == 0

    def test_invalid_source(self, manager):
        with pytest.raises(InvalidSourceError):
            asyncio.run(refresh_trending_outfits("etsy", manager=manager))
