"""
Background refresh of the trending cache every 12 hours (local midnight and noon)
Off unless TRENDING_SCHEDULER_ENABLED is set
"""
import asyncio
import logging
import threading
from datetime import datetime, timedelta

from scrapers.scraper_manager import ScraperManager

logger = logging.getLogger(__name__)

REFRESH_HOURS = (0, 12)
SCHEDULED_MAX_RESULTS = 20


def next_refresh_time(now=None):
    """Next local midnight or noon strictly after `now`"""
    now = now or datetime.now()
    for hour in REFRESH_HOURS:
        candidate = now.replace(hour=hour, minute=0, second=0, microsecond=0)
        if candidate > now:
            return candidate
    tomorrow = now + timedelta(days=1)
    return tomorrow.replace(hour=REFRESH_HOURS[0], minute=0, second=0, microsecond=0)


def _log_counts(results, label):
    for site_key, products in results.items():
        logger.info(f"{label} {site_key}: {len(products)} items")
    logger.info(f"{label} total: {sum(len(products) for products in results.values())} items")


def run_initial_refresh(manager=None, max_results=SCHEDULED_MAX_RESULTS):
    """One-shot refresh, e.g. at startup; returns the per-source results or None on failure"""
    manager = manager or ScraperManager()
    logger.info("Running initial trending outfits refresh...")
    try:
        results = asyncio.run(manager.scrape_all_sites(max_results))
    except Exception as e:
        logger.error(f"Initial refresh failed: {e}; cached data will be used if available")
        return None

    _log_counts(results, "Initial refresh")
    return results


class TrendingScheduler:
    def __init__(self, manager=None, max_results=SCHEDULED_MAX_RESULTS, clock=datetime.now):
        self.manager = manager or ScraperManager()
        self.max_results = max_results
        self._clock = clock
        self._stop_event = threading.Event()
        self._thread = None

    @property
    def running(self):
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        if self.running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run_loop, daemon=True, name="TrendingScheduler")
        self._thread.start()
        logger.info(f"Trending refresh scheduled every 12 hours, next at {next_refresh_time(self._clock())}")

    def stop(self, timeout=5):
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.info("Trending refresh scheduler stopped")

    def _run_loop(self):
        while True:
            now = self._clock()
            wait_seconds = max((next_refresh_time(now) - now).total_seconds(), 0)
            if self._stop_event.wait(wait_seconds):
                return
            self.run_once()

    def run_once(self):
        """A single scheduled tick; failures are logged and left for the next tick"""
        logger.info(f"[SCHEDULED] Starting trending outfits refresh at {self._clock().isoformat()}")
        try:
            results = asyncio.run(self.manager.scrape_all_sites(self.max_results))
        except Exception as e:
            logger.error(f"[SCHEDULED] Failed to refresh trending cache: {e}")
            logger.info(f"[SCHEDULED] Will retry at {next_refresh_time(self._clock())}")
            return None

        _log_counts(results, "[SCHEDULED]")
        logger.info(f"[SCHEDULED] Next refresh: {next_refresh_time(self._clock())}")
        return results


if __name__ == "__main__":
    # Smoke run: scrape every source once and print what each one returned
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    refreshed = run_initial_refresh()
    if refreshed is None:
        raise SystemExit(1)
    for site_key, products in refreshed.items():
        print(f"{site_key}: {len(products)} items")
        for product in products[:3]:
            print(f"  - {product.title} ({product.category}) {product.image_url}")
