import os
import logging
import threading

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

# Custom logging filter to keep scraped page markup out of the logs
class MarkupFilter(logging.Filter):
    def filter(self, record):
        # Drop oversized messages that look like raw HTML
        message = record.getMessage()
        if len(message) > 1000 and '<' in message and '>' in message:
            return False
        return True

# Set up logging - use INFO level but filter page dumps
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler()
    ]
)

# Filters on the root logger don't see propagated records; attach to its handlers
for handler in logging.getLogger().handlers:
    handler.addFilter(MarkupFilter())

# Silence verbose third-party loggers
logging.getLogger('urllib3').setLevel(logging.WARNING)
logging.getLogger('requests').setLevel(logging.WARNING)
logging.getLogger('asyncio').setLevel(logging.WARNING)
logging.getLogger('playwright').setLevel(logging.WARNING)


def env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# create the app
app = Flask(__name__)
app.wsgi_app = ProxyFix(app.wsgi_app, x_proto=1, x_host=1)

# Seconds a cached source stays fresh enough to serve without scraping (0 = always scrape live)
app.config["TRENDING_CACHE_MAX_AGE"] = float(os.environ.get("TRENDING_CACHE_MAX_AGE", "0"))
# The 12-hourly refresh ships disabled
app.config["TRENDING_SCHEDULER_ENABLED"] = env_flag("TRENDING_SCHEDULER_ENABLED")
app.config["TRENDING_REFRESH_ON_STARTUP"] = env_flag("TRENDING_REFRESH_ON_STARTUP")

scheduler = None

with app.app_context():
    import routes  # noqa: F401

    from scheduler import TrendingScheduler, run_initial_refresh

    if app.config["TRENDING_SCHEDULER_ENABLED"]:
        scheduler = TrendingScheduler()
        scheduler.start()

    if app.config["TRENDING_REFRESH_ON_STARTUP"]:
        threading.Thread(target=run_initial_refresh, daemon=True, name="TrendingInitialRefresh").start()
        logging.info("Started initial trending refresh in the background")
