import json
import logging
import os
import tempfile
import threading
from datetime import datetime, timezone
from pathlib import Path

from models import OutfitRecord

logger = logging.getLogger(__name__)

# Disk-backed cache: one JSON document keyed by source name
# {"pinterest": {"data": [...], "lastUpdated": "2025-10-27T12:00:00+00:00"}, ...}
CACHE_FILE = Path(os.environ.get("TRENDING_CACHE_FILE", "data/trending.json"))

# Saves do a full-document read-modify-write; serialize them so concurrent
# refreshes of different sources don't drop each other's entries
_write_lock = threading.Lock()


def _read_document():
    """Read the whole cache document, treating a missing or corrupt file as empty"""
    try:
        with open(CACHE_FILE, 'r', encoding='utf-8') as f:
            document = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        logger.warning(f"Unreadable cache file {CACHE_FILE}, starting fresh: {e}")
        return {}

    if not isinstance(document, dict):
        logger.warning(f"Cache file {CACHE_FILE} is not a JSON object, starting fresh")
        return {}
    return document


def _write_document(document):
    CACHE_FILE.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=CACHE_FILE.parent, prefix='.trending-', suffix='.json')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            json.dump(document, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, CACHE_FILE)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def save_to_cache(source, records):
    """
    Replace the cached entry for a source with a fresh result set

    Failures are logged rather than raised; a cache write must never fail a scrape.
    """
    with _write_lock:
        document = _read_document()
        document[source] = {
            'data': [record.to_dict() for record in records],
            'lastUpdated': datetime.now(timezone.utc).isoformat(),
        }
        try:
            _write_document(document)
        except OSError as e:
            logger.error(f"Error saving {source} to cache: {e}")
            return

    logger.info(f"Saved {len(records)} items to cache for {source}")


def load_from_cache(source):
    """Return the cached records for a source, or an empty list if there are none"""
    entry = _read_document().get(source)
    if not isinstance(entry, dict) or not entry.get('data'):
        logger.debug(f"No cache available for {source}")
        return []

    data = entry['data']
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        logger.warning(f"Ignoring malformed cache entry for {source}")
        return []

    try:
        records = [OutfitRecord.from_dict(item) for item in data]
    except (TypeError, AttributeError, ValueError) as e:
        logger.warning(f"Could not read cached records for {source}: {e}")
        return []
    logger.info(f"Loaded {len(records)} items from cache for {source} (last updated {entry.get('lastUpdated')})")
    return records


def get_cache_age(source):
    """Seconds since the source was last cached, or None if never cached"""
    entry = _read_document().get(source)
    if not isinstance(entry, dict) or not entry.get('lastUpdated'):
        return None

    try:
        last_updated = datetime.fromisoformat(entry['lastUpdated'])
    except (TypeError, ValueError):
        return None
    if last_updated.tzinfo is None:
        last_updated = last_updated.replace(tzinfo=timezone.utc)

    return (datetime.now(timezone.utc) - last_updated).total_seconds()


def get_cache_stats():
    """Item count and last update time per cached source"""
    stats = {}
    for source, entry in _read_document().items():
        if not isinstance(entry, dict):
            continue
        data = entry.get('data')
        stats[source] = {
            'count': len(data) if isinstance(data, list) else 0,
            'lastUpdated': entry.get('lastUpdated', 'unknown'),
        }
    return stats
